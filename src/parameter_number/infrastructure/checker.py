"""
Pylint plugin entry point - composition root for the checker plugin.

Enable with ``load-plugins=parameter_number.infrastructure.checker``.
"""

from pylint.lint import PyLinter

from parameter_number.infrastructure.di.container import ParameterNumberContainer
from parameter_number.use_cases.checks.parameter_number import ParameterNumberChecker


def register(linter: PyLinter) -> None:
    """Register checkers."""
    container = ParameterNumberContainer.get_instance()
    linter.register_checker(
        ParameterNumberChecker(
            linter,
            tree_gateway=container.get_tree_gateway(),
            registry=container.get_message_catalog().get_registry(),
        )
    )
