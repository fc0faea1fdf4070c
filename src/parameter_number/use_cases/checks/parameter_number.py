"""Parameter number check (R9701) as a pylint checker."""

import sys
from collections.abc import Mapping
from typing import TYPE_CHECKING

import astroid
from pylint.checkers import BaseChecker

if TYPE_CHECKING:
    from pylint.lint import PyLinter

from parameter_number.domain.config import RuleConfig
from parameter_number.domain.constants import (
    DEFAULT_MAX_PARAMETERS,
    DEFAULT_MESSAGE_TEMPLATE,
    PYTHON_OVERRIDE_NAMES,
    RULE_CODE,
    RULE_SYMBOL,
)
from parameter_number.domain.errors import ConfigurationError
from parameter_number.domain.protocols import TreeGatewayProtocol
from parameter_number.domain.registry_types import RuleRegistryEntry
from parameter_number.domain.rule_msgs import RuleMsgBuilder
from parameter_number.domain.rules.parameter_number import ParameterNumberRule

# pylint exits with 32 on usage errors
USAGE_ERROR_EXIT_CODE = 32


class ParameterNumberChecker(BaseChecker):
    """R9701: too many parameters on a function, method or __init__."""

    name: str = "parameter-number"
    CODES = [RULE_CODE]

    options = (
        (
            "max-parameters",
            {
                "default": DEFAULT_MAX_PARAMETERS,
                "type": "int",
                "metavar": "<int>",
                "help": "Maximum number of parameters for a function or method "
                "(self/cls not counted).",
            },
        ),
        (
            "ignore-overridden-methods",
            {
                "default": False,
                "type": "yn",
                "metavar": "<y or n>",
                "help": "Do not count parameters of methods decorated with @override.",
            },
        ),
        (
            "override-decorators",
            {
                "default": PYTHON_OVERRIDE_NAMES,
                "type": "csv",
                "metavar": "<decorator names>",
                "help": "Decorator spellings that mark a method as an override.",
            },
        ),
    )

    def __init__(
        self,
        linter: "PyLinter",
        tree_gateway: TreeGatewayProtocol,
        registry: Mapping[str, RuleRegistryEntry],
    ) -> None:
        self.msgs = RuleMsgBuilder.build_msgs_for_codes(
            registry, self.CODES)  # type: ignore[assignment]
        if RULE_CODE not in self.msgs:
            self.msgs[RULE_CODE] = (
                DEFAULT_MESSAGE_TEMPLATE,
                RULE_SYMBOL,
                "Method or constructor declares more parameters than allowed.",
            )
        super().__init__(linter)
        self._tree_gateway = tree_gateway
        self._rule = ParameterNumberRule()

    def open(self) -> None:
        """Build the rule configuration from pylint options (once per run)."""
        config = self.linter.config
        try:
            rule_config = RuleConfig.from_mapping(
                {
                    "max": config.max_parameters,
                    "ignoreOverriddenMethods": config.ignore_overridden_methods,
                    "overrideNames": list(config.override_decorators),
                }
            )
        except ConfigurationError as exc:
            print(f"{self.name}: invalid configuration: {exc}", file=sys.stderr)
            sys.exit(USAGE_ERROR_EXIT_CODE)
        self._rule = ParameterNumberRule(config=rule_config)

    def visit_functiondef(self, node: astroid.nodes.FunctionDef) -> None:
        declaration = self._tree_gateway.to_declaration(node)
        for finding in self._rule.check(declaration):
            self.add_message(
                finding.code,
                line=finding.line,
                node=node,
                args=finding.message_args,
                col_offset=finding.column,
                end_lineno=finding.line,
                end_col_offset=finding.column + len(finding.name),
            )

    visit_asyncfunctiondef = visit_functiondef
