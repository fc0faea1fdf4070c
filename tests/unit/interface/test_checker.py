"""Unit tests for checker (Pylint plugin registration)."""

from unittest.mock import MagicMock

from parameter_number.infrastructure.checker import register
from parameter_number.use_cases.checks.parameter_number import ParameterNumberChecker


class TestCheckerRegister:
    """Test register(linter) entry point."""

    def test_register_adds_parameter_number_checker(self) -> None:
        linter = MagicMock()

        register(linter)

        linter.register_checker.assert_called_once()
        checker = linter.register_checker.call_args[0][0]
        assert isinstance(checker, ParameterNumberChecker)
        assert checker.name == "parameter-number"
        assert "R9701" in checker.msgs
