"""Exception hierarchy for the parameter-number linter."""


class ParameterNumberError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(ParameterNumberError, ValueError):
    """Rule configuration is invalid (e.g. a non-positive maximum)."""


class StructuralInvariantViolation(ParameterNumberError):
    """
    A declaration node does not have the shape the rule relies on.

    Raised when the tree provider hands over a node without a parameter list,
    or without a positioned name identifier when a finding must be reported.
    This is a contract breach by the host and is never recovered from.
    """

    def __init__(self, message: str, kind: object | None = None) -> None:
        super().__init__(message)
        self.kind = kind


class ParseFailure(ParameterNumberError):
    """A source file could not be turned into a syntax tree."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
