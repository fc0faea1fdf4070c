"""Domain models for rules and findings."""

from dataclasses import dataclass, replace

__all__ = [
    "Checkable",
    "Finding",
    "KindDispatchedRule",
]

from typing import Protocol

from parameter_number.domain.syntax import SyntaxNode, TokenType


@dataclass(frozen=True)
class Finding:
    """A single rule violation: where it is and the arguments for its message."""

    code: str
    message_key: str
    line: int
    column: int
    max_parameters: int
    count: int
    name: str = ""
    path: str | None = None
    """Filled in by the use case that knows which file the tree came from."""

    @property
    def message_args(self) -> tuple[int, int]:
        """Arguments for the message template, in template order."""
        return (self.max_parameters, self.count)

    @property
    def location(self) -> str:
        """path:line:column (path omitted when unknown)."""
        if self.path:
            return f"{self.path}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"

    def with_path(self, path: str) -> "Finding":
        return replace(self, path=path)


class Checkable(Protocol):
    """One-and-done check: given a node, return findings."""

    code: str
    description: str

    def check(self, node: SyntaxNode) -> list[Finding]:
        """Interrogate a node for violations."""
        ...


class KindDispatchedRule(Protocol):
    """A rule the tree walker dispatches to by node kind."""

    def applicable_kinds(self) -> frozenset[TokenType]:
        ...

    def evaluate(self, node: SyntaxNode) -> Finding | None:
        ...
