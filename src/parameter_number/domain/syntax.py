"""Read-only syntax tree handed to rules by a tree provider."""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Fixed node-kind taxonomy. Rules dispatch on these tags."""

    COMPILATION_UNIT = "compilation unit"
    CLASS_DEF = "class declaration"
    METHOD_DEF = "method declaration"
    CTOR_DEF = "constructor declaration"
    MODIFIERS = "modifiers"
    ANNOTATION = "annotation"
    AT = "at"
    DOT = "dot"
    IDENT = "identifier"
    LPAREN = "left parenthesis"
    RPAREN = "right parenthesis"
    PARAMETERS = "parameter list"
    PARAMETER_DEF = "parameter"
    COMMA = "comma"
    TYPE = "type"
    COMMENT = "comment"
    SLIST = "statement list"


@dataclass(frozen=True)
class SyntaxNode:
    """
    A node of a parsed-source tree.

    Leaf identifier/keyword nodes carry ``text`` and a source position
    (1-based ``line``, 0-based ``column``); structural nodes usually do not.
    """

    kind: TokenType
    children: tuple["SyntaxNode", ...] = ()
    text: str = ""
    line: int | None = None
    column: int | None = None

    @classmethod
    def leaf(
        cls, kind: TokenType, text: str, line: int | None = None, column: int | None = None
    ) -> "SyntaxNode":
        """Build a positioned leaf (identifier, keyword, punctuation)."""
        return cls(kind=kind, text=text, line=line, column=column)

    @classmethod
    def branch(cls, kind: TokenType, *children: "SyntaxNode") -> "SyntaxNode":
        """Build a structural node from its ordered children."""
        return cls(kind=kind, children=tuple(children))

    @property
    def has_position(self) -> bool:
        return self.line is not None and self.column is not None

    def find_first_token(self, kind: TokenType) -> "SyntaxNode | None":
        """Return the first direct child of the given kind, or None."""
        return next((child for child in self.children if child.kind is kind), None)

    def get_child_count(self, kind: TokenType | None = None) -> int:
        """Count direct children, optionally only those of one kind."""
        if kind is None:
            return len(self.children)
        return sum(1 for child in self.children if child.kind is kind)

    def iter_children(self, kind: TokenType) -> Iterator["SyntaxNode"]:
        """Yield direct children of the given kind in source order."""
        return (child for child in self.children if child.kind is kind)

    def walk(self) -> Iterator["SyntaxNode"]:
        """Depth-first pre-order traversal, self included."""
        stack: list[SyntaxNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))
