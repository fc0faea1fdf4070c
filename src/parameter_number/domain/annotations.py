"""Annotation lookup on declaration nodes."""

from typing import Protocol

from parameter_number.domain.syntax import SyntaxNode, TokenType


class AnnotationResolver(Protocol):
    """Answers whether a declaration carries an annotation with a given name."""

    def contains_annotation(self, declaration: SyntaxNode, name: str) -> bool:
        ...


class TreeAnnotationResolver(AnnotationResolver):
    """
    Textual resolver: scans the declaration's annotations and compares the
    written name (``Override`` or ``java.lang.Override``) for equality.

    No import or scope resolution is attempted, so a foreign annotation
    spelled the same way matches too.
    """

    def contains_annotation(self, declaration: SyntaxNode, name: str) -> bool:
        return any(
            self.annotation_name(annotation) == name
            for annotation in self.iter_annotations(declaration)
        )

    @staticmethod
    def iter_annotations(declaration: SyntaxNode) -> list[SyntaxNode]:
        """Annotations live under MODIFIERS; some trees attach them directly."""
        holder = declaration.find_first_token(TokenType.MODIFIERS) or declaration
        return list(holder.iter_children(TokenType.ANNOTATION))

    @staticmethod
    def annotation_name(annotation: SyntaxNode) -> str:
        """Written name of an annotation: its identifier, or the dotted path."""
        for child in annotation.children:
            if child.kind is TokenType.IDENT:
                return child.text
            if child.kind is TokenType.DOT:
                return TreeAnnotationResolver.full_ident(child)
        return ""

    @staticmethod
    def full_ident(node: SyntaxNode) -> str:
        """Flatten a DOT subtree (or a lone IDENT) into ``a.b.c``."""
        return ".".join(
            part.text for part in node.walk() if part.kind is TokenType.IDENT
        )
