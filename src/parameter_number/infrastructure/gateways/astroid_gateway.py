"""Tree provider over astroid: adapts Python function definitions to SyntaxNode declarations."""

from collections.abc import Iterator
from pathlib import Path

import astroid

from parameter_number.domain.errors import ParseFailure
from parameter_number.domain.protocols import TreeGatewayProtocol
from parameter_number.domain.syntax import SyntaxNode, TokenType

_T = TokenType


class AstroidTreeGateway(TreeGatewayProtocol):
    """
    Builds declaration trees from astroid nodes.

    ``__init__`` defined in a class body becomes a CTOR_DEF, every other
    function a METHOD_DEF. Decorators become ANNOTATION children of MODIFIERS,
    so ``@override`` and ``@typing.override`` read like ``@Override`` and
    ``@java.lang.Override`` to the rule. The implicit receiver (``self``,
    ``cls``) is not a parameter.
    """

    def parse_file(self, file_path: str) -> astroid.nodes.Module:
        """Parse a file and return the astroid Module node."""
        try:
            source = Path(file_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ParseFailure(file_path, str(exc)) from exc
        return self.parse_source(source, file_path)

    def parse_source(self, source: str, file_path: str = "<string>") -> astroid.nodes.Module:
        try:
            return astroid.parse(source, path=file_path)
        except astroid.AstroidSyntaxError as exc:
            raise ParseFailure(file_path, str(exc)) from exc

    def iter_declarations(self, module: astroid.nodes.Module) -> Iterator[astroid.nodes.FunctionDef]:
        """Every function and method in source order (async ones included)."""
        return module.nodes_of_class(astroid.nodes.FunctionDef)

    def to_tree(self, module: astroid.nodes.Module) -> SyntaxNode:
        return SyntaxNode.branch(
            _T.COMPILATION_UNIT,
            *(self.to_declaration(fn) for fn in self.iter_declarations(module)),
        )

    def to_declaration(self, node: astroid.nodes.FunctionDef) -> SyntaxNode:
        kind = _T.CTOR_DEF if self.is_constructor(node) else _T.METHOD_DEF
        line, column = self.name_position(node)
        return SyntaxNode.branch(
            kind,
            self._modifiers(node),
            SyntaxNode.leaf(_T.IDENT, node.name, line, column),
            SyntaxNode.leaf(_T.LPAREN, "("),
            self._parameters(node),
            SyntaxNode.leaf(_T.RPAREN, ")"),
        )

    @staticmethod
    def is_constructor(node: astroid.nodes.FunctionDef) -> bool:
        return node.name == "__init__" and node.is_method()

    @staticmethod
    def name_position(node: astroid.nodes.FunctionDef) -> tuple[int, int]:
        """Line and column of the function name token."""
        position = getattr(node, "position", None)
        if position is not None:
            return position.end_lineno, position.end_col_offset - len(node.name)
        keyword = "async def " if isinstance(node, astroid.nodes.AsyncFunctionDef) else "def "
        return node.lineno, node.col_offset + len(keyword)

    def _modifiers(self, node: astroid.nodes.FunctionDef) -> SyntaxNode:
        annotations: list[SyntaxNode] = []
        if node.decorators is not None:
            for decorator in node.decorators.nodes:
                annotation = self._annotation(decorator)
                if annotation is not None:
                    annotations.append(annotation)
        return SyntaxNode.branch(_T.MODIFIERS, *annotations)

    def _annotation(self, decorator: astroid.nodes.NodeNG) -> SyntaxNode | None:
        target = decorator.func if isinstance(decorator, astroid.nodes.Call) else decorator
        name = self._name_node(target)
        if name is None:
            return None
        at = SyntaxNode.leaf(_T.AT, "@", decorator.lineno, max(decorator.col_offset - 1, 0))
        return SyntaxNode.branch(_T.ANNOTATION, at, name)

    def _name_node(self, expr: astroid.nodes.NodeNG) -> SyntaxNode | None:
        """Name -> IDENT, Attribute chain -> DOT tree; anything else has no name."""
        if isinstance(expr, astroid.nodes.Name):
            return SyntaxNode.leaf(_T.IDENT, expr.name, expr.lineno, expr.col_offset)
        if isinstance(expr, astroid.nodes.Attribute):
            left = self._name_node(expr.expr)
            if left is None:
                return None
            end_col = expr.end_col_offset
            column = end_col - len(expr.attrname) if end_col is not None else expr.col_offset
            right = SyntaxNode.leaf(_T.IDENT, expr.attrname, expr.end_lineno or expr.lineno, column)
            return SyntaxNode.branch(_T.DOT, left, right)
        return None

    def _parameters(self, node: astroid.nodes.FunctionDef) -> SyntaxNode:
        args = node.args
        fallback = self.name_position(node)
        params: list[SyntaxNode] = []

        positional = list(args.posonlyargs or []) + list(args.args or [])
        if positional and node.is_method() and node.type != "staticmethod":
            positional = positional[1:]
        for arg in positional:
            params.append(self._parameter(arg.name, arg.lineno, arg.col_offset))
        if args.vararg:
            params.append(self._starred(args, "vararg", fallback))
        for arg in args.kwonlyargs or []:
            params.append(self._parameter(arg.name, arg.lineno, arg.col_offset))
        if args.kwarg:
            params.append(self._starred(args, "kwarg", fallback))

        children: list[SyntaxNode] = []
        for index, param in enumerate(params):
            if index:
                children.append(SyntaxNode.leaf(_T.COMMA, ","))
            children.append(param)
        return SyntaxNode.branch(_T.PARAMETERS, *children)

    def _starred(
        self, args: astroid.nodes.Arguments, attr: str, fallback: tuple[int, int]
    ) -> SyntaxNode:
        # vararg_node / kwarg_node only exist on newer astroid releases
        name_node = getattr(args, f"{attr}_node", None)
        if name_node is not None:
            return self._parameter(getattr(args, attr), name_node.lineno, name_node.col_offset)
        return self._parameter(getattr(args, attr), *fallback)

    @staticmethod
    def _parameter(name: str, line: int | None, column: int | None) -> SyntaxNode:
        return SyntaxNode.branch(_T.PARAMETER_DEF, SyntaxNode.leaf(_T.IDENT, name, line, column))
