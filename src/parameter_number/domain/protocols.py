from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol

from parameter_number.domain.registry_types import RuleRegistryEntry

if TYPE_CHECKING:
    import astroid

    from parameter_number.domain.syntax import SyntaxNode


class TreeGatewayProtocol(Protocol):
    """Tree provider: parses Python sources and adapts declarations to SyntaxNode trees."""

    def parse_file(self, file_path: str) -> "astroid.nodes.Module":
        """Parse a file. Raises ParseFailure when it cannot be read or parsed."""
        ...

    def to_declaration(self, node: "astroid.nodes.FunctionDef") -> "SyntaxNode":
        ...

    def to_tree(self, module: "astroid.nodes.Module") -> "SyntaxNode":
        ...

    def iter_declarations(
        self, module: "astroid.nodes.Module"
    ) -> Iterator["astroid.nodes.FunctionDef"]:
        ...


class MessageCatalogProtocol(Protocol):
    """Protocol for the rule registry holding message templates."""

    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        ...


class FileSystemProtocol(Protocol):
    def exists(self, path: str) -> bool: ...
    def is_directory(self, path: str) -> bool: ...
    def glob_python_files(self, path: str) -> list[str]: ...
