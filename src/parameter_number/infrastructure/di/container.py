"""Dependency Injection Container: one shared instance of each gateway and service."""

from typing import Any, Optional

from parameter_number.infrastructure.gateways.astroid_gateway import AstroidTreeGateway
from parameter_number.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from parameter_number.infrastructure.services.message_catalog import MessageCatalog


class ParameterNumberContainer:
    """Dependency Injection Container for the parameter-number linter."""

    _instance: Optional["ParameterNumberContainer"] = None

    def __init__(self) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default implementations for protocols."""
        self.register_singleton("AstroidTreeGateway", AstroidTreeGateway())
        self.register_singleton("FileSystemGateway", FileSystemGateway())
        self.register_singleton("MessageCatalog", MessageCatalog())

    @classmethod
    def get_instance(cls) -> "ParameterNumberContainer":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register_singleton(self, key: str, instance: Any) -> None:
        self._singletons[key] = instance

    def get_tree_gateway(self) -> AstroidTreeGateway:
        return self._singletons["AstroidTreeGateway"]

    def get_filesystem_gateway(self) -> FileSystemGateway:
        return self._singletons["FileSystemGateway"]

    def get_message_catalog(self) -> MessageCatalog:
        return self._singletons["MessageCatalog"]
