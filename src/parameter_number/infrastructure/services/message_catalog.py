"""MessageCatalog: loads the rule registry (message templates and translations)."""

import logging
from pathlib import Path
from typing import cast

import yaml

from parameter_number.domain.protocols import MessageCatalogProtocol
from parameter_number.domain.registry_types import RuleRegistryEntry

logger = logging.getLogger(__name__)


class MessageCatalog(MessageCatalogProtocol):
    """Loads rule_registry.yaml and serves the registry mapping."""

    def __init__(self, registry_path: str | None = None) -> None:
        if registry_path is not None:
            self._path = Path(registry_path)
        else:
            # Default: packaged resource
            _base = Path(__file__).resolve().parents[2]
            self._path = _base / "resources" / "rule_registry.yaml"
        self._registry: dict[str, RuleRegistryEntry] = {}
        self._load()

    def _load(self) -> None:
        if not self._path.exists():
            logger.warning("Rule registry %s not found; using built-in messages", self._path)
            self._registry = {}
            return
        with open(self._path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        self._registry = (
            cast(dict[str, RuleRegistryEntry], data) if isinstance(data, dict) else {}
        )

    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        """Return a shallow copy of the loaded registry."""
        return dict(self._registry)
