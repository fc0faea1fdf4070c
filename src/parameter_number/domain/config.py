"""Rule configuration. Immutable value object built once before a run."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import ClassVar

from parameter_number.domain.constants import (
    DEFAULT_MAX_PARAMETERS,
    DEFAULT_OVERRIDE_NAMES,
)
from parameter_number.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleConfig:
    """
    Threshold and exemption policy for the parameter-number rule.

    Validated on construction; a non-positive maximum is rejected rather
    than clamped.
    """

    max_parameters: int = DEFAULT_MAX_PARAMETERS
    ignore_overridden: bool = False
    override_names: tuple[str, ...] = DEFAULT_OVERRIDE_NAMES

    # Property-source keys, first entry is the canonical spelling
    MAX_KEYS: ClassVar[tuple[str, ...]] = ("max", "max_parameters", "max-parameters")
    IGNORE_KEYS: ClassVar[tuple[str, ...]] = (
        "ignoreOverriddenMethods",
        "ignore_overridden_methods",
        "ignore-overridden-methods",
    )
    OVERRIDE_KEYS: ClassVar[tuple[str, ...]] = (
        "overrideNames",
        "override_names",
        "override-names",
    )

    def __post_init__(self) -> None:
        if isinstance(self.max_parameters, bool) or not isinstance(self.max_parameters, int):
            raise ConfigurationError(
                f"max must be a positive integer, got {self.max_parameters!r}"
            )
        if self.max_parameters <= 0:
            raise ConfigurationError(
                f"max must be a positive integer, got {self.max_parameters}"
            )
        if not isinstance(self.ignore_overridden, bool):
            raise ConfigurationError(
                f"ignoreOverriddenMethods must be a boolean, got {self.ignore_overridden!r}"
            )
        if not self.override_names or not all(
            isinstance(name, str) and name for name in self.override_names
        ):
            raise ConfigurationError("override names must be non-empty strings")

    def replace(self, **changes: object) -> RuleConfig:
        """Return a copy with the given fields changed; None means not supplied."""
        values: dict[str, object] = {
            "max_parameters": self.max_parameters,
            "ignore_overridden": self.ignore_overridden,
            "override_names": self.override_names,
        }
        values.update({k: v for k, v in changes.items() if v is not None})
        return RuleConfig(**values)  # type: ignore[arg-type]

    @classmethod
    def from_mapping(
        cls,
        raw: Mapping[str, object],
        defaults: RuleConfig | None = None,
    ) -> RuleConfig:
        """
        Build a config from a property source such as ``[tool.parameter-number]``.

        Accepted shape: ``{max: int, ignoreOverriddenMethods: bool}`` plus the
        snake_case and kebab-case aliases. Unknown keys are logged and ignored.
        """
        base = defaults or cls()
        known = set(cls.MAX_KEYS) | set(cls.IGNORE_KEYS) | set(cls.OVERRIDE_KEYS)
        for key in raw:
            if key not in known:
                logger.warning("Ignoring unknown parameter-number option %r", key)

        max_value = cls._first(raw, cls.MAX_KEYS)
        ignore_value = cls._first(raw, cls.IGNORE_KEYS)
        names_value = cls._first(raw, cls.OVERRIDE_KEYS)
        return base.replace(
            max_parameters=cls._coerce_int(max_value) if max_value is not None else None,
            ignore_overridden=cls._coerce_bool(ignore_value) if ignore_value is not None else None,
            override_names=cls._coerce_names(names_value) if names_value is not None else None,
        )

    @staticmethod
    def _first(raw: Mapping[str, object], keys: tuple[str, ...]) -> object | None:
        for key in keys:
            if key in raw:
                return raw[key]
        return None

    @staticmethod
    def _coerce_int(value: object) -> int:
        if isinstance(value, bool):
            raise ConfigurationError(f"max must be a positive integer, got {value!r}")
        if isinstance(value, int):
            return value
        if isinstance(value, str) and value.strip().lstrip("-").isdigit():
            return int(value.strip())
        raise ConfigurationError(f"max must be a positive integer, got {value!r}")

    @staticmethod
    def _coerce_bool(value: object) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in ("true", "yes", "y", "1"):
            return True
        if isinstance(value, str) and value.strip().lower() in ("false", "no", "n", "0"):
            return False
        raise ConfigurationError(
            f"ignoreOverriddenMethods must be a boolean, got {value!r}"
        )

    @staticmethod
    def _coerce_names(value: object) -> tuple[str, ...]:
        if isinstance(value, str):
            return tuple(part.strip() for part in value.split(",") if part.strip())
        if isinstance(value, (list, tuple)):
            return tuple(str(part) for part in value)
        raise ConfigurationError(f"override names must be a list of strings, got {value!r}")
