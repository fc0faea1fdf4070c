"""Load [tool.parameter-number] from pyproject.toml. Infrastructure I/O only."""

import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib

from parameter_number.domain.constants import CONFIG_SECTION
from parameter_number.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigFileLoader:
    """Loads the rule's property section from the nearest pyproject.toml."""

    @staticmethod
    def find_pyproject(start: Path | None = None) -> Path | None:
        """Walk up from start (default: cwd) to the first pyproject.toml."""
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if config_file.is_file():
                return config_file
        return None

    @staticmethod
    def load_config_from_fs(start: Path | None = None) -> dict[str, object]:
        """Return the [tool.parameter-number] table, or {} when there is none."""
        config_file = ConfigFileLoader.find_pyproject(start)
        if config_file is None:
            logger.debug("No pyproject.toml found; using defaults")
            return {}
        return ConfigFileLoader.load_config_from_file(config_file)

    @staticmethod
    def load_config_from_file(config_file: Path) -> dict[str, object]:
        """Read one pyproject.toml. A malformed file is a configuration error."""
        try:
            with config_file.open("rb") as f:
                data = toml_lib.load(f)
        except toml_lib.TOMLDecodeError as exc:
            raise ConfigurationError(f"{config_file}: {exc}") from exc
        except OSError as exc:
            logger.warning("Could not read %s: %s", config_file, exc)
            return {}
        tool_section = data.get("tool", {}) or {}
        section = tool_section.get(CONFIG_SECTION, {}) or {}
        if not isinstance(section, dict):
            raise ConfigurationError(
                f"{config_file}: [tool.{CONFIG_SECTION}] must be a table"
            )
        logger.debug("Loaded [tool.%s] from %s", CONFIG_SECTION, config_file)
        return section
