"""Configuration management for toolbox.

Where: src/toolbox/config/config.py
What: Load the optional ``toolbox.toml`` file into a cached ``Config`` dataclass.
Why: Let deployments tune VFS and logging defaults without code changes.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from toolbox.config.paths import default_config_path
from toolbox.platform.logging import logger
from toolbox.shared.errors import ToolboxError


class ConfigError(ToolboxError):
    """Raised when the configuration file cannot be parsed or holds bad values."""


def _path_field(default: Path | None = None) -> Any:
    """Create a field whose string values are converted to ``Path`` on init."""
    return field(default=default, metadata={"path": True})


# Accepted ``[vfs] escape_policy`` values, compared case-insensitively
ESCAPE_POLICIES: Final[tuple[str, ...]] = ("deny", "clamp", "allow")

# Attributes limited to a fixed set of values
_CHOICES: dict[str, tuple[str, ...]] = {"vfs_escape_policy": ESCAPE_POLICIES}

# TOML table -> {key in table: dataclass attribute}
_SECTIONS: dict[str, dict[str, str]] = {
    "vfs": {
        "escape_policy": "vfs_escape_policy",
        "create_root": "vfs_create_root",
    },
    "logging": {
        "console_level": "log_console_level",
        "file": "log_to_file",
        "path": "log_file",
    },
}


@dataclass
class Config:
    """Library configuration."""

    # What to do when ``..`` climbs above a VFS root: deny, clamp or allow
    vfs_escape_policy: str = "deny"

    # Create missing VFS roots on construction
    vfs_create_root: bool = False

    # Console log level name
    log_console_level: str = "INFO"

    # Also write a rotating log file
    log_to_file: bool = False

    # Log file path; the portable default is used when unset
    log_file: Path | None = _path_field()

    _instance: ClassVar[Config | None] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> Config:
        """Build a config from a parsed TOML document.

        Raises:
            ConfigError: On unknown tables or keys, values of the wrong type,
                or values outside a fixed set of choices.
        """
        values: dict[str, Any] = {}
        defaults = cls()
        for section, table in data.items():
            keys = _SECTIONS.get(section)
            if keys is None or not isinstance(table, dict):
                raise ConfigError(f"Unknown configuration section '{section}'")
            for key, value in table.items():  # pyright: ignore[reportUnknownVariableType]
                attribute = keys.get(str(key))  # pyright: ignore[reportUnknownArgumentType]
                if attribute is None:
                    raise ConfigError(f"Unknown configuration key '{section}.{key}'")
                expected = bool if isinstance(getattr(defaults, attribute), bool) else str
                if not isinstance(value, expected):
                    raise ConfigError(
                        f"'{section}.{key}' must be a {expected.__name__}, got {value!r}"
                    )
                choices = _CHOICES.get(attribute)
                if choices is not None and value.strip().lower() not in choices:
                    raise ConfigError(
                        f"'{section}.{key}' must be one of {', '.join(choices)}, got {value!r}"
                    )
                values[attribute] = value
        return cls(**values)

    @classmethod
    def load(cls, config_file: Path | None = None) -> Config:
        """Load configuration from file, caching the instance.

        A missing file yields defaults; the file is never written back.

        Args:
            config_file: Explicit file to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file is not valid TOML or holds invalid values.
        """
        target = config_file or default_config_path()
        if cls._instance is not None and cls._loaded_from == target:
            return cls._instance

        if target.is_file():
            try:
                with open(target, "rb") as f:
                    data = tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"Invalid TOML in {target}: {exc}") from exc
            instance = cls.from_mapping(data)
            logger.debug("Configuration loaded from %s", target)
        else:
            instance = cls()
            logger.debug("No configuration at %s; using defaults", target)

        cls._instance = instance
        cls._loaded_from = target
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` rereads the file."""
        cls._instance = None
        cls._loaded_from = None


config = Config.load()


__all__ = ["ESCAPE_POLICIES", "Config", "ConfigError", "config"]
