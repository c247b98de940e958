"""Configuration for the termhyo command line.

Defaults are read from a YAML file, searched in priority order:

1. A path given explicitly (``--config``)
2. ``./termhyo.yaml`` in the current directory
3. ``~/.termhyo/config.yaml``

Example file::

    border: rounded
    header_style: bold
    padding: 1
    max_width: 40
    auto_align: true
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from .borders import BorderStyle
from .exceptions import ConfigError
from .header_styles import HeaderStyle

LOCAL_CONFIG_NAME = "termhyo.yaml"


@dataclass
class Config:
    """Table defaults for the command line."""

    border: BorderStyle = BorderStyle.BOX_DRAWING
    header_style: str = "none"
    padding: int = 1
    max_width: int = 0
    auto_align: bool = True

    @staticmethod
    def get_default_config_path() -> Path:
        return Path.home() / ".termhyo" / "config.yaml"

    @classmethod
    def find_config_file(cls, explicit_path=None) -> Optional[Path]:
        """Find the configuration file to load.

        Args:
            explicit_path: Path given by the user; returned as-is even if it
                does not exist so the caller can report it

        Returns:
            The first candidate found, or None
        """
        if explicit_path:
            return Path(explicit_path)

        for path in (Path.cwd() / LOCAL_CONFIG_NAME, cls.get_default_config_path()):
            if path.is_file():
                return path
        return None

    @classmethod
    def load(cls, explicit_path=None) -> "Config":
        """Load the highest-priority configuration file, or the defaults."""
        path = cls.find_config_file(explicit_path)
        if path is None:
            return cls()
        return cls.from_yaml(path)

    @classmethod
    def from_yaml(cls, path) -> "Config":
        """Load configuration from a YAML file.

        Raises:
            FileNotFoundError: The file does not exist
            ConfigError: The file is not valid YAML or holds invalid values
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML: {e}", path=str(path)) from e

        return cls.from_dict(data or {}, path=str(path))

    @classmethod
    def from_dict(cls, data, path: str = None) -> "Config":
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a mapping", path=path)

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}", path=path)

        config = cls()
        for key, value in data.items():
            setattr(config, key, cls._validate(key, value, path))
        return config

    @staticmethod
    def _validate(key: str, value, path: Optional[str]):
        if key == "border":
            try:
                return BorderStyle.parse(value)
            except ValueError as e:
                raise ConfigError(str(e), path=path, key=key) from e

        if key == "header_style":
            try:
                HeaderStyle.from_name(str(value))
            except ValueError as e:
                raise ConfigError(str(e), path=path, key=key) from e
            return str(value).strip().lower()

        if key == "auto_align":
            if not isinstance(value, bool):
                raise ConfigError("Expected true or false", path=path, key=key)
            return value

        # padding, max_width
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigError("Expected a non-negative integer", path=path, key=key)
        return value
