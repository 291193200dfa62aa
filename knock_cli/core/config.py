"""XDG-compliant user configuration for the knock CLI."""

import os
import tomllib
from pathlib import Path
from typing import Optional

DEFAULT_API_ORIGIN = "https://control.knock.app"


class Config:
    """Loads ~/.config/knock/config.toml following the XDG Base Directory spec.

    Attributes:
        config_dir: Path to ~/.config/knock/
        config_file: Path to ~/.config/knock/config.toml
    """

    def __init__(self, config_dir: Optional[Path] = None):
        if config_dir is None:
            xdg_config = os.getenv("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
            config_dir = Path(xdg_config) / "knock"
        self.config_dir = Path(config_dir)
        self.config_file = self.config_dir / "config.toml"

        self._config = self._load() if self.config_file.exists() else {}

    def exists(self) -> bool:
        """Check if config file exists."""
        return self.config_file.exists()

    def _load(self) -> dict:
        """Load configuration from TOML file."""
        try:
            with open(self.config_file, "rb") as f:
                return tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise RuntimeError(f"Failed to load config {self.config_file}: {e}") from e

    def get(self, key: str, default=None):
        """Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'api.origin')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value = self._config

        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def resolve_service_token(self, flag_value: Optional[str]) -> Optional[str]:
        """Service token from the flag (or its env var), falling back to config."""
        return flag_value or self.get("service_token")

    def resolve_api_origin(self, flag_value: Optional[str]) -> str:
        """API origin from the flag, then config, then the public default."""
        return flag_value or self.get("api_origin") or DEFAULT_API_ORIGIN
