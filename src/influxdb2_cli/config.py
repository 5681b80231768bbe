"""Configuration management for the InfluxDB 2 CLI."""

import json
from pathlib import Path
from typing import Any, Optional

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel, Field, ValidationError

_APP_DIR = "influxdb2-cli"


class APIConfig(BaseModel):
    """API configuration."""

    url: str = Field(default="http://localhost:8086")
    org: Optional[str] = Field(default=None)
    timeout: float = Field(default=30.0, gt=0)


class OutputConfig(BaseModel):
    """Output configuration."""

    format: str = Field(default="table")


class Config(BaseModel):
    """Main configuration."""

    api: APIConfig = Field(default_factory=APIConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


class ConfigManager:
    """Manages configuration and credentials for one profile."""

    def __init__(self, profile: str = "default"):
        self.profile = profile
        self.config_dir = Path(user_config_dir(_APP_DIR))
        self.data_dir = Path(user_data_dir(_APP_DIR))
        self.config_file = self.config_dir / f"{profile}.json"
        self.credentials_file = self.data_dir / f"{profile}.credentials.json"

        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> Config:
        """Load configuration from file, falling back to defaults if unreadable."""
        if self.config_file.exists():
            try:
                with open(self.config_file) as f:
                    data = json.load(f)
                return Config(**data)
            except (OSError, json.JSONDecodeError, TypeError, ValidationError):
                return Config()
        return Config()

    def save_config(self, config: Optional[Config] = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        with open(self.config_file, "w") as f:
            json.dump(config.model_dump(), f, indent=2)

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        return self._lookup(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not name a configuration setting.
            pydantic.ValidationError: If the value is invalid for the setting.
        """
        keys = key.split(".")
        config_dict = self.config.model_dump()

        current = config_dict
        for k in keys[:-1]:
            if not isinstance(current.get(k), dict):
                raise KeyError(key)
            current = current[k]
        if keys[-1] not in current:
            raise KeyError(key)

        current[keys[-1]] = value
        self._config = Config(**config_dict)
        self.save_config()

    def reset(self, key: Optional[str] = None) -> None:
        """Reset configuration, or a single key, to defaults."""
        if key is None:
            self._config = Config()
            self.save_config()
        else:
            self.set(key, self._lookup(Config(), key))

    @staticmethod
    def _lookup(config: Config, key: str) -> Any:
        value: Any = config
        for k in key.split("."):
            if isinstance(value, BaseModel):
                value = getattr(value, k, None)
            else:
                return None
        return value

    def save_credentials(self, token: str) -> None:
        """Save the API token."""
        with open(self.credentials_file, "w") as f:
            json.dump({"token": token}, f, indent=2)

        # Readable only by owner
        self.credentials_file.chmod(0o600)

    def load_credentials(self) -> Optional[dict[str, str]]:
        """Load the stored credentials, or None if there are none."""
        if self.credentials_file.exists():
            try:
                with open(self.credentials_file) as f:
                    return json.load(f)
            except (OSError, json.JSONDecodeError):
                return None
        return None

    def clear_credentials(self) -> None:
        """Remove the stored credentials."""
        if self.credentials_file.exists():
            self.credentials_file.unlink()


_config_manager: Optional[ConfigManager] = None


def get_config_manager(profile: str = "default") -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None or _config_manager.profile != profile:
        _config_manager = ConfigManager(profile)
    return _config_manager
