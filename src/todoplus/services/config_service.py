"""Configuration service for loading todoplus.yml."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..exceptions import ConfigError
from ..models import TodoPlusConfig

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for loading and caching todoplus configuration."""

    CONFIG_FILE = "todoplus.yml"

    def __init__(self, project_root: Path) -> None:
        """Initialize the config service.

        Args:
            project_root: Directory that may contain todoplus.yml
        """
        self.project_root = project_root
        self._config: TodoPlusConfig | None = None
        self._config_error: str | None = None

    @property
    def config_path(self) -> Path:
        return self.project_root / self.CONFIG_FILE

    @property
    def has_config_error(self) -> bool:
        """Check if there was an error loading config."""
        return self._config_error is not None

    @property
    def config_error(self) -> str | None:
        """Get the config error message if any."""
        return self._config_error

    def get_config(self) -> TodoPlusConfig:
        """Get configuration, loading from file if not cached."""
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def reload(self) -> None:
        """Clear cached configuration, forcing reload on next access."""
        self._config = None
        self._config_error = None

    def load_strict(self) -> TodoPlusConfig:
        """Load the config file without falling back to defaults.

        Raises:
            ConfigError: If the file is missing, empty, not YAML or invalid
        """
        if not self.config_path.exists():
            raise ConfigError(f"{self.CONFIG_FILE} not found in {self.project_root}")
        try:
            with open(self.config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {self.CONFIG_FILE}: {e}") from e
        if data is None:
            raise ConfigError(f"{self.CONFIG_FILE} is empty")
        if not isinstance(data, dict):
            raise ConfigError(f"{self.CONFIG_FILE} must contain a mapping")
        try:
            return TodoPlusConfig(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {self.CONFIG_FILE}: {e}") from e

    def _load_config(self) -> TodoPlusConfig:
        """Load configuration from file or return default."""
        self._config_error = None

        if not self.config_path.exists():
            logger.debug("No %s found, using defaults", self.CONFIG_FILE)
            return TodoPlusConfig.default()

        try:
            config = self.load_strict()
        except ConfigError as e:
            self._config_error = str(e)
            logger.warning(self._config_error)
            return TodoPlusConfig.default()

        logger.info("Loaded %s with %d priority tags", self.CONFIG_FILE, len(config.tags.names))
        return config
