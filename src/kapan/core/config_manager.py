"""Configuration Management for Kapan

Handles loading, validation, and management of the resolver configuration.
Supports hierarchical YAML files with environment variable overrides.
"""

import os
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import logging

import yaml
from dateutil import tz as dateutil_tz
from pydantic import BaseModel, Field, ValidationError, field_validator

from .error_handler import ConfigurationError


DEFAULT_TIMEZONE = "Asia/Jakarta"
SUPPORTED_LOCALES = ("id", "en")


class ResolverConfig(BaseModel):
    """Configuration for temporal resolution."""
    timezone: str = Field(default=DEFAULT_TIMEZONE)
    locale: str = Field(default="id", pattern="^(id|en)$")
    fallback_hour: int = Field(default=9, ge=0, le=23)

    @field_validator('timezone')
    @classmethod
    def validate_timezone(cls, v):
        """Reject identifiers dateutil cannot resolve"""
        if not v or dateutil_tz.gettz(v) is None:
            raise ValueError(f"Unknown timezone: {v}")
        return v


class LoggingConfig(BaseModel):
    """Configuration for logging."""
    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    log_dir: str = Field(default="logs")
    log_to_console: bool = Field(default=True)
    log_to_file: bool = Field(default=False)
    max_file_size: str = Field(default="10MB")
    backup_count: int = Field(default=5, ge=1, le=20)

    @field_validator('max_file_size')
    @classmethod
    def validate_file_size(cls, v):
        """Validate file size format"""
        import re
        if not re.match(r'^\d+[KMG]B$', v.upper()):
            raise ValueError("File size must be in format: 10KB, 10MB, or 1GB")
        return v


class AppConfig(BaseModel):
    """Main application configuration."""
    app_name: str = Field(default="Kapan")
    environment: str = Field(default="development", pattern="^(development|testing|staging|production)$")

    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"validate_assignment": True}


class ConfigManager:
    """Manages configuration loading and validation."""

    ENV_PREFIX = "KAPAN_"

    def __init__(self, config_path: Optional[Path] = None, environment: Optional[str] = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional directory holding the YAML files
            environment: Environment name (development, testing, staging, production)
        """
        self.config_base_path = Path(config_path) if config_path else self._get_default_config_path()
        self.environment = environment or os.getenv('KAPAN_ENV', 'development')
        self._config: Optional[AppConfig] = None
        self._lock = threading.RLock()
        self.logger = logging.getLogger(__name__)

        self.config_files = self._get_config_files()

    def _get_default_config_path(self) -> Path:
        """Get the default configuration directory."""
        config_locations = [
            Path("config"),
            Path.home() / ".kapan",
            Path("/etc/kapan"),
        ]

        for location in config_locations:
            if location.exists() and location.is_dir():
                return location

        return Path("config")

    def _get_config_files(self) -> Dict[str, Path]:
        """Get configuration file paths for hierarchical loading."""
        base_dir = self.config_base_path

        return {
            'default': base_dir / 'default_config.yaml',
            'environment': base_dir / f'{self.environment}.yaml',
            'local': base_dir / 'local.yaml'
        }

    def load_config(self) -> AppConfig:
        """Load and validate configuration with hierarchical overrides.

        Returns:
            Validated application configuration

        Raises:
            ConfigurationError: If a file is unreadable or validation fails
        """
        with self._lock:
            if self._config:
                return self._config

            config_data: Dict[str, Any] = {}

            for config_type, config_file in self.config_files.items():
                if config_file.exists():
                    self.logger.info(f"Loading {config_type} config from {config_file}")
                    self._deep_merge(config_data, self._load_yaml_file(config_file))

            env_overrides = self._get_env_overrides()
            if env_overrides:
                self.logger.info(f"Applying environment overrides: {list(env_overrides.keys())}")
                self._deep_merge(config_data, env_overrides)

            config_data.setdefault('environment', self.environment)

            try:
                self._config = AppConfig(**config_data)
            except ValidationError as e:
                self.logger.error(f"Configuration validation failed: {e}")
                raise ConfigurationError(f"Invalid configuration: {e}") from e

            return self._config

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load YAML configuration file.

        Returns:
            Configuration dictionary
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            self.logger.error(f"Failed to parse YAML file {file_path}: {e}")
            raise ConfigurationError(f"Invalid YAML in {file_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration in {file_path} is not a mapping")
        return data

    def _get_env_overrides(self) -> Dict[str, Any]:
        """Get configuration overrides from environment variables.

        Environment variables follow pattern: KAPAN_<SECTION>_<KEY>
        Example: KAPAN_RESOLVER_FALLBACK_HOUR -> resolver.fallback_hour
        """
        overrides: Dict[str, Any] = {}
        sections = set(AppConfig.model_fields)

        for key, value in os.environ.items():
            if not key.startswith(self.ENV_PREFIX) or key == 'KAPAN_ENV':
                continue

            name = key[len(self.ENV_PREFIX):].lower()
            section, _, field = name.partition('_')

            if section in sections and field:
                overrides.setdefault(section, {})[field] = self._convert_env_value(value)
            elif name in sections:
                overrides[name] = self._convert_env_value(value)

        return overrides

    def _convert_env_value(self, value: str) -> Union[str, int, float, bool]:
        """Convert environment variable string to appropriate type."""
        if value.lower() in ('true', 'false'):
            return value.lower() == 'true'

        try:
            if '.' in value:
                return float(value)
            return int(value)
        except ValueError:
            pass

        return value

    def _deep_merge(self, base_dict: Dict[str, Any], update_dict: Dict[str, Any]):
        """Recursively merge nested dictionaries."""
        for key, value in update_dict.items():
            if isinstance(value, dict) and key in base_dict and isinstance(base_dict[key], dict):
                self._deep_merge(base_dict[key], value)
            else:
                base_dict[key] = value

    def update_config(self, updates: Dict[str, Any]) -> AppConfig:
        """Update configuration with new values.

        Args:
            updates: Nested dictionary of configuration updates

        Returns:
            Updated configuration
        """
        with self._lock:
            if not self._config:
                self.load_config()

            config_dict = self._config.model_dump()
            self._deep_merge(config_dict, updates)

            try:
                self._config = AppConfig(**config_dict)
            except ValidationError as e:
                self.logger.error(f"Failed to update configuration: {e}")
                raise ConfigurationError(f"Invalid configuration update: {e}") from e

            return self._config

    def save_config(self, target: str = "local"):
        """Save current configuration to file.

        Args:
            target: Which config file to save to ('default', 'environment', 'local')
        """
        with self._lock:
            if not self._config:
                raise ConfigurationError("No configuration loaded")

            if target not in self.config_files:
                raise ConfigurationError(f"Invalid target: {target}")

            target_file = self.config_files[target]
            target_file.parent.mkdir(parents=True, exist_ok=True)

            with open(target_file, 'w', encoding='utf-8') as f:
                yaml.safe_dump(self._config.model_dump(), f, default_flow_style=False, sort_keys=False)

            self.logger.info(f"Configuration saved to {target_file}")

    def reload_config(self) -> AppConfig:
        """Reload configuration from files, keeping the old one on failure."""
        self.logger.info("Reloading configuration...")

        with self._lock:
            old_config = self._config
            self._config = None

            try:
                new_config = self.load_config()
            except ConfigurationError:
                self._config = old_config
                raise

            if old_config:
                changes = self._get_config_changes(old_config, new_config)
                if changes:
                    self.logger.info(f"Configuration changes: {changes}")

            return new_config

    def _get_config_changes(self, old_config: AppConfig, new_config: AppConfig) -> List[str]:
        """Get list of changed configuration fields."""
        changes = []

        def compare_dicts(old: Dict, new: Dict, prefix: str = ""):
            for key in sorted(set(old.keys()) | set(new.keys())):
                current_path = f"{prefix}.{key}" if prefix else key

                if key not in old:
                    changes.append(f"{current_path} added")
                elif key not in new:
                    changes.append(f"{current_path} removed")
                elif isinstance(old[key], dict) and isinstance(new[key], dict):
                    compare_dicts(old[key], new[key], current_path)
                elif old[key] != new[key]:
                    changes.append(f"{current_path}: {old[key]} -> {new[key]}")

        compare_dicts(old_config.model_dump(), new_config.model_dump())
        return changes

    def validate_config(self, config_data: Dict[str, Any]) -> List[str]:
        """Validate configuration data without applying it.

        Args:
            config_data: Configuration data to validate

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        try:
            AppConfig(**config_data)
        except ValidationError as e:
            for error in e.errors():
                field_path = '.'.join(str(loc) for loc in error['loc'])
                errors.append(f"{field_path}: {error['msg']}")

        return errors
