"""Configuration management for WiFi Grader."""

import os
import configparser
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from wifi_grader.config.settings import WifiGraderSettings
from wifi_grader.core.exceptions import ConfigurationError

ENV_PREFIX = "WIFI_GRADER_"

KNOWN_SECTIONS = ('cache', 'ranking', 'scanner', 'report', 'logging')


class ConfigurationManager:
    """Manages application configuration from multiple sources.

    Precedence, lowest first: built-in defaults, INI file, environment.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None, environ: Optional[Dict[str, str]] = None):
        """Initialize configuration manager.

        Args:
            config_path: Path to configuration file. If None, looks for config/config.ini
            environ: Environment mapping. If None, uses os.environ
        """
        self._config = {}
        self._config_path = Path(config_path) if config_path else Path("config/config.ini")
        self._load_defaults()
        self._load_from_file()
        self._load_from_environment(os.environ if environ is None else environ)

    def _load_defaults(self) -> None:
        """Load default configuration values."""
        self._config = {
            # Score cache
            'cache': {
                'enabled': True,
                'fingerprint': 'full',
            },

            # Ranking
            'ranking': {
                'tie_window': 5,
            },

            # Observation source
            'scanner': {
                'source': 'auto',
                'observations_path': None,
                'strict': False,
            },

            # Report export
            'report': {
                'output_directory': 'reports',
                'format': 'json',
            },

            # Logging Settings
            'logging': {
                'level': 'INFO',
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                'file_enabled': False,
                'console_enabled': True,
                'log_directory': 'logs',
                'max_file_size_mb': 10,
                'backup_count': 5,
            },

            # Core Settings
            'core': {
                'environment': 'development',
                'debug': False,
            }
        }

    def _load_from_file(self) -> None:
        """Load configuration from INI file."""
        if not self._config_path.exists():
            return

        try:
            parser = configparser.ConfigParser(interpolation=None)
            parser.read(self._config_path)

            for section_name in parser.sections():
                section = section_name.lower()
                if section == 'general':
                    section = 'core'
                if section not in self._config:
                    self._config[section] = {}

                for key, value in parser[section_name].items():
                    self._config[section][key] = self._convert_value(value)

        except configparser.Error as e:
            raise ConfigurationError(f"Error loading config file: {e}", cause=e)

    def _load_from_environment(self, environ: Dict[str, str]) -> None:
        """Load configuration from environment variables."""
        for key, value in environ.items():
            if key.startswith(ENV_PREFIX):
                # Parse nested keys: WIFI_GRADER_CACHE__FINGERPRINT
                config_key = key[len(ENV_PREFIX):].lower()
                parts = config_key.split('__')

                if len(parts) == 2:
                    section, setting = parts
                    if section not in self._config:
                        self._config[section] = {}
                    self._config[section][setting] = self._convert_value(value)
                elif len(parts) == 1:
                    # Direct setting
                    self._config['core'][parts[0]] = self._convert_value(value)

    def _convert_value(self, value: str) -> Any:
        """Convert string value to appropriate type."""
        if value.lower() in ('true', 'false'):
            return value.lower() == 'true'

        if value.lower() in ('null', 'none', ''):
            return None

        # Try numeric conversion
        try:
            if '.' in value:
                return float(value)
            else:
                return int(value)
        except ValueError:
            pass

        # Return as string
        return value

    def get_setting(self, key: str, default: Any = None) -> Any:
        """Get a configuration setting.

        Args:
            key: Setting key in format 'section.setting' or 'setting'
            default: Default value if setting not found

        Returns:
            Setting value or default
        """
        parts = key.split('.')

        if len(parts) == 1:
            # Direct key
            return self._config.get('core', {}).get(parts[0], default)
        elif len(parts) == 2:
            # Section.key
            section, setting = parts
            return self._config.get(section, {}).get(setting, default)
        else:
            raise ConfigurationError(f"Invalid setting key format: {key}")

    def set_setting(self, key: str, value: Any) -> None:
        """Set a configuration setting.

        Args:
            key: Setting key in format 'section.setting' or 'setting'
            value: Value to set
        """
        parts = key.split('.')

        if len(parts) == 1:
            self._config.setdefault('core', {})[parts[0]] = value
        elif len(parts) == 2:
            section, setting = parts
            self._config.setdefault(section, {})[setting] = value
        else:
            raise ConfigurationError(f"Invalid setting key format: {key}")

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get a copy of all settings for a section."""
        return self._config.get(section, {}).copy()

    def save_configuration(self, config_path: Optional[Union[str, Path]] = None) -> None:
        """Save current configuration to file.

        Args:
            config_path: Path to save config. If None, uses default path.
        """
        save_path = Path(config_path) if config_path else self._config_path

        try:
            save_path.parent.mkdir(parents=True, exist_ok=True)
            parser = configparser.ConfigParser(interpolation=None)

            for section_name, section_data in self._config.items():
                if section_name == 'core':
                    section_name = 'GENERAL'
                else:
                    section_name = section_name.upper()

                parser.add_section(section_name)
                for key, value in section_data.items():
                    parser.set(section_name, key, '' if value is None else str(value))

            with open(save_path, 'w') as f:
                parser.write(f)

        except OSError as e:
            raise ConfigurationError(f"Error saving config file: {e}", cause=e)

    def validate_configuration(self) -> bool:
        """Validate current configuration.

        Returns:
            True if configuration is valid

        Raises:
            ConfigurationError: If configuration is invalid
        """
        errors = []

        settings = self.to_settings()

        # A file source needs a readable file
        if settings.scanner.source == 'file':
            path = settings.scanner.observations_path
            if path is None:
                errors.append("scanner.observations_path is required when scanner.source is 'file'")
            elif not path.exists():
                errors.append(f"Observations file does not exist: {path}")

        if errors:
            raise ConfigurationError("Configuration validation failed: " + "; ".join(errors))

        return True

    def to_settings(self) -> WifiGraderSettings:
        """Build validated settings from the merged configuration.

        Raises:
            ConfigurationError: If a value fails validation
        """
        core = self._config.get('core', {})
        sections = {name: self.get_section(name) for name in KNOWN_SECTIONS}
        custom = {
            name: values.copy()
            for name, values in self._config.items()
            if name not in KNOWN_SECTIONS and name != 'core'
        }

        try:
            return WifiGraderSettings(
                environment=core.get('environment', 'development'),
                debug=bool(core.get('debug', False)),
                custom_settings=custom,
                **sections,
            )
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e.error_count()} error(s)",
                details={'errors': e.errors(include_url=False)},
                cause=e,
            )

    def to_dict(self) -> Dict[str, Any]:
        """Get configuration as dictionary."""
        return {section: values.copy() for section, values in self._config.items()}

    def from_dict(self, config_dict: Dict[str, Any]) -> None:
        """Merge configuration sections from a dictionary."""
        for section, values in config_dict.items():
            self._config.setdefault(section, {}).update(values)
