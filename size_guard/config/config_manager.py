"""Settings management for the size monitor."""

import os
import yaml
from typing import Dict, Any, Optional
from .config_validator import ConfigValidator


class ConfigManager:
    """Loads and validates the optional YAML settings file."""

    DEFAULT_CONFIG_LOCATIONS = [
        "size_guard.yaml",
        "size_guard.yml",
        os.path.expanduser("~/.size-guard/config.yaml"),
        os.path.expanduser("~/.size-guard/config.yml"),
        "/etc/size-guard/config.yaml",
        "/etc/size-guard/config.yml"
    ]

    DEFAULTS = {
        'monitoring': {
            'targets_file': 'StatList.tsv',
            'default_interval_seconds': 5
        },
        'logging': {
            'level': 'INFO',
            'file': None,
            'max_size_mb': 10,
            'backup_count': 5
        }
    }

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional path to a settings file. If not provided,
                        the default locations are searched and built-in
                        defaults are used when none exists.
        """
        self.config_path = config_path
        self.loaded_from: Optional[str] = None
        self.config_data: Dict[str, Any] = {}
        self.validator = ConfigValidator()

    def load_config(self) -> Dict[str, Any]:
        """Load settings from file and fill in defaults.

        Returns:
            Dictionary containing settings.

        Raises:
            FileNotFoundError: If an explicit settings path does not exist.
            ValueError: If the settings file is invalid.
        """
        config_file = self._find_config_file()
        self.config_data = {}

        if config_file:
            try:
                with open(config_file, 'r', encoding='utf-8') as f:
                    self.config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in settings file {config_file}: {e}")
            except OSError as e:
                raise ValueError(f"Error reading settings file {config_file}: {e}")
            self.loaded_from = config_file

        self.validator.validate(self.config_data)
        self._set_defaults()

        return self.config_data

    def _find_config_file(self) -> Optional[str]:
        """Find the settings file.

        Returns:
            Path to the settings file, or None when no default location has one.

        Raises:
            FileNotFoundError: If an explicit path was given and is missing.
        """
        if self.config_path:
            if os.path.exists(self.config_path):
                return self.config_path
            raise FileNotFoundError(f"Settings file not found: {self.config_path}")

        for location in self.DEFAULT_CONFIG_LOCATIONS:
            if os.path.exists(location):
                return location

        return None

    def _set_defaults(self):
        """Merge default values into missing settings."""
        for section, section_defaults in self.DEFAULTS.items():
            if self.config_data.get(section) is None:
                self.config_data[section] = {}
            for key, value in section_defaults.items():
                if key not in self.config_data[section]:
                    self.config_data[section][key] = value

    def get_monitoring_config(self) -> Dict[str, Any]:
        return self.config_data.get('monitoring', {})

    def get_logging_config(self) -> Dict[str, Any]:
        return self.config_data.get('logging', {})

    def get_targets_file(self) -> str:
        return self.get_monitoring_config().get('targets_file', 'StatList.tsv')

    def get_default_interval(self) -> int:
        return self.get_monitoring_config().get('default_interval_seconds', 5)
