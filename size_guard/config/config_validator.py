"""Settings validation for the size monitor."""

from typing import Dict, Any


class ConfigValidator:
    """Validates size monitor settings."""

    KNOWN_SECTIONS = ['monitoring', 'logging']
    LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

    def validate(self, config: Dict[str, Any]) -> None:
        """Validate settings data.

        Args:
            config: Settings dictionary to validate.

        Raises:
            ValueError: If settings are invalid.
        """
        self._validate_structure(config)
        if config.get('monitoring'):
            self._validate_monitoring(config['monitoring'])
        if config.get('logging'):
            self._validate_logging(config['logging'])

    def _validate_structure(self, config: Dict[str, Any]) -> None:
        """Validate basic settings structure.

        Raises:
            ValueError: If the file or a section is not a mapping.
        """
        if not isinstance(config, dict):
            raise ValueError("Settings file must contain a mapping")

        for section in self.KNOWN_SECTIONS:
            value = config.get(section)
            if value is not None and not isinstance(value, dict):
                raise ValueError(f"Settings section '{section}' must be a mapping")

    def _validate_monitoring(self, monitoring: Dict[str, Any]) -> None:
        """Validate monitoring settings.

        Raises:
            ValueError: If the interval or targets file is invalid.
        """
        if 'default_interval_seconds' in monitoring:
            interval = monitoring['default_interval_seconds']
            if isinstance(interval, bool) or not isinstance(interval, int) or interval < 1:
                raise ValueError(f"Monitoring default_interval_seconds must be an integer >= 1: {interval}")

        if 'targets_file' in monitoring:
            targets_file = monitoring['targets_file']
            if not isinstance(targets_file, str) or not targets_file:
                raise ValueError("Monitoring targets_file must be a non-empty string")

    def _validate_logging(self, logging_config: Dict[str, Any]) -> None:
        """Validate logging settings.

        Raises:
            ValueError: If the level or rotation settings are invalid.
        """
        level = logging_config.get('level')
        if level is not None and str(level).upper() not in self.LOG_LEVELS:
            raise ValueError(f"Logging has invalid level: {level}")

        for key in ['max_size_mb', 'backup_count']:
            if key in logging_config:
                value = logging_config[key]
                if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                    raise ValueError(f"Logging {key} must be a non-negative integer: {value}")
