"""Configuration management for size monitor."""

from .config_manager import ConfigManager
from .config_validator import ConfigValidator
from .target_loader import load_targets, parse_action, parse_kind, parse_size, parse_targets

__all__ = ["ConfigManager", "ConfigValidator", "load_targets", "parse_action",
           "parse_kind", "parse_size", "parse_targets"]
