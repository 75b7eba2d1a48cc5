"""
Tests for the YAML settings layer.
"""

import pytest

from size_guard.config.config_manager import ConfigManager
from size_guard.config.config_validator import ConfigValidator


@pytest.fixture
def no_default_settings(tmp_path, monkeypatch):
    """Run from an empty directory with no settings in default locations."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(ConfigManager, "DEFAULT_CONFIG_LOCATIONS", [str(tmp_path / "size_guard.yaml")])
    return tmp_path


class TestConfigManager:

    def test_defaults_without_file(self, no_default_settings):
        manager = ConfigManager()
        config = manager.load_config()

        assert manager.loaded_from is None
        assert config['monitoring']['targets_file'] == 'StatList.tsv'
        assert manager.get_default_interval() == 5
        assert manager.get_logging_config()['level'] == 'INFO'
        assert manager.get_logging_config()['file'] is None

    def test_partial_file_is_merged_with_defaults(self, no_default_settings):
        settings = no_default_settings / "size_guard.yaml"
        settings.write_text("monitoring:\n  default_interval_seconds: 30\nlogging:\n  level: debug\n")

        manager = ConfigManager()
        manager.load_config()

        assert manager.loaded_from == str(settings)
        assert manager.get_default_interval() == 30
        assert manager.get_targets_file() == 'StatList.tsv'
        assert manager.get_logging_config()['level'] == 'debug'
        assert manager.get_logging_config()['backup_count'] == 5

    def test_empty_sections(self, no_default_settings):
        settings = no_default_settings / "custom.yaml"
        settings.write_text("monitoring:\nlogging:\n")

        manager = ConfigManager(str(settings))
        manager.load_config()

        assert manager.get_default_interval() == 5

    def test_explicit_missing_file(self, no_default_settings):
        with pytest.raises(FileNotFoundError):
            ConfigManager(str(no_default_settings / "nope.yaml")).load_config()

    def test_invalid_yaml(self, no_default_settings):
        settings = no_default_settings / "bad.yaml"
        settings.write_text("monitoring: [unclosed\n")

        with pytest.raises(ValueError, match="Invalid YAML"):
            ConfigManager(str(settings)).load_config()

    def test_defaults_are_not_shared(self, no_default_settings):
        first = ConfigManager()
        first.load_config()
        first.get_monitoring_config()['default_interval_seconds'] = 99

        second = ConfigManager()
        second.load_config()

        assert second.get_default_interval() == 5


class TestConfigValidator:

    @pytest.fixture
    def validator(self):
        return ConfigValidator()

    def test_valid(self, validator):
        validator.validate({
            'monitoring': {'targets_file': 'list.tsv', 'default_interval_seconds': 10},
            'logging': {'level': 'WARNING', 'max_size_mb': 1, 'backup_count': 0},
        })

    def test_top_level_must_be_mapping(self, validator):
        with pytest.raises(ValueError, match="mapping"):
            validator.validate(["not", "a", "mapping"])

    def test_section_must_be_mapping(self, validator):
        with pytest.raises(ValueError, match="'logging'"):
            validator.validate({'logging': 'INFO'})

    @pytest.mark.parametrize("interval", [0, -3, "5", 1.5, True])
    def test_invalid_interval(self, validator, interval):
        with pytest.raises(ValueError, match="default_interval_seconds"):
            validator.validate({'monitoring': {'default_interval_seconds': interval}})

    def test_invalid_targets_file(self, validator):
        with pytest.raises(ValueError, match="targets_file"):
            validator.validate({'monitoring': {'targets_file': ''}})

    def test_invalid_level(self, validator):
        with pytest.raises(ValueError, match="invalid level"):
            validator.validate({'logging': {'level': 'LOUD'}})

    def test_invalid_rotation(self, validator):
        with pytest.raises(ValueError, match="backup_count"):
            validator.validate({'logging': {'backup_count': -1}})
