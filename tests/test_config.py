"""
Unit tests for configuration loading.
"""

import pytest

from safe_backup.config.config_manager import ConfigManager
from safe_backup.config.config_validator import ConfigValidator
from safe_backup.core.errors import ConfigurationError


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(ConfigManager, "DEFAULT_CONFIG_LOCATIONS",
                        ["safe-backup.yaml", "safe-backup.yml"])
    return tmp_path


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_defaults_without_config_file(self, isolated_cwd):
        manager = ConfigManager()
        config = manager.load_config()

        assert config['audit']['log_file'] == 'logfile.txt'
        assert config['input']['max_length'] == 255
        assert config['operations']['atomic_writes'] is False
        assert manager.get_logging_config() == {'level': 'WARNING', 'file': None}

    def test_loads_file_from_working_directory(self, isolated_cwd):
        (isolated_cwd / "safe-backup.yaml").write_text(
            "audit:\n  log_file: audit.log\noperations:\n  atomic_writes: true\n")

        manager = ConfigManager()
        manager.load_config()

        assert manager.get_audit_config()['log_file'] == 'audit.log'
        assert manager.get_operations_config()['atomic_writes'] is True
        assert manager.get_input_config()['max_length'] == 255

    def test_loads_yml_variant(self, isolated_cwd):
        (isolated_cwd / "safe-backup.yml").write_text("input:\n  max_length: 32\n")
        manager = ConfigManager()
        manager.load_config()
        assert manager.get_input_config()['max_length'] == 32

    def test_default_locations_include_yml_variants(self):
        locations = ConfigManager.DEFAULT_CONFIG_LOCATIONS
        assert locations[:2] == ["safe-backup.yaml", "safe-backup.yml"]
        assert sum(1 for location in locations if location.endswith(".yml")) == 3

    def test_explicit_path(self, isolated_cwd):
        config_file = isolated_cwd / "custom.yaml"
        config_file.write_text("input:\n  max_length: 64\n")

        manager = ConfigManager(str(config_file))
        manager.load_config()
        assert manager.get_input_config()['max_length'] == 64

    def test_explicit_path_must_exist(self, isolated_cwd):
        with pytest.raises(ConfigurationError, match="Config file not found"):
            ConfigManager(str(isolated_cwd / "nope.yaml")).load_config()

    def test_empty_file_uses_defaults(self, isolated_cwd):
        (isolated_cwd / "safe-backup.yaml").write_text("")
        assert ConfigManager().load_config()['audit']['log_file'] == 'logfile.txt'

    def test_invalid_yaml(self, isolated_cwd):
        (isolated_cwd / "safe-backup.yaml").write_text("audit: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            ConfigManager().load_config()


class TestConfigValidator:
    """Tests for ConfigValidator."""

    def test_accepts_complete_config(self):
        ConfigValidator().validate({
            'audit': {'log_file': 'logfile.txt'},
            'input': {'max_length': 100},
            'operations': {'atomic_writes': True},
            'logging': {'level': 'debug', 'file': 'debug.log'},
        })

    @pytest.mark.parametrize("config", [
        ['not', 'a', 'mapping'],
        {'audit': 'logfile.txt'},
        {'audit': {'log_file': ''}},
        {'input': {'max_length': 0}},
        {'input': {'max_length': True}},
        {'input': {'max_length': '255'}},
        {'operations': {'atomic_writes': 'yes'}},
        {'logging': {'level': 'TRACE'}},
        {'logging': {'file': 42}},
    ])
    def test_rejects_invalid_config(self, config):
        with pytest.raises(ConfigurationError):
            ConfigValidator().validate(config)

    def test_unknown_keys_are_ignored(self):
        ConfigValidator().validate({'extra': {'anything': 1}, 'audit': {'other': True}})
