"""
Unit tests for ConfigManager and the configuration models.
"""

import pytest
import yaml

from kapan.core.config_manager import AppConfig, ConfigManager, ResolverConfig
from kapan.core.error_handler import ConfigurationError


class TestConfigManager:
    """Test suite for ConfigManager"""

    @pytest.mark.unit
    def test_defaults(self):
        config = AppConfig()

        assert config.resolver.timezone == "Asia/Jakarta"
        assert config.resolver.locale == "id"
        assert config.resolver.fallback_hour == 9
        assert config.logging.log_to_file is False

    @pytest.mark.unit
    def test_load_from_directory(self, temp_config_dir, clean_env):
        manager = ConfigManager(config_path=temp_config_dir, environment="testing")
        config = manager.load_config()

        assert config.app_name == "Kapan-Test"
        assert config.environment == "testing"
        assert config.logging.level == "DEBUG"

    @pytest.mark.unit
    def test_load_is_cached(self, temp_config_dir, clean_env):
        manager = ConfigManager(config_path=temp_config_dir, environment="testing")

        assert manager.load_config() is manager.load_config()

    @pytest.mark.unit
    def test_environment_file_overrides_default(self, temp_config_dir, clean_env):
        with open(temp_config_dir / "testing.yaml", "w") as f:
            yaml.dump({"resolver": {"locale": "en"}}, f)

        config = ConfigManager(config_path=temp_config_dir, environment="testing").load_config()

        assert config.resolver.locale == "en"
        assert config.resolver.timezone == "Asia/Jakarta"

    @pytest.mark.unit
    def test_env_variable_overrides(self, temp_config_dir, clean_env):
        clean_env.setenv("KAPAN_RESOLVER_FALLBACK_HOUR", "10")
        clean_env.setenv("KAPAN_RESOLVER_TIMEZONE", "Asia/Makassar")
        clean_env.setenv("KAPAN_LOGGING_LOG_TO_FILE", "true")

        config = ConfigManager(config_path=temp_config_dir, environment="testing").load_config()

        assert config.resolver.fallback_hour == 10
        assert config.resolver.timezone == "Asia/Makassar"
        assert config.logging.log_to_file is True

    @pytest.mark.unit
    def test_invalid_timezone_rejected(self, temp_config_dir, clean_env):
        clean_env.setenv("KAPAN_RESOLVER_TIMEZONE", "Nowhere/Special")

        with pytest.raises(ConfigurationError):
            ConfigManager(config_path=temp_config_dir, environment="testing").load_config()

    @pytest.mark.unit
    def test_invalid_yaml_rejected(self, temp_config_dir, clean_env):
        (temp_config_dir / "local.yaml").write_text("resolver: [unclosed")

        with pytest.raises(ConfigurationError):
            ConfigManager(config_path=temp_config_dir, environment="testing").load_config()

    @pytest.mark.unit
    def test_missing_directory_uses_defaults(self, tmp_path, clean_env):
        config = ConfigManager(config_path=tmp_path / "absent", environment="testing").load_config()

        assert config.resolver == ResolverConfig()

    @pytest.mark.unit
    def test_update_config(self, temp_config_dir, clean_env):
        manager = ConfigManager(config_path=temp_config_dir, environment="testing")
        config = manager.update_config({"resolver": {"locale": "en"}})

        assert config.resolver.locale == "en"
        assert config.app_name == "Kapan-Test"

    @pytest.mark.unit
    def test_update_config_rejects_invalid_values(self, temp_config_dir, clean_env):
        manager = ConfigManager(config_path=temp_config_dir, environment="testing")
        original = manager.load_config()

        with pytest.raises(ConfigurationError):
            manager.update_config({"resolver": {"fallback_hour": 30}})
        assert manager.load_config() is original

    @pytest.mark.unit
    def test_save_and_reload(self, temp_config_dir, clean_env):
        manager = ConfigManager(config_path=temp_config_dir, environment="testing")
        manager.update_config({"resolver": {"fallback_hour": 7}})
        manager.save_config("local")

        assert (temp_config_dir / "local.yaml").exists()

        reloaded = ConfigManager(config_path=temp_config_dir, environment="testing").reload_config()
        assert reloaded.resolver.fallback_hour == 7

    @pytest.mark.unit
    def test_save_without_config_fails(self, temp_config_dir):
        with pytest.raises(ConfigurationError):
            ConfigManager(config_path=temp_config_dir).save_config()

    @pytest.mark.unit
    def test_validate_config(self, temp_config_dir):
        manager = ConfigManager(config_path=temp_config_dir)

        assert manager.validate_config({"resolver": {"locale": "en"}}) == []

        errors = manager.validate_config({"resolver": {"locale": "fr", "fallback_hour": -1}})
        assert any(error.startswith("resolver.locale") for error in errors)
        assert any(error.startswith("resolver.fallback_hour") for error in errors)

    @pytest.mark.unit
    def test_config_changes_listed(self, temp_config_dir):
        manager = ConfigManager(config_path=temp_config_dir)
        old = AppConfig()
        new = AppConfig(resolver={"locale": "en"})

        assert manager._get_config_changes(old, new) == ["resolver.locale: id -> en"]
