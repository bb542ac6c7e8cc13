# tests/unit/test_config_manager.py

import pytest
from config.config_manager import ConfigManager, get_config_manager


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ["CHANDAS_LOG_LEVEL", "CHANDAS_LOG_FILE", "CHANDAS_METERS_FILE", "CHANDAS_OUTPUT_FORMAT"]:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "logging:\n"
        "  level: DEBUG\n"
        "analysis:\n"
        "  prefix_limit: 10\n"
        "  show_ganas: false\n"
        "meters:\n"
        "  custom_file: extra.yaml\n"
        "interface:\n"
        "  output_format: json\n",
        encoding="utf-8"
    )
    return path


class TestConfigManager:

    def test_default_config(self):
        config = ConfigManager()
        assert config.config_path.name == "default_config.yaml"
        assert config.get_analysis_config().prefix_limit == 15
        assert config.get_analysis_config().show_ganas is True
        assert config.get_meters_config().custom_file is None
        assert config.get_interface_config().output_format == "text"
        assert config.validate_config()

    def test_load_from_file(self, config_file):
        config = ConfigManager(str(config_file))
        assert config.get_logging_config().level == "DEBUG"
        assert config.get_analysis_config().prefix_limit == 10
        assert config.get_analysis_config().show_ganas is False
        assert config.get_custom_meters_path() == "extra.yaml"
        assert config.get_interface_config().output_format == "json"

    def test_missing_file_uses_defaults(self, tmp_path):
        config = ConfigManager(str(tmp_path / "missing.yaml"))
        assert config.get_raw_config() == {}
        assert config.get_logging_config().level == "WARNING"
        assert config.get_interface_config().type == "cli"

    def test_invalid_yaml_uses_defaults(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("logging: [unclosed", encoding="utf-8")
        config = ConfigManager(str(path))
        assert config.get_analysis_config().prefix_limit == 15

    def test_invalid_prefix_limit_uses_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("analysis:\n  prefix_limit: many\n", encoding="utf-8")
        analysis = ConfigManager(str(path)).get_analysis_config()
        assert analysis.prefix_limit == 15
        assert analysis.show_ganas is True

    def test_env_overrides(self, config_file, monkeypatch):
        monkeypatch.setenv("CHANDAS_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("CHANDAS_METERS_FILE", "/tmp/meters.yaml")
        monkeypatch.setenv("CHANDAS_OUTPUT_FORMAT", "text")

        config = ConfigManager(str(config_file))
        assert config.get_logging_config().level == "ERROR"
        assert config.get_custom_meters_path() == "/tmp/meters.yaml"
        assert config.get_interface_config().output_format == "text"

    def test_validate_missing_meter_file(self, config_file):
        assert not ConfigManager(str(config_file)).validate_config()

    def test_validate_unknown_output_format(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("interface:\n  output_format: xml\n", encoding="utf-8")
        assert not ConfigManager(str(path)).validate_config()

    def test_reload(self, config_file):
        config = ConfigManager(str(config_file))
        config_file.write_text("analysis:\n  prefix_limit: 5\n", encoding="utf-8")
        config.reload_config()
        assert config.get_analysis_config().prefix_limit == 5

    def test_global_instance(self, config_file):
        first = get_config_manager(str(config_file))
        assert get_config_manager() is first
        assert get_config_manager(str(config_file)) is not first
