# config/config_manager.py

import os
import yaml
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple
from dataclasses import dataclass, fields

DEFAULT_CONFIG_FILE = Path(__file__).parent / "default_config.yaml"

# Environment variable -> (section, key)
ENV_OVERRIDES: Dict[str, Tuple[str, str]] = {
    "CHANDAS_LOG_LEVEL": ("logging", "level"),
    "CHANDAS_LOG_FILE": ("logging", "file"),
    "CHANDAS_METERS_FILE": ("meters", "custom_file"),
    "CHANDAS_OUTPUT_FORMAT": ("interface", "output_format"),
}


@dataclass
class LoggingConfig:
    """Where and how much to log"""
    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


@dataclass
class AnalysisConfig:
    """Scansion and classification settings"""
    prefix_limit: int = 15
    show_ganas: bool = True

    def __post_init__(self):
        self.prefix_limit = int(self.prefix_limit)
        self.show_ganas = bool(self.show_ganas)


@dataclass
class MetersConfig:
    """Meter template sources"""
    custom_file: Optional[str] = None


@dataclass
class InterfaceConfig:
    type: str = "cli"
    name: str = "Chandas Scansion"
    output_format: str = "text"


class ConfigManager:
    """
    YAML backed settings for Chandas.

    The file is read once on construction (and again on ``reload_config``),
    environment variables listed in ``ENV_OVERRIDES`` replace file values,
    and each section is handed out as its dataclass. Keys a section does not
    know are ignored; missing keys take the dataclass defaults.
    """

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_FILE
        self.logger = logging.getLogger(__name__)
        self._config: Dict[str, Any] = {}
        self.reload_config()

    def _read_file(self) -> Dict[str, Any]:
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            self.logger.warning(f"No configuration at {self.config_path}, using defaults")
            return {}
        except yaml.YAMLError as e:
            self.logger.error(f"Ignoring unparsable configuration {self.config_path}: {e}")
            return {}

        if data is None:
            return {}
        if not isinstance(data, dict):
            self.logger.error(f"Configuration root must be a mapping: {self.config_path}")
            return {}

        self.logger.info(f"Configuration loaded from {self.config_path}")
        return data

    def _override_from_env(self):
        for variable, (section, key) in ENV_OVERRIDES.items():
            value = os.getenv(variable)
            if not value:
                continue
            if not isinstance(self._config.get(section), dict):
                self._config[section] = {}
            self._config[section][key] = value

    def _build(self, section_cls, name: str):
        section = self._config.get(name)
        if not isinstance(section, dict):
            section = {}
        known = {f.name for f in fields(section_cls)}
        return section_cls(**{key: value for key, value in section.items() if key in known})

    def get_logging_config(self) -> LoggingConfig:
        return self._build(LoggingConfig, "logging")

    def get_analysis_config(self) -> AnalysisConfig:
        try:
            return self._build(AnalysisConfig, "analysis")
        except (TypeError, ValueError) as e:
            self.logger.warning(f"Invalid analysis settings in {self.config_path}, using defaults: {e}")
            return AnalysisConfig()

    def get_meters_config(self) -> MetersConfig:
        return self._build(MetersConfig, "meters")

    def get_interface_config(self) -> InterfaceConfig:
        return self._build(InterfaceConfig, "interface")

    def get_custom_meters_path(self) -> Optional[str]:
        """Extra meter template file, if one is configured"""
        return self.get_meters_config().custom_file

    def get_raw_config(self) -> Dict[str, Any]:
        """Shallow copy of the loaded settings, overrides included"""
        return dict(self._config)

    def reload_config(self):
        """Read the file again and reapply environment overrides"""
        self._config = self._read_file()
        self._override_from_env()

    def validate_config(self) -> bool:
        """
        Check settings that can only be verified against the outside world.

        Returns:
            False if the custom meter file is missing or the output format
            is not one the interfaces can produce
        """
        custom_file = self.get_custom_meters_path()
        if custom_file and not Path(custom_file).exists():
            self.logger.warning(f"Custom meter file does not exist: {custom_file}")
            return False

        output_format = self.get_interface_config().output_format
        if output_format not in ("text", "json"):
            self.logger.warning(f"Unknown output format: {output_format}")
            return False

        return True


_config_manager: Optional[ConfigManager] = None


def get_config_manager(config_path: Optional[str] = None) -> ConfigManager:
    """
    Process wide ConfigManager.

    Passing a path always builds a fresh manager and makes it the shared one.
    """
    global _config_manager

    if _config_manager is None or config_path is not None:
        _config_manager = ConfigManager(config_path)

    return _config_manager
