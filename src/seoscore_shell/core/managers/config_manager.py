# src/seoscore_shell/core/managers/config_manager.py
import json
import logging
from typing import Any, Dict, Optional

from seo_analyzer.model import AnalyzerConfig
from seoscore_shell.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    A singleton class to manage the application's configuration.
    It loads settings from a file and allows for in-memory modifications.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        """Loads the configuration from the file."""
        self._config: Dict[str, Any] = {}
        self.reset()
        logger.debug("ConfigManager initialized.")

    def get_all(self) -> Dict[str, Any]:
        """Returns the entire current configuration dictionary."""
        return self._config

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """
        Safely retrieves a nested value from the configuration.
        e.g., 'analyzer.locale'.
        """
        value = self._config
        for key in key_path.split('.'):
            if isinstance(value, dict):
                value = value.get(key)
            else:
                return default
        return value if value is not None else default

    def set_nested(self, key_path: str, value: Any) -> bool:
        """
        Sets a nested value in the in-memory configuration.
        e.g., 'analyzer.thresholds.title_length_max', '65'
        """
        keys = key_path.split('.')
        d = self._config
        for key in keys[:-1]:
            d = d.setdefault(key, {})
            if not isinstance(d, dict):
                logger.error("Cannot set value: '%s' is not a dictionary.", key)
                return False

        # Cast to the type of the value being replaced
        original_value = d.get(keys[-1])
        if original_value is not None:
            try:
                value = self._cast(original_value, value)
            except (ValueError, TypeError):
                logger.warning(
                    "Could not cast new value for '%s' to type %s. Storing as string.",
                    key_path, type(original_value).__name__
                )

        d[keys[-1]] = value
        logger.info("Configuration updated: %s = %s", key_path, value)
        return True

    @staticmethod
    def _cast(original: Any, value: Any) -> Any:
        if not isinstance(value, str):
            return type(original)(value)
        if isinstance(original, bool):
            lowered = value.strip().lower()
            if lowered in ("true", "1", "yes", "on"):
                return True
            if lowered in ("false", "0", "no", "off"):
                return False
            raise ValueError(f"Not a boolean: {value}")
        if isinstance(original, (list, dict)):
            parsed = json.loads(value)
            if not isinstance(parsed, type(original)):
                raise TypeError(f"Expected {type(original).__name__}")
            return parsed
        return type(original)(value)

    def reset(self):
        """Resets the in-memory configuration from the settings.json file."""
        config_path = PathUtils.get_settings_path()
        if not config_path.exists():
            logger.warning("settings.json not found at %s. Using empty config.", config_path)
            self._config = {}
            return
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                self._config = json.load(f)
            logger.info("Configuration has been (re)loaded from settings.json.")
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load settings.json: %s", e, exc_info=True)
            self._config = {}

    def analyzer_config(self, **overrides: Any) -> AnalyzerConfig:
        """
        Builds an AnalyzerConfig from the 'analyzer' section. Keyword overrides
        (e.g. from command line flags) win over the file. Raises
        pydantic.ValidationError when the combined settings are invalid.
        """
        section = dict(self.get_nested("analyzer", {}) or {})
        section.update({k: v for k, v in overrides.items() if v is not None})
        section = {k: v for k, v in section.items() if v is not None}
        if isinstance(section.get("thresholds"), dict):
            section["thresholds"] = {k: v for k, v in section["thresholds"].items() if v is not None}
        return AnalyzerConfig.model_validate(section)


# The global singleton instance that the entire application will use.
config_manager = ConfigManager()
