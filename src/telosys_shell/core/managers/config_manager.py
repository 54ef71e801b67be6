# src/telosys_shell/core/managers/config_manager.py
import json
import logging
from typing import Any, Callable, Dict, Optional

from telosys_shell.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _log_level(value: Any) -> str:
    level = str(value).strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"expected one of {', '.join(LOG_LEVELS)}")
    return level


def _editor_command(value: Any) -> str:
    command = str(value).strip()
    if not command:
        raise ValueError("expected a non-empty command")
    return command


def _engine_factory(value: Any) -> str:
    factory = str(value).strip()
    module_name, sep, attr = factory.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError("expected 'module:callable'")
    return factory


def _positive_int(value: Any) -> int:
    number = int(value)
    if number <= 0:
        raise ValueError("expected a positive integer")
    return number


# Keys read by the shell, with the conversion applied by 'config set'.
KNOWN_KEYS: Dict[str, Callable[[Any], Any]] = {
    "debug.level": _log_level,
    "editor.command": _editor_command,
    "engine.factory": _engine_factory,
    "autocomplete.h_max_len": _positive_int,
}


class ConfigManager:
    """
    Singleton holding the per-installation settings (settings.json next to
    the installed package). Values can be changed in memory for the session,
    only for the keys the shell knows about.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._config = {}
            cls._instance.reset()
        return cls._instance

    def get_all(self) -> Dict[str, Any]:
        return self._config

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """Dotted lookup, e.g. 'engine.factory'. Missing or null values give the default."""
        value = self._config
        for key in key_path.split('.'):
            if not isinstance(value, dict):
                return default
            value = value.get(key)
        return value if value is not None else default

    def set_nested(self, key_path: str, value: Any) -> bool:
        """
        Converts and stores a value for one of the KNOWN_KEYS.
        Returns False (nothing changed) for an unknown key or an invalid value.
        """
        convert = KNOWN_KEYS.get(key_path)
        if convert is None:
            logger.warning("Unknown configuration key '%s'", key_path)
            return False
        try:
            value = convert(value)
        except (ValueError, TypeError) as e:
            logger.warning("Invalid value %r for '%s': %s", value, key_path, e)
            return False

        section, key = key_path.split('.')
        d = self._config.setdefault(section, {})
        if not isinstance(d, dict):
            logger.error("Cannot set '%s': '%s' is not a section", key_path, section)
            return False
        d[key] = value
        logger.info("Configuration updated: %s = %s", key_path, value)
        return True

    def reset(self):
        """Reloads the configuration from settings.json."""
        config_path = PathUtils.get_settings_file()
        if not config_path.exists():
            logger.warning("settings.json not found at %s. Using empty config.", config_path)
            self._config = {}
            return
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                self._config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load %s: %s", config_path, e)
            self._config = {}
            return
        logger.info("Configuration (re)loaded from %s", config_path)


config_manager = ConfigManager()
