"""
Reads the module configuration file into key -> JSON literal entries
"""
import json
import os

from codex_shimmer.logger import get_logger

log = get_logger(__name__)

CONFIG_ENV = "CODEX_SHIMMER_CONFIG"


def default_config_path():
    """Per-user config file location"""
    override = os.environ.get(CONFIG_ENV)
    if override:
        return os.path.expanduser(override)
    if os.name == "nt":
        base_dir = os.getenv("APPDATA") or os.path.expanduser("~")
    else:
        base_dir = os.path.expanduser("~/.config")
    return os.path.join(base_dir, "codex-shimmer", "config.json")


class SettingsManager:
    """Loads and caches the user's module settings"""

    def __init__(self, config_path=None):
        self.config_path = config_path or default_config_path()
        self._settings_cache = {}

    def load_settings(self):
        """Reads the settings file; a missing or broken file yields {}"""
        if not os.path.exists(self.config_path):
            self._settings_cache = {}
            return self._settings_cache.copy()

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                loaded_data = json.load(f)
        except (OSError, ValueError) as e:
            log.warning("failed to load settings from %s: %s", self.config_path, e)
            loaded_data = {}

        if not isinstance(loaded_data, dict):
            log.warning("ignoring settings in %s: expected a JSON object", self.config_path)
            loaded_data = {}

        self._settings_cache = loaded_data
        return self._settings_cache.copy()

    def get_current_settings(self):
        return self._settings_cache.copy()

    def load_entries(self):
        """Settings as key -> JSON literal, the form parse_config() takes"""
        settings = self.load_settings()
        return {str(key): json.dumps(value) for key, value in settings.items()}
