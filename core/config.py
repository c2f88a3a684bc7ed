import copy
import logging
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_CONFIG_PATH = BASE_DIR / "invoke_binary" / "launcher.yaml"

DEFAULT_CONFIG = {
    "launcher": {
        "forward_args": False,
    },
    "logging": {
        "level": "WARNING",
    },
}

class Config:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls)
            cls._instance.load()
        return cls._instance

    def load(self, config_path=DEFAULT_CONFIG_PATH):
        """Reset to defaults, then overlay the YAML file if there is one.

        The file is only ever read; a missing file is not recreated.
        """
        self.data = copy.deepcopy(DEFAULT_CONFIG)
        config_path = Path(config_path)
        if not config_path.exists():
            logger.debug(f"No config file at {config_path}, using defaults")
            return

        try:
            with open(config_path, 'r') as f:
                user_config = yaml.safe_load(f)
            if isinstance(user_config, dict):
                self._merge(self.data, user_config)
            elif user_config is not None:
                logger.error(f"Ignoring {config_path}: top level must be a mapping")
            logger.debug(f"Loaded configuration from {config_path}")
        except (OSError, yaml.YAMLError) as e:
            self.data = copy.deepcopy(DEFAULT_CONFIG)
            logger.error(f"Failed to load config {config_path}: {e}")

    def _merge(self, default, user):
        for k, v in user.items():
            if isinstance(v, dict) and isinstance(default.get(k), dict):
                self._merge(default[k], v)
            else:
                default[k] = v

    def get(self, path, default=None):
        """Get config value using dot notation e.g. 'launcher.forward_args'"""
        keys = path.split('.')
        val = self.data
        try:
            for k in keys:
                val = val[k]
            return val
        except (KeyError, TypeError):
            return default

# Global instance
config = Config()
