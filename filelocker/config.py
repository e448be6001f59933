"""Configuration handler for File Locker"""

import os
import logging
from dataclasses import dataclass, fields
from typing import Dict, Optional, Tuple

import yaml

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8470"
DEFAULT_NATIVE_EXTENSIONS = (".3dm", ".gh", ".ghx")


@dataclass
class Settings:
    """Plugin settings, fixed once the plugin is loaded."""
    base_url: str = DEFAULT_BASE_URL
    token: Optional[str] = None
    set_read_only: bool = False
    native_extensions: Tuple[str, ...] = DEFAULT_NATIVE_EXTENSIONS
    max_workers: int = 4
    timeout: float = 30.0
    log_level: str = "WARNING"
    plugin_name: str = "File Locker"

    def __post_init__(self):
        self.native_extensions = tuple(
            _normalize_extension(ext) for ext in self.native_extensions
        )
        if self.max_workers < 1:
            raise ConfigError("max-workers must be at least 1")
        if self.timeout <= 0:
            raise ConfigError("timeout must be positive")
        self.log_level = str(self.log_level).upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigError(f"Unknown log-level: {self.log_level}")


def _normalize_extension(ext: str) -> str:
    ext = ext.strip().lower()
    return ext if ext.startswith(".") else f".{ext}"


class Config:
    """Configuration handler"""

    DEFAULT_CONFIG_DIR = os.path.join("~", ".filelocker")
    DEFAULT_CONFIG_FILE = ".filelocker.yml"

    # yaml key -> Settings field
    KEYS = {
        "base-url": "base_url",
        "token": "token",
        "set-read-only": "set_read_only",
        "native-extensions": "native_extensions",
        "max-workers": "max_workers",
        "timeout": "timeout",
        "log-level": "log_level",
        "plugin-name": "plugin_name",
    }

    @staticmethod
    def load_config(config_dir: Optional[str] = None) -> Dict:
        """Load configuration from YAML file"""
        config_dir = os.path.expanduser(config_dir or Config.DEFAULT_CONFIG_DIR)
        config_path = os.path.join(config_dir, Config.DEFAULT_CONFIG_FILE)
        if not os.path.exists(config_path):
            logger.debug("No config file at %s", config_path)
            return {}

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load config file {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {config_path} must contain a mapping")

        unknown = set(data) - set(Config.KEYS)
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(sorted(unknown)))
        return {Config.KEYS[k]: v for k, v in data.items() if k in Config.KEYS}

    @staticmethod
    def load_env() -> Dict:
        """Read fallbacks from environment variables"""
        env = {
            "base_url": os.environ.get("FILELOCKER_BASE_URL"),
            "token": os.environ.get("FILELOCKER_TOKEN"),
        }
        return {k: v for k, v in env.items() if v}

    @staticmethod
    def merge_config(env_config: Dict, file_config: Dict, overrides: Dict) -> Dict:
        """Merge config sources, overrides take precedence over file over env"""
        merged = {}
        for source in (env_config, file_config, overrides):
            merged.update({k: v for k, v in source.items() if v is not None})
        return merged


def load_settings(config_dir: Optional[str] = None, **overrides) -> Settings:
    """Build Settings from environment, config file and explicit overrides."""
    known = {f.name for f in fields(Settings)}
    bad = set(overrides) - known
    if bad:
        raise ConfigError(f"Unknown settings: {', '.join(sorted(bad))}")

    merged = Config.merge_config(Config.load_env(), Config.load_config(config_dir), overrides)
    if isinstance(merged.get("native_extensions"), str):
        merged["native_extensions"] = [merged["native_extensions"]]
    if "native_extensions" in merged:
        merged["native_extensions"] = tuple(merged["native_extensions"])

    try:
        return Settings(**merged)
    except TypeError as e:
        raise ConfigError(f"Invalid settings: {e}") from e
