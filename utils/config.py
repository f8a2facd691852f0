# Registry settings
#
# Settings are read from YAML, first match wins:
#   1. the file named by the MERCHANT_CONFIG environment variable
#   2. merchant.yaml in the current working directory
#   3. the built-in defaults below
#
# Example document:
#
#   registry:
#     write_strategy: struct
#     read_strategy: direct
#     log_level: DEBUG

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

# --- Configuration Constants ---
CONFIG_ENV_VAR = "MERCHANT_CONFIG"
CONFIG_FILE_NAME = "merchant.yaml"
DEFAULT_WRITE_STRATEGY = "fields"
DEFAULT_READ_STRATEGY = "local"
DEFAULT_LOG_LEVEL = "WARNING"

WRITE_STRATEGIES = ("fields", "struct")
READ_STRATEGIES = ("local", "direct", "struct")


def check_strategy(name, choices, kind):
    """
    Returns name if it is one of choices, otherwise raises ValueError.
    """
    if name not in choices:
        raise ValueError(f"Unknown {kind} strategy '{name}'. Choose one of: {', '.join(choices)}.")
    return name


@dataclass
class Settings:
    """
    Default strategies and log level for an item service.
    The log level is upper-cased and must name a logging level.
    """
    write_strategy: str = DEFAULT_WRITE_STRATEGY
    read_strategy: str = DEFAULT_READ_STRATEGY
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        check_strategy(self.write_strategy, WRITE_STRATEGIES, "write")
        check_strategy(self.read_strategy, READ_STRATEGIES, "read")
        self.log_level = str(self.log_level).strip().upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"'log_level' is not a logging level: '{self.log_level}'")

    @property
    def log_level_value(self):
        return logging.getLevelName(self.log_level)


_settings = None


def _resolve_config_path():
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        candidate = Path(env_path).expanduser()
        if candidate.is_file():
            return candidate

    cwd_file = Path.cwd() / CONFIG_FILE_NAME
    if cwd_file.is_file():
        return cwd_file
    return None


def _build_settings(data):
    if not isinstance(data, dict):
        raise ValueError("Configuration document must be a mapping")
    node = data.get("registry", {}) or {}
    if not isinstance(node, dict):
        raise ValueError("'registry' section must be a mapping")

    return Settings(
        write_strategy=str(node.get("write_strategy", DEFAULT_WRITE_STRATEGY)).strip().lower(),
        read_strategy=str(node.get("read_strategy", DEFAULT_READ_STRATEGY)).strip().lower(),
        log_level=node.get("log_level", DEFAULT_LOG_LEVEL),
    )


def load_settings(path=None):
    """
    Reads settings from path, or from the first config file found.
    Falls back to the defaults when there is no file.
    """
    if path is None:
        path = _resolve_config_path()
    if path is None:
        return Settings()
    with Path(path).open("r", encoding="utf-8") as fh:
        return _build_settings(yaml.safe_load(fh) or {})


def get_settings():
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings():
    """
    Resets cached settings (intended for tests).
    """
    global _settings
    _settings = None
