"""Core app services for settings, logging, and terminal prompts."""

from .config import AppConfig, config_path, load_config, save_config
from .logging_setup import configure_logging, get_logger, install_crash_hooks
from .prompts import menu, prompt

__all__ = [
    "AppConfig",
    "config_path",
    "configure_logging",
    "get_logger",
    "install_crash_hooks",
    "load_config",
    "menu",
    "prompt",
    "save_config",
]
