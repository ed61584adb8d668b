"""Core functionality for ffdh"""

from .settings_loader import SettingsLoader, load_settings
from .config_loader import ConfigLoader
from .validation_engine import Validator, validate_project
from .selector import (
    select,
    search_functions,
    batch_functions,
    batch_bounds,
    validate_batch_mode,
    format_only_argument,
)
from .invoker import Invoker

__all__ = [
    "SettingsLoader",
    "load_settings",
    "ConfigLoader",
    "Validator",
    "validate_project",
    "select",
    "search_functions",
    "batch_functions",
    "batch_bounds",
    "validate_batch_mode",
    "format_only_argument",
    "Invoker",
]
