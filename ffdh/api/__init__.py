# ffdh/api/__init__.py
"""API layer for ffdh"""

from .deployer import Deployer, deploy, resolve_mode
from .exceptions import (
    FfdhError,
    SettingsError,
    ValidationError,
    MissingFunctionsFileError,
    MalformedFunctionsFileError,
    MissingProjectConfigError,
    MalformedProjectConfigError,
    MissingFunctionsDirectoryError,
    MissingExternalToolError,
    SelectionError,
    NoSelectionCriteriaError,
    InvalidBatchCountError,
    InvalidBatchIndexError,
    EmptySelectionError,
    ExternalToolFailure,
)

__all__ = [
    # Main classes
    "Deployer",

    # Convenience functions
    "deploy",
    "resolve_mode",

    # Exceptions
    "FfdhError",
    "SettingsError",
    "ValidationError",
    "MissingFunctionsFileError",
    "MalformedFunctionsFileError",
    "MissingProjectConfigError",
    "MalformedProjectConfigError",
    "MissingFunctionsDirectoryError",
    "MissingExternalToolError",
    "SelectionError",
    "NoSelectionCriteriaError",
    "InvalidBatchCountError",
    "InvalidBatchIndexError",
    "EmptySelectionError",
    "ExternalToolFailure",
]
