"""ffdh - Firebase Functions Deployment Helper.

Deploys a subset of a Firebase project's functions, selected by name
prefix/suffix or by batch, to stay within the provider's deployment
limits.
"""

from .__version__ import __version__, __version_info__, __author__, __license__

# Core API
from .api.deployer import Deployer, deploy, resolve_mode

# Data models
from .models import (
    Settings,
    ProjectConfig,
    SelectionMode,
    SearchMode,
    BatchMode,
    ValidatedContext,
    DeployCommand,
    ExecutionOutcome,
    DeployResult,
    DeploymentPlan,
)

# Exceptions
from .api.exceptions import (
    FfdhError,
    SettingsError,
    ValidationError,
    SelectionError,
    ExternalToolFailure,
)

# Building blocks
from .core import (
    ConfigLoader,
    Validator,
    Invoker,
    select,
    format_only_argument,
)

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__license__",

    # Main classes
    "Deployer",
    "ConfigLoader",
    "Validator",
    "Invoker",

    # Core API functions
    "deploy",
    "resolve_mode",
    "select",
    "format_only_argument",

    # Data models
    "Settings",
    "ProjectConfig",
    "SelectionMode",
    "SearchMode",
    "BatchMode",
    "ValidatedContext",
    "DeployCommand",
    "ExecutionOutcome",
    "DeployResult",
    "DeploymentPlan",

    # Exceptions
    "FfdhError",
    "SettingsError",
    "ValidationError",
    "SelectionError",
    "ExternalToolFailure",
]
