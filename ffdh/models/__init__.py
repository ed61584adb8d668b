# ffdh/models/__init__.py
"""Data models for ffdh"""

from .settings import Settings
from .project import ProjectConfig
from .selection import SelectionMode, SearchMode, BatchMode
from .result import (
    ValidatedContext,
    DeployCommand,
    ExecutionOutcome,
    DeployResult,
    DeploymentPlan,
)

__all__ = [
    # Settings models
    "Settings",

    # Project models
    "ProjectConfig",

    # Selection models
    "SelectionMode",
    "SearchMode",
    "BatchMode",

    # Result models
    "ValidatedContext",
    "DeployCommand",
    "ExecutionOutcome",
    "DeployResult",
    "DeploymentPlan",
]
