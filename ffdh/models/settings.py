"""Tool settings model"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from ..constants import (
    DEFAULT_MANIFEST_FILE,
    DEFAULT_PROJECT_CONFIG_FILE,
    DEFAULT_DEPLOY_COMMAND,
    DEFAULT_NAMESPACE_PREFIX,
    DEFAULT_FUNCTIONS_SOURCE,
)

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Tool-level settings

    This represents the optional .ffdh.yaml file. The defaults match a
    stock Firebase project layout.
    """
    manifest_file: str = DEFAULT_MANIFEST_FILE
    project_config_file: str = DEFAULT_PROJECT_CONFIG_FILE
    deploy_command: str = DEFAULT_DEPLOY_COMMAND
    namespace_prefix: str = DEFAULT_NAMESPACE_PREFIX
    default_source: str = DEFAULT_FUNCTIONS_SOURCE
    timeout: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Settings':
        """Create Settings from dictionary

        Args:
            data: Settings dictionary

        Returns:
            Settings instance
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown settings: {', '.join(unknown)}")

        values = {key: value for key, value in data.items() if key in known}

        timeout = values.get('timeout')
        if timeout is not None:
            timeout = float(timeout)
            if timeout <= 0:
                raise ValueError(f"timeout must be positive, got {timeout}")
            values['timeout'] = timeout

        for key, value in values.items():
            if key != 'timeout' and not isinstance(value, str):
                raise ValueError(f"{key} must be a string, got {type(value).__name__}")

        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {f.name: getattr(self, f.name) for f in fields(self)}
