# ffdh/core/settings_loader.py
"""Settings loading from .ffdh.yaml and the environment"""

import logging
import os
from pathlib import Path
from typing import Dict, Optional, Union

import yaml

from ..api.exceptions import SettingsError
from ..constants import SETTINGS_FILE, ENV_CONFIG_PATH, ENV_DEPLOY_COMMAND
from ..models.settings import Settings

logger = logging.getLogger(__name__)


class SettingsLoader:
    """Resolve tool settings

    Precedence, lowest first: built-in defaults, settings file,
    environment variables. CLI options are applied by the caller.
    """

    def __init__(self, project_dir: Union[str, Path],
                 settings_path: Optional[Union[str, Path]] = None,
                 environ: Optional[Dict[str, str]] = None):
        """Initialize settings loader

        Args:
            project_dir: Directory searched for .ffdh.yaml
            settings_path: Explicit settings file (overrides FFDH_CONFIG),
                relative to the current directory
            environ: Environment mapping, defaults to os.environ
        """
        self.project_dir = Path(project_dir)
        self.environ = os.environ if environ is None else environ
        self._explicit = settings_path is not None or ENV_CONFIG_PATH in self.environ

        if settings_path is None:
            settings_path = self.environ.get(ENV_CONFIG_PATH)

        # Explicit paths are relative to the working directory, not project_dir
        if settings_path is None:
            self.settings_path = self.project_dir / SETTINGS_FILE
        else:
            self.settings_path = Path(settings_path).expanduser()

    def load(self) -> Settings:
        """Load settings

        Returns:
            Resolved settings

        Raises:
            SettingsError: If the settings file is unreadable or invalid
        """
        data = self._read_file()

        deploy_command = self.environ.get(ENV_DEPLOY_COMMAND)
        if deploy_command:
            logger.debug(f"Deploy command overridden by {ENV_DEPLOY_COMMAND}: {deploy_command}")
            data['deploy_command'] = deploy_command

        try:
            return Settings.from_dict(data)
        except (TypeError, ValueError) as e:
            raise SettingsError(f"Invalid settings in {self.settings_path}: {e}")

    def _read_file(self) -> dict:
        if not self.settings_path.is_file():
            if self._explicit:
                raise SettingsError(f"Settings file not found: {self.settings_path}")
            logger.debug(f"No settings file at {self.settings_path}, using defaults")
            return {}

        logger.debug(f"Loading settings from {self.settings_path}")

        try:
            with open(self.settings_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except OSError as e:
            raise SettingsError(f"Unable to read {self.settings_path}: {e}")

        # Simple environment variable expansion
        content = os.path.expandvars(content)

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise SettingsError(f"Invalid YAML in {self.settings_path}: {e}")

        if data is None:
            return {}

        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {self.settings_path} must contain a mapping")

        return data


def load_settings(project_dir: Union[str, Path],
                  settings_path: Optional[Union[str, Path]] = None) -> Settings:
    """Convenience function to load settings for a project directory"""
    return SettingsLoader(project_dir, settings_path).load()
