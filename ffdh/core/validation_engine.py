# ffdh/core/validation_engine.py
"""Preflight validation of a Firebase project"""

import logging
import shutil
from pathlib import Path
from typing import Callable, Optional, Union

from .config_loader import ConfigLoader
from ..api.exceptions import MissingFunctionsDirectoryError, MissingExternalToolError
from ..constants import MSG_LOCATED
from ..models.result import ValidatedContext
from ..models.settings import Settings

logger = logging.getLogger(__name__)


class Validator:
    """Run the ordered preflight checks

    Each check raises on failure, so the first unmet precondition stops
    the pipeline. Only read-only filesystem probes are performed.
    """

    def __init__(self, settings: Optional[Settings] = None,
                 which: Optional[Callable[[str], Optional[str]]] = None):
        """
        Initialize validator

        Args:
            settings: Tool settings
            which: Executable lookup, shutil.which by default
        """
        self.settings = settings or Settings()
        self._which = which

    def validate(self, current_dir: Union[str, Path]) -> ValidatedContext:
        """
        Validate the project in current_dir

        Args:
            current_dir: Project directory

        Returns:
            ValidatedContext for the selection and invoke stages

        Raises:
            ValidationError: On the first failed check
        """
        project_dir = Path(current_dir).resolve()
        loader = ConfigLoader(project_dir, self.settings)

        logger.info(f"Validating Firebase project in {project_dir}")

        # Function list
        functions = loader.load_functions()
        logger.info(MSG_LOCATED.format(path=loader.manifest_path))
        logger.debug(f"Functions: {', '.join(functions) if functions else '(none)'}")

        # Project config
        project_config = loader.load_project_config()
        logger.info(MSG_LOCATED.format(path=loader.project_config_path))

        # Functions source folder
        functions_dir = loader.resolve_functions_dir(project_config)
        logger.info(f"Determined functions folder: {functions_dir}")
        self.check_directory(functions_dir)
        logger.info(MSG_LOCATED.format(path=functions_dir))

        # Deploy command
        executable = self.find_executable(self.settings.deploy_command)
        logger.info(f"Deploy command found at {Path(executable).parent}")

        return ValidatedContext(
            project_dir=project_dir,
            functions=functions,
            project_config=project_config,
            functions_dir=functions_dir,
            executable=executable,
        )

    def check_directory(self, path: Path) -> None:
        """Require path to be an existing directory"""
        logger.debug(f"check_directory({path})")
        if not path.is_dir():
            raise MissingFunctionsDirectoryError(str(path))

    def find_executable(self, command: str) -> str:
        """Locate command on PATH"""
        logger.debug(f"Looking for {command} command")
        lookup = self._which or shutil.which
        found = lookup(command)
        if not found:
            raise MissingExternalToolError(command)
        return str(found)


def validate_project(current_dir: Union[str, Path],
                     settings: Optional[Settings] = None) -> ValidatedContext:
    """Convenience function running the preflight with default lookups"""
    return Validator(settings).validate(current_dir)
