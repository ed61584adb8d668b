"""Loading of the function manifest and the project config"""

import json
import logging
from pathlib import Path
from typing import Any, Tuple, Union

from ..api.exceptions import (
    MissingFunctionsFileError,
    MalformedFunctionsFileError,
    MissingProjectConfigError,
    MalformedProjectConfigError,
)
from ..models.project import ProjectConfig
from ..models.settings import Settings

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Read the project files a deployment depends on"""

    def __init__(self, project_dir: Union[str, Path], settings: Settings = None):
        """
        Initialize config loader

        Args:
            project_dir: Project directory holding the manifest and config
            settings: Tool settings (file names, default source)
        """
        self.project_dir = Path(project_dir)
        self.settings = settings or Settings()

    @property
    def manifest_path(self) -> Path:
        return self.project_dir / self.settings.manifest_file

    @property
    def project_config_path(self) -> Path:
        return self.project_dir / self.settings.project_config_file

    def load_functions(self) -> Tuple[str, ...]:
        """
        Load the ordered function name list

        Returns:
            Function names in manifest order

        Raises:
            MissingFunctionsFileError: If the manifest does not exist
            MalformedFunctionsFileError: If it is not a JSON array of strings
        """
        path = self.manifest_path
        if not path.is_file():
            raise MissingFunctionsFileError(str(path))

        data = self._read_json(path, MalformedFunctionsFileError)

        if not isinstance(data, list):
            raise MalformedFunctionsFileError(
                str(path), f"expected an array of names, got {type(data).__name__}"
            )

        for position, name in enumerate(data):
            if not isinstance(name, str):
                raise MalformedFunctionsFileError(
                    str(path), f"entry {position} is not a string: {name!r}"
                )

        logger.debug(f"Loaded {len(data)} function names from {path}")
        return tuple(data)

    def load_project_config(self) -> ProjectConfig:
        """
        Load the provider project config

        Returns:
            ProjectConfig with the functions source resolved

        Raises:
            MissingProjectConfigError: If the config file does not exist
            MalformedProjectConfigError: If it is not a JSON object
        """
        path = self.project_config_path
        if not path.is_file():
            raise MissingProjectConfigError(str(path))

        data = self._read_json(path, MalformedProjectConfigError)

        if not isinstance(data, dict):
            raise MalformedProjectConfigError(
                str(path), f"expected an object, got {type(data).__name__}"
            )

        config = ProjectConfig.from_dict(data, default_source=self.settings.default_source)
        if config.uses_default_source:
            logger.warning(
                f"No functions source declared in {path.name}, "
                f"using default '{config.source}'"
            )
        return config

    def resolve_functions_dir(self, config: ProjectConfig) -> Path:
        """Resolve the functions source folder against the project directory"""
        return (self.project_dir / config.source).resolve()

    def _read_json(self, path: Path, error_class) -> Any:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise error_class(str(path), f"invalid JSON ({e})")
        except (OSError, UnicodeDecodeError) as e:
            raise error_class(str(path), str(e))
