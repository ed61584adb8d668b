"""Project config model"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ..constants import DEFAULT_FUNCTIONS_SOURCE


@dataclass(frozen=True)
class ProjectConfig:
    """Typed view of the provider project config (firebase.json)

    Only the functions source folder is read. Firebase allows ``functions``
    to be a single object or a list of codebases; for a list the first
    entry declaring a ``source`` is used.
    """
    functions_source: Optional[str] = None
    default_source: str = DEFAULT_FUNCTIONS_SOURCE
    raw: Mapping[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def source(self) -> str:
        """Functions source folder, falling back to the default when unset"""
        return self.functions_source or self.default_source

    @property
    def uses_default_source(self) -> bool:
        return not self.functions_source

    @classmethod
    def from_dict(cls, data: Dict[str, Any],
                  default_source: str = DEFAULT_FUNCTIONS_SOURCE) -> 'ProjectConfig':
        """Create ProjectConfig from the parsed config file

        Args:
            data: Parsed project config
            default_source: Folder used when no source is declared

        Returns:
            ProjectConfig instance
        """
        functions = data.get('functions')

        if isinstance(functions, list):
            entries = [entry for entry in functions if isinstance(entry, dict)]
        elif isinstance(functions, dict):
            entries = [functions]
        else:
            entries = []

        source = None
        for entry in entries:
            value = entry.get('source')
            if isinstance(value, str) and value.strip():
                source = value.strip()
                break

        return cls(functions_source=source, default_source=default_source, raw=data)
