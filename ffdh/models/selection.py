"""Selection mode models"""

from dataclasses import dataclass
from typing import Optional


class SelectionMode:
    """Base class for the ways a subset of functions can be chosen"""

    def describe(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class SearchMode(SelectionMode):
    """Select by name prefix and/or suffix"""
    starts_with: Optional[str] = None
    ends_with: Optional[str] = None

    @property
    def has_criteria(self) -> bool:
        return bool(self.starts_with) or bool(self.ends_with)

    def matches(self, name: str) -> bool:
        """Check a name against the configured prefix and suffix"""
        if self.starts_with and not name.startswith(self.starts_with):
            return False
        if self.ends_with and not name.endswith(self.ends_with):
            return False
        return True

    def describe(self) -> str:
        parts = []
        if self.starts_with:
            parts.append(f"starts with '{self.starts_with}'")
        if self.ends_with:
            parts.append(f"ends with '{self.ends_with}'")
        return "Search: " + (" and ".join(parts) if parts else "no criteria")


@dataclass(frozen=True)
class BatchMode(SelectionMode):
    """Select one contiguous batch out of ``total_batches``

    ``batch_index`` is 1-based.
    """
    total_batches: int
    batch_index: int = 1

    def describe(self) -> str:
        return f"Batch {self.batch_index} of {self.total_batches}"
