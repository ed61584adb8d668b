"""Result models for operations"""

import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .project import ProjectConfig
from .selection import SelectionMode


@dataclass(frozen=True)
class ValidatedContext:
    """Everything the preflight established about the project

    Passed from the validator to the selector and the invoker.
    """
    project_dir: Path
    functions: Tuple[str, ...]
    project_config: ProjectConfig
    functions_dir: Path
    executable: str

    @property
    def function_count(self) -> int:
        return len(self.functions)


@dataclass(frozen=True)
class DeployCommand:
    """Fully formed external command"""
    executable: str
    args: Tuple[str, ...] = ()

    @property
    def argv(self) -> List[str]:
        return [self.executable, *self.args]

    @property
    def display(self) -> str:
        """Shell-quoted form for printing"""
        return shlex.join(self.argv)

    def __str__(self) -> str:
        return self.display


@dataclass
class ExecutionOutcome:
    """Result of running the deploy command"""
    command: DeployCommand
    returncode: Optional[int] = None
    stdout: Optional[str] = None
    stderr: Optional[str] = None
    duration: float = 0.0
    executed: bool = True

    @property
    def success(self) -> bool:
        """Dry runs count as successful"""
        if not self.executed:
            return True
        return self.returncode == 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            'command': self.command.argv,
            'executed': self.executed,
            'success': self.success,
            'duration': self.duration
        }

        if self.returncode is not None:
            data['returncode'] = self.returncode
        if self.stdout:
            data['stdout'] = self.stdout
        if self.stderr:
            data['stderr'] = self.stderr

        return data


@dataclass
class DeployResult:
    """Result of a selection and deploy pass"""
    mode: SelectionMode
    selected: Tuple[str, ...]
    only_argument: str
    outcome: ExecutionOutcome
    context: Optional[ValidatedContext] = None

    @property
    def success(self) -> bool:
        return self.outcome.success

    @property
    def dry_run(self) -> bool:
        return not self.outcome.executed

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'mode': self.mode.describe(),
            'selected': list(self.selected),
            'only': self.only_argument,
            'outcome': self.outcome.to_dict()
        }


@dataclass(frozen=True)
class DeploymentPlan:
    """Selection made for a validated project, ready to execute"""
    context: ValidatedContext
    mode: SelectionMode
    selected: Tuple[str, ...]
    only_argument: str
