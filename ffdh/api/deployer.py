"""Deployer API for partial function deployments"""

import logging
from pathlib import Path
from typing import Callable, Optional, Union

from ..core.invoker import Invoker
from ..core.selector import select, validate_batch_mode, format_only_argument
from ..core.validation_engine import Validator
from ..models import (
    Settings,
    SelectionMode,
    SearchMode,
    BatchMode,
    DeployResult,
    DeploymentPlan,
)
from ..constants import DEFAULT_BATCH_INDEX
from .exceptions import NoSelectionCriteriaError, EmptySelectionError

logger = logging.getLogger(__name__)


def resolve_mode(start: Optional[str] = None,
                 end: Optional[str] = None,
                 batches: Optional[int] = None,
                 batch: Optional[int] = None) -> SelectionMode:
    """
    Turn command line options into a selection mode

    Batch options take precedence over search options; when both are
    given the search options are ignored with a warning. A batch index
    without a batch count does not enable batch mode.

    Args:
        start: Required name prefix
        end: Required name suffix
        batches: Total number of batches
        batch: 1-based batch to deploy (defaults to 1)

    Returns:
        BatchMode or SearchMode
    """
    if batches is not None:
        if start or end:
            logger.warning("Both batch and search options given, ignoring --start/--end")
        return BatchMode(
            total_batches=batches,
            batch_index=DEFAULT_BATCH_INDEX if batch is None else batch
        )

    if batch is not None:
        logger.warning("--batch has no effect without --batches")

    return SearchMode(starts_with=start or None, ends_with=end or None)


class Deployer:
    """Deployer class for partial function deployments"""

    def __init__(self,
                 project_dir: Union[str, Path] = '.',
                 settings: Optional[Settings] = None,
                 timeout: Optional[float] = None,
                 capture_output: bool = False,
                 dry_run: bool = False,
                 which: Optional[Callable[[str], Optional[str]]] = None):
        """
        Initialize deployer

        Args:
            project_dir: Firebase project directory
            settings: Tool settings
            timeout: Deploy command timeout, overrides settings.timeout
            capture_output: Capture deploy command output
            dry_run: Build the deploy command without running it
            which: Executable lookup used by the preflight
        """
        self.project_dir = Path(project_dir)
        self.settings = settings or Settings()
        self.validator = Validator(self.settings, which=which)
        self.invoker = Invoker(
            timeout=timeout if timeout is not None else self.settings.timeout,
            capture_output=capture_output,
            dry_run=dry_run
        )

    def check_mode(self, mode: SelectionMode) -> None:
        """
        Reject selection parameters that can never select anything

        Runs before the preflight so bad options fail fast.

        Raises:
            SelectionError: On invalid batch parameters or missing criteria
        """
        if isinstance(mode, BatchMode):
            validate_batch_mode(mode)
        elif isinstance(mode, SearchMode) and not mode.has_criteria:
            raise NoSelectionCriteriaError()

    def plan(self, mode: SelectionMode) -> DeploymentPlan:
        """
        Validate the project and select the functions to deploy

        Args:
            mode: SearchMode or BatchMode

        Returns:
            DeploymentPlan with a non-empty selection

        Raises:
            SelectionError: If the options are invalid or nothing matches
            ValidationError: If a preflight check fails
        """
        self.check_mode(mode)

        context = self.validator.validate(self.project_dir)

        selected = select(context.functions, mode)
        if not selected:
            raise EmptySelectionError()

        only_argument = format_only_argument(selected, self.settings.namespace_prefix)
        logger.debug(f"--only {only_argument}")

        return DeploymentPlan(
            context=context,
            mode=mode,
            selected=selected,
            only_argument=only_argument
        )

    def execute(self, plan: DeploymentPlan) -> DeployResult:
        """
        Run the deploy command for a plan

        Raises:
            ExternalToolFailure: If the deploy command fails
        """
        outcome = self.invoker.invoke(plan.context.executable, plan.only_argument)

        return DeployResult(
            mode=plan.mode,
            selected=plan.selected,
            only_argument=plan.only_argument,
            outcome=outcome,
            context=plan.context
        )

    def deploy(self, mode: SelectionMode) -> DeployResult:
        """
        Validate the project, select functions and deploy them

        Args:
            mode: SearchMode or BatchMode

        Returns:
            DeployResult: Deployment result

        Raises:
            SelectionError: If the options are invalid or nothing matches
            ValidationError: If a preflight check fails
            ExternalToolFailure: If the deploy command fails
        """
        return self.execute(self.plan(mode))


def deploy(start: Optional[str] = None,
           end: Optional[str] = None,
           batches: Optional[int] = None,
           batch: Optional[int] = None,
           project_dir: Union[str, Path] = '.',
           **options) -> DeployResult:
    """
    Convenience function for deploying a subset of functions

    Args:
        start: Required name prefix
        end: Required name suffix
        batches: Total number of batches
        batch: 1-based batch to deploy
        project_dir: Firebase project directory
        **options: Additional Deployer options

    Returns:
        DeployResult: Deployment result
    """
    mode = resolve_mode(start=start, end=end, batches=batches, batch=batch)
    return Deployer(project_dir=project_dir, **options).deploy(mode)
