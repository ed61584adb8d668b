# ffdh/core/invoker.py
"""Execution of the external deploy command"""

import logging
import subprocess
import time
from typing import Optional

from ..api.exceptions import ExternalToolFailure
from ..constants import (
    DEPLOY_SUBCOMMAND,
    ONLY_FLAG,
    EXIT_SPAWN_FAILED,
    EXIT_TIMEOUT,
)
from ..models.result import DeployCommand, ExecutionOutcome

logger = logging.getLogger(__name__)


class Invoker:
    """Run `<tool> deploy --only <names>` synchronously

    The command is passed as discrete argv, never through a shell. Failed
    deployments are reported and never retried.
    """

    def __init__(self, timeout: Optional[float] = None,
                 capture_output: bool = False,
                 dry_run: bool = False):
        """
        Initialize invoker

        Args:
            timeout: Seconds to wait for the command, None waits forever
            capture_output: Capture stdout/stderr instead of inheriting them
            dry_run: Build the command without running it
        """
        self.timeout = timeout
        self.capture_output = capture_output
        self.dry_run = dry_run

    def build_command(self, executable: str, only_argument: str) -> DeployCommand:
        return DeployCommand(executable, (DEPLOY_SUBCOMMAND, ONLY_FLAG, only_argument))

    def invoke(self, executable: str, only_argument: str) -> ExecutionOutcome:
        """
        Run the deploy command and wait for it to exit

        Args:
            executable: Resolved path of the deploy tool
            only_argument: Comma-joined, prefixed function names

        Returns:
            ExecutionOutcome of a successful (or dry) run

        Raises:
            ExternalToolFailure: If the command cannot start, times out
                or exits non-zero
        """
        command = self.build_command(executable, only_argument)

        if self.dry_run:
            logger.info(f"Dry run, not executing: {command.display}")
            return ExecutionOutcome(command=command, executed=False)

        logger.debug(f"Executing {command.display}")
        started = time.monotonic()

        try:
            completed = subprocess.run(
                command.argv,
                capture_output=self.capture_output,
                text=True,
                timeout=self.timeout,
                check=False
            )
        except subprocess.TimeoutExpired as e:
            outcome = ExecutionOutcome(
                command=command,
                returncode=EXIT_TIMEOUT,
                stdout=_as_text(e.stdout),
                stderr=_as_text(e.stderr),
                duration=time.monotonic() - started
            )
            raise ExternalToolFailure(
                f"{command.executable} did not finish within {self.timeout:g}s",
                EXIT_TIMEOUT,
                outcome
            )
        except OSError as e:
            outcome = ExecutionOutcome(
                command=command,
                returncode=EXIT_SPAWN_FAILED,
                stderr=str(e),
                duration=time.monotonic() - started
            )
            raise ExternalToolFailure(
                f"Unable to start {command.executable}: {e}",
                EXIT_SPAWN_FAILED,
                outcome
            )

        outcome = ExecutionOutcome(
            command=command,
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
            duration=time.monotonic() - started
        )

        if outcome.stdout:
            logger.info(f"stdout: {outcome.stdout.rstrip()}")
        if outcome.stderr:
            logger.error(f"stderr: {outcome.stderr.rstrip()}")

        if completed.returncode != 0:
            raise ExternalToolFailure(
                f"{command.executable} exited with code {completed.returncode}",
                completed.returncode,
                outcome
            )

        logger.debug(f"Deploy command finished in {outcome.duration:.2f}s")
        return outcome


def _as_text(stream) -> Optional[str]:
    if stream is None:
        return None
    if isinstance(stream, bytes):
        return stream.decode('utf-8', errors='replace')
    return stream
