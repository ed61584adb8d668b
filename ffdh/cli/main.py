# ffdh/cli/main.py
"""Main CLI entry point for ffdh"""

import logging
import os
import sys
from pathlib import Path

import click
from rich.logging import RichHandler

from ..__version__ import __version__
from ..api import Deployer, resolve_mode
from ..api.exceptions import FfdhError, ExternalToolFailure
from ..constants import APP_NAME, LOG_FORMAT, ENV_LOG_LEVEL, EXIT_INTERRUPTED
from ..core.settings_loader import SettingsLoader
from .utils.output import (
    console,
    print_banner,
    format_selection,
    format_outcome,
    format_failure,
    print_error,
)

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        debug: Enable debug output (DEBUG level)
    """
    if debug:
        level = logging.DEBUG
    else:
        level = os.environ.get(ENV_LOG_LEVEL, 'INFO').upper()
        if not isinstance(logging.getLevelName(level), int):
            level = logging.INFO

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ],
        force=True
    )


@click.command(name=APP_NAME)
@click.option('-s', '--start', metavar='TEXT',
              help='Select functions whose name starts with TEXT')
@click.option('-e', '--end', metavar='TEXT',
              help='Select functions whose name ends with TEXT')
@click.option('-b', '--batches', type=int,
              help='Split the function list into this many batches (1-25)')
@click.option('-i', '--batch', type=int,
              help='Batch to deploy, 1-based (default: 1)')
@click.option('-C', '--directory', type=click.Path(file_okay=False, path_type=Path),
              default=Path('.'), show_default=True,
              help='Firebase project directory')
@click.option('--config', 'config_path', type=click.Path(dir_okay=False, path_type=Path),
              help='Settings file, relative to the current directory '
                   '(default: .ffdh.yaml in the project directory)')
@click.option('--timeout', type=click.FloatRange(min=0, min_open=True),
              help='Seconds to wait for the deploy command')
@click.option('--capture', is_flag=True,
              help='Capture deploy command output instead of streaming it')
@click.option('--dry-run', is_flag=True, help='Show the deploy command without running it')
@click.option('-d', '--debug', is_flag=True,
              help='Output extra information during operation (the deploy still runs; '
                   'use --dry-run to only print the command)')
@click.version_option(__version__, prog_name=APP_NAME)
@click.pass_context
def cli(ctx, start, end, batches, batch, directory, config_path,
        timeout, capture, dry_run, debug):
    """Deploy a subset of a Firebase project's functions

    Reads the function names from functions.json and runs
    `firebase deploy --only functions:<name>,...` for the selected ones,
    keeping each deployment under the provider's batch limits.

    Examples:

        # Deploy every function whose name starts with "user"
        ffdh --start user

        # Deploy functions starting with "api" and ending with "V2"
        ffdh -s api -e V2

        # Deploy the second of four equal batches
        ffdh --batches 4 --batch 2

        # Show the command without running it
        ffdh --batches 4 --batch 2 --dry-run
    """
    setup_logging(debug=debug)
    print_banner(__version__)
    logger.debug(
        f"Options: start={start!r} end={end!r} batches={batches!r} batch={batch!r} "
        f"directory={directory} dry_run={dry_run}"
    )

    try:
        settings = SettingsLoader(directory, config_path).load()
        mode = resolve_mode(start=start, end=end, batches=batches, batch=batch)

        deployer = Deployer(
            project_dir=directory,
            settings=settings,
            timeout=timeout,
            capture_output=capture,
            dry_run=dry_run
        )
        plan = deployer.plan(mode)
        format_selection(plan)

        if not dry_run:
            console.print(f"[cyan]Deploying {len(plan.selected)} function(s)...[/cyan]")
        result = deployer.execute(plan)

    except ExternalToolFailure as e:
        format_failure(e)
        ctx.exit(e.returncode if e.returncode > 0 else 1)
    except FfdhError as e:
        print_error(str(e))
        logger.debug(f"{type(e).__name__} [{e.error_code}] {e.kind.value if e.kind else ''}")
        ctx.exit(1)

    format_outcome(result)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
    """
    try:
        rv = cli.main(prog_name=APP_NAME, standalone_mode=False)

    except (click.Abort, KeyboardInterrupt):
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(EXIT_INTERRUPTED)

    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)

    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)

    # ctx.exit() codes come back as the return value outside standalone mode
    sys.exit(rv if isinstance(rv, int) else 0)


if __name__ == "__main__":
    main()
