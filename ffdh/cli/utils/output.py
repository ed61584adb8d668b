# ffdh/cli/utils/output.py
"""Output formatting utilities"""

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ...api.exceptions import ExternalToolFailure
from ...constants import APP_TITLE, APP_NAME, MSG_DEPLOY_SUCCESS
from ...models import DeployResult, DeploymentPlan

console = Console()


def print_banner(version: str) -> None:
    """Print application name and version"""
    console.print(f"\n[bold]{APP_TITLE} ({APP_NAME})[/bold]")
    console.print(f"Version: {version}\n")


def format_selection(plan: DeploymentPlan) -> None:
    """Display the selected functions"""
    table = Table(title=plan.mode.describe(), box=box.SIMPLE)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Function", style="cyan")

    for position, name in enumerate(plan.selected, start=1):
        table.add_row(str(position), name)

    console.print(table)


def format_outcome(result: DeployResult) -> None:
    """Format and display deploy operation result"""
    if result.dry_run:
        panel = Panel(
            f"[yellow]Dry run, command not executed:[/yellow]\n\n{escape(result.outcome.command.display)}",
            title="Deploy Command",
            border_style="yellow"
        )
        console.print(panel)
        return

    lines = [
        f"[green]{MSG_DEPLOY_SUCCESS.format(count=len(result.selected))}[/green]",
        "",
        f"[bold]Command:[/bold] {escape(result.outcome.command.display)}",
        f"[bold]Duration:[/bold] {result.outcome.duration:.2f}s",
    ]

    panel = Panel(
        "\n".join(lines),
        title="Deploy Result",
        border_style="green"
    )
    console.print(panel)


def format_failure(error: ExternalToolFailure) -> None:
    """Display a failed deploy command with its captured diagnostics"""
    lines = [f"[red]✗ Deploy failed:[/red] {escape(str(error))}"]

    outcome = error.outcome
    if outcome is not None:
        lines.append(f"[bold]Command:[/bold] {escape(outcome.command.display)}")
        if outcome.stderr:
            lines.append("")
            lines.append("[bold]stderr:[/bold]")
            lines.append(escape(outcome.stderr.rstrip()))
        if outcome.stdout:
            lines.append("")
            lines.append("[bold]stdout:[/bold]")
            lines.append(escape(outcome.stdout.rstrip()))

    panel = Panel(
        "\n".join(lines),
        title="Deploy Error",
        border_style="red"
    )
    console.print(panel)


def print_error(message: str) -> None:
    """Print error message"""
    console.print(f"[red]Exiting:[/red] {escape(message)}")

