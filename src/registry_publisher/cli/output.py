"""Output utilities for CLI commands with clear intent."""

import click
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from registry_publisher.core.decision import PublishAction
from registry_publisher.core.publish_registry import PublishResult


def user_output(message: str) -> None:
    """Output informational message for human users (goes to stderr)."""
    click.echo(message, err=True)


def format_publish_summary(result: PublishResult, *, dry_run: bool) -> Panel:
    """Format the final summary box: action, version, content hash, run log."""
    decision = result.decision
    lines: list[Text] = []

    if decision.action is PublishAction.SKIP:
        reason = decision.skip_reason.value if decision.skip_reason is not None else "unknown"
        lines.append(Text(f"Action: skip ({reason})", style="yellow"))
    else:
        lines.append(Text(f"Action: {decision.action.value}", style="green"))
        lines.append(Text(f"Version: {decision.version}"))

    lines.append(Text(f"Content hash: {result.new_content_hash}", style="dim"))
    if dry_run:
        lines.append(Text("Dry run: no publish or tag calls were made", style="dim"))

    lines.append(Text(""))
    lines.extend(Text(line) for line in result.log.lines())

    title = result.log.title + (" (dry run)" if dry_run else "")
    border = "yellow" if decision.action is PublishAction.SKIP else "green"
    return Panel(Text("\n").join(lines), title=title, border_style=border, padding=(1, 2))


def print_publish_summary(
    result: PublishResult, *, dry_run: bool, console: Console | None = None
) -> None:
    if console is None:
        console = Console(stderr=True)
    console.print(format_publish_summary(result, dry_run=dry_run))
