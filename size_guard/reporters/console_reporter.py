"""Console reporter for printing check cycles."""

from datetime import datetime

import click

from ..core.models import ActionOutcome, CheckResult, CheckStatus, TargetKind
from ..utils.formatters import format_file_size, format_path, format_percentage, format_timestamp


class ConsoleReporter:
    """Prints each check cycle and warning notifications to the terminal."""

    SECTION_TITLES = {
        TargetKind.FILE: "Processing FILE targets:",
        TargetKind.DIRECTORY: "Processing PATH targets:",
    }

    OUTCOME_MESSAGES = {
        ActionOutcome.TRASHED: "trashed",
        ActionOutcome.TRASH_FAILED: "trash failed, will retry",
        ActionOutcome.WARNED: "warned",
        ActionOutcome.WARNING_SUPPRESSED: "already warned",
    }

    def __init__(self, show_unavailable: bool = False, color: bool = True):
        """Initialize console reporter.

        Args:
            show_unavailable: Also print targets that could not be measured.
            color: Whether to style status output.
        """
        self.show_unavailable = show_unavailable
        self.color = color

    def cycle_started(self, timestamp: datetime) -> None:
        click.echo(f"\nCheck time: {format_timestamp(timestamp)}")

    def section_started(self, kind: TargetKind) -> None:
        click.echo(f"\n{self.SECTION_TITLES[kind]}")

    def target_checked(self, result: CheckResult) -> None:
        target = result.target
        label = "Directory" if target.is_directory else "File"

        if result.status is CheckStatus.UNAVAILABLE:
            if self.show_unavailable:
                click.echo(f"{label}: {format_path(target.path)} | Status: not available")
            return

        line = (f"{label}: {format_path(target.path)}"
                f" | Current: {format_file_size(result.current_size)}"
                f" | Limit: {target.threshold_label}"
                f" | Action: {target.action.value}"
                f" | Status: ")

        if result.exceeded:
            status = "EXCEEDS LIMIT!"
            if result.outcome is not None:
                status += f" ({self.OUTCOME_MESSAGES[result.outcome]})"
            click.echo(line + self._style(status, fg='red', bold=True))
        else:
            click.echo(line + format_percentage(result.percentage))

    def notify(self, message: str) -> None:
        """Show a warning notification."""
        click.echo(self._style(f"Warning: {message}", fg='yellow', bold=True))

    def _style(self, text: str, **styles) -> str:
        if not self.color:
            return text
        return click.style(text, **styles)
