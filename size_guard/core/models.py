"""Data models for size monitoring."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TargetKind(Enum):
    """What a target path points at."""
    FILE = "file"
    DIRECTORY = "path"


class TargetAction(Enum):
    """What to do when a target exceeds its threshold."""
    WARN = "warn"
    TRASH = "trash"


class CheckStatus(Enum):
    """Result of comparing a measurement against a threshold."""
    UNAVAILABLE = "unavailable"
    WITHIN_LIMIT = "within_limit"
    EXCEEDED = "exceeded"


class ActionOutcome(Enum):
    """What the action executor did for an exceeded target."""
    WARNED = "warned"
    WARNING_SUPPRESSED = "warning_suppressed"
    TRASHED = "trashed"
    TRASH_FAILED = "trash_failed"


@dataclass
class MonitorTarget:
    """A monitored file or directory and its run-state.

    ``alerted`` is true while the target is in an exceeded episode that has
    already been handled. It is the only field changed between polls.
    """
    path: str
    kind: TargetKind
    threshold_bytes: float
    threshold_label: str
    action: TargetAction
    alerted: bool = False
    line_number: Optional[int] = None

    @property
    def is_directory(self) -> bool:
        return self.kind is TargetKind.DIRECTORY


@dataclass
class DirectoryStats:
    """Statistics about a directory tree."""
    path: str
    total_size: int
    file_count: int
    folder_count: int
    skipped_entries: int = 0


@dataclass
class CheckResult:
    """Outcome of evaluating one target in one cycle."""
    target: MonitorTarget
    status: CheckStatus
    current_size: Optional[int] = None
    percentage: Optional[float] = None
    outcome: Optional[ActionOutcome] = None

    @property
    def exceeded(self) -> bool:
        return self.status is CheckStatus.EXCEEDED
