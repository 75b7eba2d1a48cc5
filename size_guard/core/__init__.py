"""Core monitoring functionality."""

from .monitor import MonitorLoop, LoopState
from .probe import SizeProbe
from .actions import ActionExecutor, FilesystemOperations, LocalFilesystemOperations
from .models import (ActionOutcome, CheckResult, CheckStatus, DirectoryStats,
                     MonitorTarget, TargetAction, TargetKind)

__all__ = [
    "MonitorLoop", "LoopState", "SizeProbe", "ActionExecutor", "FilesystemOperations",
    "LocalFilesystemOperations", "ActionOutcome", "CheckResult", "CheckStatus",
    "DirectoryStats", "MonitorTarget", "TargetAction", "TargetKind",
]
