"""
Size Guard - A lightweight disk-usage guard.

This package polls configured files and directories, compares their sizes
against thresholds, and warns about or trashes targets that grow too large.
"""

__version__ = "1.0.0"

from .core.monitor import MonitorLoop
from .core.probe import SizeProbe
from .core.actions import ActionExecutor
from .config.target_loader import load_targets

__all__ = ["MonitorLoop", "SizeProbe", "ActionExecutor", "load_targets"]
