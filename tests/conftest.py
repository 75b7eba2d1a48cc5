"""
Pytest configuration and shared fixtures.
"""

import logging

import pytest

from size_guard.core.models import MonitorTarget, TargetAction, TargetKind


@pytest.fixture(autouse=True)
def reset_root_logging():
    """Drop handlers the CLI installs so they don't outlive a test's streams."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    # setup_logging clears the root logger, including pytest's own handlers
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)


def write_bytes(path, size):
    """Create or overwrite ``path`` with ``size`` bytes."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


def make_target(path, threshold, action=TargetAction.WARN, kind=TargetKind.FILE, label=None):
    return MonitorTarget(
        path=str(path),
        kind=kind,
        threshold_bytes=float(threshold),
        threshold_label=label or f"{threshold}B",
        action=action,
    )
