"""Remediation actions for targets that exceed their threshold."""

import os
import shutil
import logging
from typing import Callable, Optional

from .models import ActionOutcome, MonitorTarget, TargetAction
from .probe import SizeProbe
from ..utils.formatters import format_file_size, format_path


Notifier = Callable[[str], None]


class FilesystemOperations:
    """Filesystem calls the action executor is allowed to make."""

    def remove_file(self, path: str) -> None:
        raise NotImplementedError

    def remove_tree(self, path: str) -> None:
        raise NotImplementedError

    def create_directory(self, path: str) -> None:
        raise NotImplementedError


class LocalFilesystemOperations(FilesystemOperations):
    """FilesystemOperations backed by the local filesystem.

    A path that is already gone counts as removed. A symlinked directory
    is replaced by a real, empty one.
    """

    def remove_file(self, path: str) -> None:
        try:
            os.remove(path)
        except FileNotFoundError:
            pass

    def remove_tree(self, path: str) -> None:
        link_path = path.rstrip(os.sep) or path
        if os.path.islink(link_path):
            # Drop the link itself, rmtree refuses to walk through it
            os.unlink(link_path)
            return
        try:
            shutil.rmtree(path)
        except FileNotFoundError:
            pass

    def create_directory(self, path: str) -> None:
        os.makedirs(path, exist_ok=True)


class ActionExecutor:
    """Runs the warn and trash actions and records them on the target."""

    def __init__(self, fs_ops: Optional[FilesystemOperations] = None,
                 probe: Optional[SizeProbe] = None,
                 notifier: Optional[Notifier] = None):
        """Initialize action executor.

        Args:
            fs_ops: Filesystem operations used by trash.
            probe: Probe used to collect directory details for warnings.
            notifier: Callable receiving warning messages. Defaults to
                      logging them at WARNING level.
        """
        self.fs_ops = fs_ops or LocalFilesystemOperations()
        self.probe = probe or SizeProbe()
        self.logger = logging.getLogger(__name__)
        self.notifier = notifier or self.logger.warning

    def handle_exceeded(self, target: MonitorTarget, current_size: float) -> ActionOutcome:
        """Apply the target's configured action.

        Args:
            target: Target that is over its threshold.
            current_size: Measured size in bytes.

        Returns:
            What was done.
        """
        if target.action is TargetAction.TRASH:
            if self.trash(target):
                return ActionOutcome.TRASHED
            return ActionOutcome.TRASH_FAILED

        if self.warn(target, current_size):
            return ActionOutcome.WARNED
        return ActionOutcome.WARNING_SUPPRESSED

    def warn(self, target: MonitorTarget, current_size: float) -> bool:
        """Notify about an exceeded target once per episode.

        Returns:
            True if a notification was sent, False if this episode was
            already reported.
        """
        if target.alerted:
            return False

        kind_label = "Directory" if target.is_directory else "File"
        message = (f"{kind_label} {format_path(target.path)} has exceeded size limit! "
                   f"({format_file_size(current_size)} > {target.threshold_label})")

        if target.is_directory:
            stats = self.probe.measure_directory(target.path)
            if stats is not None:
                message += f" Detailed info: {stats.file_count} files, {stats.folder_count} folders"

        self.notifier(message)
        target.alerted = True
        return True

    def trash(self, target: MonitorTarget) -> bool:
        """Remove the target, recreating directories empty.

        Failures leave ``alerted`` untouched so the next cycle tries again.

        Returns:
            True if the target was removed (and recreated, for directories).
        """
        try:
            if target.is_directory:
                self.logger.info(f"Deleting directory and creating empty directory: {target.path}")
                self.fs_ops.remove_tree(target.path)
                self.fs_ops.create_directory(target.path)
            else:
                self.logger.info(f"Deleting file: {target.path}")
                self.fs_ops.remove_file(target.path)
        except OSError as e:
            self.logger.error(f"Failed to trash {target.path}: {e}")
            return False

        self.logger.info(f"Trashed {target.path}")
        target.alerted = True
        return True
