"""Size measurement for monitored files and directories."""

import os
import stat
import logging
from typing import List, Optional

from .models import DirectoryStats


class SizeProbe:
    """Measures file sizes and directory tree totals.

    Missing or unreadable targets are reported as ``None`` rather than raised,
    since a target disappearing between polls is an expected condition.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def measure_file(self, path: str) -> Optional[int]:
        """Get the size of a regular file.

        Args:
            path: Path to the file.

        Returns:
            Size in bytes, or None if the path is missing or not a regular file.
        """
        try:
            file_stat = os.stat(path)
        except FileNotFoundError:
            self.logger.debug(f"File does not exist: {path}")
            return None
        except (OSError, ValueError) as e:
            self.logger.warning(f"Cannot stat '{path}': {e}")
            return None

        if not stat.S_ISREG(file_stat.st_mode):
            self.logger.debug(f"Path is not a regular file: {path}")
            return None

        return file_stat.st_size

    def measure_directory(self, path: str) -> Optional[DirectoryStats]:
        """Walk a directory tree and total up its regular files.

        Entries that cannot be inspected are skipped and counted, so the walk
        always completes with partial totals.

        Args:
            path: Root directory of the tree.

        Returns:
            DirectoryStats for the tree, or None if the root is missing,
            not a directory or cannot be listed.
        """
        if not os.path.isdir(path):
            self.logger.debug(f"Directory does not exist: {path}")
            return None

        try:
            root_entries = list(os.scandir(path))
        except (OSError, ValueError) as e:
            self.logger.warning(f"Cannot list directory '{path}': {e}")
            return None

        total_size = 0
        file_count = 0
        folder_count = 0
        skipped = 0
        pending: List[List[os.DirEntry]] = [root_entries]

        while pending:
            for entry in pending.pop():
                try:
                    if entry.is_file(follow_symlinks=False):
                        total_size += entry.stat(follow_symlinks=False).st_size
                        file_count += 1
                    elif entry.is_dir(follow_symlinks=False):
                        folder_count += 1
                        pending.append(list(os.scandir(entry.path)))
                except (OSError, ValueError) as e:
                    # Permission denied or removed while walking
                    self.logger.debug(f"Skipping {entry.path}: {e}")
                    skipped += 1
                    continue

        if skipped:
            self.logger.info(f"Skipped {skipped} unreadable entries under {path}")

        return DirectoryStats(
            path=path,
            total_size=total_size,
            file_count=file_count,
            folder_count=folder_count,
            skipped_entries=skipped
        )

    def measure(self, path: str, is_directory: bool) -> Optional[int]:
        """Get the size of a file, or the total size of a directory tree."""
        if is_directory:
            stats = self.measure_directory(path)
            return stats.total_size if stats is not None else None
        return self.measure_file(path)
