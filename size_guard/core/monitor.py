"""Main size monitoring loop."""

import logging
import threading
from datetime import datetime
from enum import Enum
from typing import List, Optional

from .actions import ActionExecutor
from .models import CheckResult, CheckStatus, MonitorTarget, TargetKind
from .probe import SizeProbe


class LoopState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class MonitorLoop:
    """Polls every target, applies its action and tracks alert episodes.

    The loop is stopped through ``stop_event``, which may be set from a
    signal handler or another thread. Nothing that happens while checking a
    target ends the loop.
    """

    def __init__(self, targets: List[MonitorTarget], probe: Optional[SizeProbe] = None,
                 executor: Optional[ActionExecutor] = None, reporter=None,
                 stop_event: Optional[threading.Event] = None):
        """Initialize monitor loop.

        Args:
            targets: Targets to monitor, in configuration order.
            probe: Size probe. A default one is created if not given.
            executor: Action executor. A default one sharing the probe is
                      created if not given.
            reporter: Optional object with ``cycle_started``,
                      ``section_started`` and ``target_checked`` hooks.
            stop_event: Cancellation flag. Created if not given.
        """
        self.targets = list(targets)
        self.probe = probe or SizeProbe()
        self.executor = executor or ActionExecutor(probe=self.probe)
        self.reporter = reporter
        self.stop_event = stop_event or threading.Event()
        self.state = LoopState.IDLE
        self.cycle_count = 0
        self.logger = logging.getLogger(__name__)

    @property
    def file_targets(self) -> List[MonitorTarget]:
        return [t for t in self.targets if t.kind is TargetKind.FILE]

    @property
    def directory_targets(self) -> List[MonitorTarget]:
        return [t for t in self.targets if t.kind is TargetKind.DIRECTORY]

    def start(self, interval_seconds: int = 5, max_cycles: Optional[int] = None) -> int:
        """Run check cycles until stopped.

        Between cycles the loop waits in one-second steps so a stop request
        is honoured within a second.

        Args:
            interval_seconds: Seconds between cycles, at least 1.
            max_cycles: Stop after this many cycles. Runs until cancelled
                        if None.

        Returns:
            Number of cycles completed.
        """
        interval_seconds = max(1, int(interval_seconds))
        completed = 0

        if self.stop_event.is_set():
            self.state = LoopState.STOPPED
            return completed

        self.state = LoopState.RUNNING
        self.logger.info(f"Starting size monitoring, check interval: {interval_seconds} seconds")

        while not self.stop_event.is_set():
            self.run_cycle()
            completed += 1

            if max_cycles is not None and completed >= max_cycles:
                break

            for _ in range(interval_seconds):
                if self.stop_event.wait(1):
                    break

        if self.stop_event.is_set():
            self.state = LoopState.STOPPED
            self.logger.info(f"Monitoring stopped after {completed} cycles")
        else:
            self.state = LoopState.IDLE

        return completed

    def stop(self) -> None:
        """Request the loop to stop. Safe to call more than once."""
        self.stop_event.set()
        self.state = LoopState.STOPPED

    @property
    def is_running(self) -> bool:
        return self.state is LoopState.RUNNING

    def run_cycle(self) -> List[CheckResult]:
        """Evaluate all file targets, then all directory targets.

        Returns:
            Check results in evaluation order.
        """
        self.cycle_count += 1
        now = datetime.now()
        self.logger.debug(f"Starting check cycle {self.cycle_count}")
        if self.reporter is not None:
            self.reporter.cycle_started(now)

        results = []
        for kind, targets in ((TargetKind.FILE, self.file_targets),
                              (TargetKind.DIRECTORY, self.directory_targets)):
            if self.reporter is not None:
                self.reporter.section_started(kind)

            for target in targets:
                try:
                    result = self.evaluate_target(target)
                except Exception as e:
                    self.logger.error(f"Error checking {target.path}: {e}")
                    continue

                results.append(result)
                if self.reporter is not None:
                    self.reporter.target_checked(result)

        exceeded = len([r for r in results if r.exceeded])
        self.logger.debug(f"Cycle {self.cycle_count} complete: {len(results)} checked, {exceeded} over limit")
        return results

    def evaluate_target(self, target: MonitorTarget) -> CheckResult:
        """Measure one target and act on the comparison with its threshold.

        Args:
            target: Target to evaluate.

        Returns:
            The check result.
        """
        current_size = self.probe.measure(target.path, target.is_directory)

        if current_size is None:
            # Unmeasurable targets never count as exceeded
            target.alerted = False
            return CheckResult(target=target, status=CheckStatus.UNAVAILABLE)

        if current_size > target.threshold_bytes:
            outcome = self.executor.handle_exceeded(target, current_size)
            return CheckResult(
                target=target,
                status=CheckStatus.EXCEEDED,
                current_size=current_size,
                outcome=outcome
            )

        percentage = None
        if target.threshold_bytes > 0:
            percentage = current_size / target.threshold_bytes * 100
        target.alerted = False

        return CheckResult(
            target=target,
            status=CheckStatus.WITHIN_LIMIT,
            current_size=current_size,
            percentage=percentage
        )
