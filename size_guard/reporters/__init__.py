"""Reporters for size monitor output."""

from .console_reporter import ConsoleReporter

__all__ = ["ConsoleReporter"]
