"""Command-line interface for size monitor."""

import logging
import signal
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

import click

from .config.config_manager import ConfigManager
from .config.target_loader import load_targets
from .core.actions import ActionExecutor
from .core.monitor import MonitorLoop
from .core.probe import SizeProbe
from .reporters.console_reporter import ConsoleReporter
from .utils.formatters import format_file_size


def setup_logging(level: str, log_file: Optional[str] = None,
                  max_size_mb: int = 10, backup_count: int = 5):
    """Set up logging configuration."""
    # Convert string level to logging constant
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {level}')

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=max_size_mb * 1024 * 1024,
                backupCount=backup_count,
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            click.echo(f"Warning: Could not set up file logging: {e}", err=True)


def install_signal_handlers(monitor: MonitorLoop) -> dict:
    """Route SIGINT and SIGTERM to ``monitor.stop()``.

    Returns:
        The previous handlers, keyed by signal number.
    """
    def handle_signal(signum, frame):
        # No output here, a write can re-enter a stream the loop is using
        monitor.stop()

    previous = {}
    for name in ('SIGINT', 'SIGTERM'):
        signum = getattr(signal, name, None)
        if signum is None:
            continue
        previous[signum] = signal.signal(signum, handle_signal)
    return previous


def restore_signal_handlers(previous: dict) -> None:
    for signum, handler in previous.items():
        signal.signal(signum, handler)


def prompt_interval(default_interval: int) -> int:
    """Ask the operator which monitoring mode to use.

    Returns:
        Check interval in seconds, at least 1.
    """
    click.echo("\nSelect monitoring mode:")
    click.echo(f"1. Regular check mode (every {default_interval} seconds)")
    click.echo("2. Custom check interval")
    choice = click.prompt("Enter your choice (1 or 2)", type=str).strip()

    if choice == '1':
        return default_interval
    if choice == '2':
        interval = click.prompt("Enter check interval (seconds)", type=int)
        return max(1, interval)

    click.echo("Invalid choice, using default regular check mode")
    return default_interval


def _load_targets_or_exit(targets_file: Optional[str], config_manager: ConfigManager):
    path = targets_file or config_manager.get_targets_file()
    try:
        return load_targets(path)
    except (OSError, ValueError) as e:
        click.echo(f"Failed to load targets file: {e}", err=True)
        sys.exit(1)


def _build_monitor(targets, reporter: ConsoleReporter) -> MonitorLoop:
    probe = SizeProbe()
    executor = ActionExecutor(probe=probe, notifier=reporter.notify)
    return MonitorLoop(targets, probe=probe, executor=executor, reporter=reporter)


@click.group()
@click.option('--settings', '-s', 'settings_path',
              help='Path to YAML settings file')
@click.option('--log-level',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level')
@click.option('--log-file',
              help='Log file path')
@click.pass_context
def cli(ctx, settings_path: Optional[str], log_level: Optional[str], log_file: Optional[str]):
    """Size Guard - Watch file and directory sizes and act on limits."""
    ctx.ensure_object(dict)

    config_manager = ConfigManager(settings_path)
    try:
        config_manager.load_config()
    except (OSError, ValueError) as e:
        click.echo(f"Failed to load settings: {e}", err=True)
        sys.exit(1)

    # Command-line options win over the settings file
    logging_config = config_manager.get_logging_config()
    setup_logging(
        log_level or logging_config.get('level', 'INFO'),
        log_file or logging_config.get('file'),
        max_size_mb=logging_config.get('max_size_mb', 10),
        backup_count=logging_config.get('backup_count', 5)
    )

    ctx.obj['config_manager'] = config_manager


@cli.command()
@click.argument('targets_file', required=False)
@click.option('--interval', '-i', type=int,
              help='Check interval in seconds (skips the mode prompt)')
@click.option('--show-unavailable', is_flag=True,
              help='Also print targets that cannot be measured')
@click.pass_context
def run(ctx, targets_file: Optional[str], interval: Optional[int], show_unavailable: bool):
    """Monitor targets until interrupted."""
    config_manager = ctx.obj['config_manager']
    targets = _load_targets_or_exit(targets_file, config_manager)

    if interval is None:
        interval = prompt_interval(config_manager.get_default_interval())
    interval = max(1, interval)

    reporter = ConsoleReporter(show_unavailable=show_unavailable)
    monitor = _build_monitor(targets, reporter)

    click.echo("Press Ctrl+C to stop monitoring")

    previous_handlers = install_signal_handlers(monitor)
    try:
        cycles = monitor.start(interval)
    finally:
        restore_signal_handlers(previous_handlers)

    if monitor.stop_event.is_set():
        click.echo("\nReceived interrupt signal, monitoring stopped")
    click.echo(f"Monitoring stopped after {cycles} checks")


@cli.command()
@click.argument('targets_file', required=False)
@click.option('--show-unavailable', is_flag=True,
              help='Also print targets that cannot be measured')
@click.pass_context
def check(ctx, targets_file: Optional[str], show_unavailable: bool):
    """Run a single check of all targets."""
    config_manager = ctx.obj['config_manager']
    targets = _load_targets_or_exit(targets_file, config_manager)

    reporter = ConsoleReporter(show_unavailable=show_unavailable)
    monitor = _build_monitor(targets, reporter)
    monitor.start(max_cycles=1)


@cli.command()
@click.argument('targets_file', required=False)
@click.pass_context
def validate_config(ctx, targets_file: Optional[str]):
    """Validate settings and targets file."""
    config_manager = ctx.obj['config_manager']
    targets = _load_targets_or_exit(targets_file, config_manager)

    click.echo("✅ Configuration loaded successfully")

    if config_manager.loaded_from:
        click.echo(f"   Settings file: {config_manager.loaded_from}")
    else:
        click.echo("   Settings file: none (using defaults)")
    click.echo(f"   Default interval: {config_manager.get_default_interval()} seconds")

    click.echo(f"\n📊 Targets: {len(targets)}")
    for i, target in enumerate(targets, 1):
        click.echo(f"     {i}. {target.path} ({target.kind.value}): "
                   f"limit {target.threshold_label} = {format_file_size(target.threshold_bytes)}, "
                   f"action {target.action.value}")


def main():
    """Main CLI entry point."""
    cli()


if __name__ == '__main__':
    main()
