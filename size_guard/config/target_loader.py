"""Loading of monitored targets from a tab-separated file."""

import logging
import os
from typing import List, Optional

from ..core.models import MonitorTarget, TargetAction, TargetKind
from ..utils.formatters import format_path


logger = logging.getLogger(__name__)

UNIT_MULTIPLIERS = {
    '': 1,
    'b': 1,
    'k': 1024,
    'kb': 1024,
    'm': 1024 ** 2,
    'mb': 1024 ** 2,
    'g': 1024 ** 3,
    'gb': 1024 ** 3,
    't': 1024 ** 4,
    'tb': 1024 ** 4,
}

BOM = '\ufeff'


def parse_size(size_str: str) -> float:
    """Convert a size string such as "10MB" or "1.5g" to bytes.

    Units are binary multiples and case-insensitive. A number without a
    unit is a byte count.

    Args:
        size_str: Size string from the targets file.

    Returns:
        Size in bytes. 0.0 if the number cannot be parsed.
    """
    size_str = size_str.strip()
    if not size_str:
        return 0.0

    split_at = 0
    while split_at < len(size_str) and (size_str[split_at].isdigit() or size_str[split_at] == '.'):
        split_at += 1

    num_str = size_str[:split_at]
    unit = size_str[split_at:].strip()

    try:
        value = float(num_str)
    except ValueError:
        logger.warning(f"Invalid size format '{size_str}', using 0 as default")
        return 0.0

    multiplier = UNIT_MULTIPLIERS.get(unit.lower())
    if multiplier is None:
        logger.warning(f"Unknown unit '{unit}', using bytes as default")
        multiplier = 1

    return value * multiplier


def parse_action(action_str: str) -> TargetAction:
    """Resolve an action name, falling back to warn."""
    try:
        return TargetAction(action_str.strip().lower())
    except ValueError:
        logger.warning(f"Unknown action '{action_str}', using 'warn' as default")
        return TargetAction.WARN


def parse_kind(kind_str: Optional[str], line_number: Optional[int] = None) -> TargetKind:
    """Resolve a target kind ("file" or "path"), falling back to file."""
    if kind_str is None:
        return TargetKind.FILE

    try:
        return TargetKind(kind_str.strip().lower())
    except ValueError:
        where = f" in line {line_number}" if line_number is not None else ""
        logger.warning(f"Invalid type '{kind_str}'{where}, using 'file' as default")
        return TargetKind.FILE


def parse_targets(content: str) -> List[MonitorTarget]:
    """Parse targets file content.

    The first non-blank line is a header. Each following line holds
    path, size threshold, action and an optional kind, separated by tabs.

    Args:
        content: Text of the targets file.

    Returns:
        Parsed targets in file order.
    """
    if content.startswith(BOM):
        content = content[len(BOM):]

    targets = []
    header_seen = False

    # Only \n ends a record; other Unicode line breaks may appear in paths
    for line_number, line in enumerate(content.split('\n'), 1):
        if line.endswith('\r'):
            line = line[:-1]

        if not line.strip():
            continue

        if not header_seen:
            header_seen = True
            continue

        raw_fields = line.split('\t')
        # A single trailing tab ends the last field instead of opening a new one
        if line.endswith('\t'):
            raw_fields.pop()
        fields = [field.strip(' \t') for field in raw_fields]

        if len(fields) < 3:
            logger.warning(f"Line {line_number} has incorrect format, skipping. "
                           f"Fields found: {len(fields)}")
            logger.warning(f"Line content: {line}")
            continue

        path, size_str, action_str = fields[0], fields[1], fields[2]
        kind_str = fields[3] if len(fields) >= 4 else None

        target = MonitorTarget(
            path=path,
            kind=parse_kind(kind_str, line_number),
            threshold_bytes=parse_size(size_str),
            threshold_label=size_str,
            action=parse_action(action_str),
            line_number=line_number
        )
        targets.append(target)

        logger.info(f"Loaded target: {format_path(target.path)} -> {target.threshold_label} "
                    f"[{target.action.value}] (type: {target.kind.value}, "
                    f"{target.threshold_bytes:.0f} bytes)")

    return targets


def load_targets(targets_path: str) -> List[MonitorTarget]:
    """Load targets from a tab-separated file.

    Args:
        targets_path: Path to the targets file.

    Returns:
        Parsed targets in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file cannot be read or holds no usable targets.
    """
    if not os.path.exists(targets_path):
        raise FileNotFoundError(f"Targets file not found: {targets_path}")

    try:
        with open(targets_path, 'r', encoding='utf-8', errors='surrogateescape',
                  newline='') as f:
            content = f.read()
    except OSError as e:
        raise ValueError(f"Error reading targets file {targets_path}: {e}")

    targets = parse_targets(content)
    if not targets:
        raise ValueError(f"No usable targets found in {targets_path}")

    logger.info(f"Successfully loaded {len(targets)} target configurations")
    return targets
