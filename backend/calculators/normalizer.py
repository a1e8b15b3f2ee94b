"""
Unit & schedule normalization.

Both helpers are total: every input maps to an output, nothing raises.
"""

import re

from ..models import LengthUnit

FEET_TO_METERS = 0.3048

# "Sch40", "sch 80", "SCH160" → digits. STD / XS / XXS / MEDIUM / HEAVY pass through.
_SCH_PREFIX = re.compile(r"^sch\s*(\d+)$", re.IGNORECASE)


def normalize_schedule(schedule: str) -> str:
    """Strip a case-insensitive 'Sch' prefix in front of digits. Idempotent."""
    stripped = schedule.strip()
    match = _SCH_PREFIX.match(stripped)
    if match:
        return match.group(1)
    return schedule


def to_meters(value: float, unit: LengthUnit) -> float:
    """Convert a length to meters. METERS passes through untouched."""
    if unit == LengthUnit.FEET:
        return value * FEET_TO_METERS
    return value
