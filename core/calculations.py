"""
Numeric and date helpers shared by the analyzers.

This module has no dependencies on models or services to avoid circular imports.
"""

import math
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def round_weight(value: float) -> float:
    """Round a weight to one decimal place, halves up (14.25 -> 14.3)."""
    return float(Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def mean(values: Iterable[float], default: float = 0.0) -> float:
    """Arithmetic mean, or default for an empty input."""
    items = list(values)
    if not items:
        return default
    return sum(items) / len(items)


def parse_session_date(value: str) -> Optional[datetime]:
    """
    Parse an ISO date or datetime string.

    Naive values are treated as UTC and a trailing "Z" is accepted.

    Args:
        value: Date string as logged by the client

    Returns:
        Timezone-aware datetime, or None if the value cannot be parsed
    """
    if not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
