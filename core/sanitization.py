"""
Input sanitization utilities.

Shared helpers for cleaning user-supplied labels (equipment names, muscle
names) before they are matched against the exercise catalog.
This module has no dependencies on models or services to avoid circular imports.
"""

import re

from core.constants import MAX_LABEL_LENGTH


def sanitize_label(value: str, max_length: int = MAX_LABEL_LENGTH) -> str:
    """
    Sanitize a user-provided label.

    - Removes newlines, carriage returns, tabs, and control characters
    - Collapses multiple spaces into one
    - Strips leading/trailing whitespace
    - Truncates to a maximum length

    Args:
        value: Raw user-provided string
        max_length: Maximum allowed length (default: MAX_LABEL_LENGTH)

    Returns:
        Sanitized label
    """
    sanitized = re.sub(r"[\n\r\t\x00-\x1f\x7f-\x9f]", " ", value)
    sanitized = re.sub(r" +", " ", sanitized)
    sanitized = sanitized.strip()
    return sanitized[:max_length]
