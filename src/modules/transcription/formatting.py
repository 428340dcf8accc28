"""Normalization of values written by the adapter."""

import re
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from ..common.exceptions import ValidationError

# MediaWiki appends parser reports as HTML comments to rendered pages.
_PARSER_REPORT_PATTERNS = (
    re.compile(r"<!--\s*NewPP limit report.*?-->", re.DOTALL),
    re.compile(r"<!--\s*Saved in parser cache.*?-->", re.DOTALL),
)

SORT_WEIGHT_DIGITS = 9
_SORT_WEIGHT_RE = re.compile(r"^[0-9]{1,%d}$" % SORT_WEIGHT_DIGITS)


def remove_new_pp_limit_reports(text: str) -> str:
    """Strip "NewPP limit report" and "Saved in parser cache" comments from wiki output.

    The comments may span several lines; text around them is kept as is.
    Removal repeats until nothing matches, so nested reports cannot leave a
    rebuilt report behind.
    """
    while True:
        cleaned = text
        for pattern in _PARSER_REPORT_PATTERNS:
            cleaned = pattern.sub("", cleaned)
        if cleaned == text:
            return text
        text = cleaned


def format_sort_weight(weight: Union[int, str]) -> str:
    """Zero-pad a sort weight to nine digits.

    Args:
        weight: Non-negative integer, or a string of at most nine digits

    Returns:
        The nine-digit key, e.g. ``"000000042"`` for 42

    Raises:
        ValidationError: If the weight is negative, not a whole number, or longer than nine digits
    """
    if isinstance(weight, bool):
        raise ValidationError(f"Invalid sort weight: {weight!r}")

    text = str(weight).strip()
    if not _SORT_WEIGHT_RE.match(text):
        raise ValidationError(f"Sort weight must be a whole number of at most {SORT_WEIGHT_DIGITS} digits, got {weight!r}")

    return text.zfill(SORT_WEIGHT_DIGITS)


def format_progress(progress: Union[int, str], field_name: str = "progress") -> Optional[str]:
    """Normalize a percentage for storage.

    Returns:
        The value as text, or None for zero, which is not stored

    Raises:
        ValidationError: If the value is not a number between 0 and 100
    """
    if isinstance(progress, bool):
        raise ValidationError(f"Invalid {field_name}: {progress!r}")

    text = str(progress).strip()
    try:
        value = Decimal(text)
    except InvalidOperation:
        raise ValidationError(f"{field_name} must be a number, got {progress!r}")

    if not value.is_finite() or value < 0 or value > 100:
        raise ValidationError(f"{field_name} must be between 0 and 100, got {progress!r}")

    if value == 0:
        return None
    return text
