"""Customer name normalization utilities.

Names arriving from CSV imports are cleaned here before they are compared
against existing customers. Cleaning only trims: the stored customer keeps
the casing it was first imported with, and case-insensitivity is applied at
comparison time through ``matching_key``.
"""

from typing import Any

import pandas as pd

def normalize_customer_name(value: Any) -> str:
    """Normalize a raw customer name from an imported row.

    Args:
        value: Raw cell value. May be None, a pandas missing value (NaN),
            or a string with surrounding whitespace.

    Returns:
        The trimmed name with its original casing, or ``""`` when the value
        is missing or blank.

    Examples:
        >>> normalize_customer_name("  Acme Corp ")
        'Acme Corp'
        >>> normalize_customer_name(None)
        ''
        >>> normalize_customer_name("   ")
        ''
    """
    if value is None:
        return ''
    if not isinstance(value, str):
        if pd.isna(value):
            return ''
        value = str(value)
    return value.strip()

def matching_key(name: str) -> str:
    """Case-folded form of a cleaned name, used for comparisons only."""
    return name.casefold()

def is_blank_name(value: Any) -> bool:
    """True when a raw value normalizes to the empty name."""
    return normalize_customer_name(value) == ''
