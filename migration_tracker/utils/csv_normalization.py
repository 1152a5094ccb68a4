"""CSV column name normalization utilities."""

from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd

def normalize_column_name(name: str) -> str:
    """Normalize a CSV column name.

    Normalizes by:
    - Replacing multiple spaces with single space
    - Stripping leading/trailing whitespace
    - Preserving special characters and case

    Args:
        name: Raw column name from CSV

    Returns:
        Normalized column name

    Examples:
        >>> normalize_column_name("Storage Used  (GiB)")
        "Storage Used (GiB)"
        >>> normalize_column_name(" Customer Name ")
        "Customer Name"
    """
    return ' '.join(str(name).split())

def normalize_dataframe_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Normalize all column names in a DataFrame.

    Args:
        df: Input DataFrame with raw column names

    Returns:
        DataFrame with normalized column names
    """
    return df.rename(columns=normalize_column_name)

def build_column_map(columns: List[str], aliases: Dict[str, List[str]]) -> Dict[str, str]:
    """Map canonical field names to the CSV header that supplies them.

    Aliases are tried in the order they are listed, so the first header
    present in the file wins.

    Args:
        columns: Normalized column names of the file
        aliases: Canonical field name -> accepted header names

    Returns:
        Canonical field name -> header present in ``columns``. Fields with
        no matching header are left out.

    Example:
        >>> build_column_map(["VM Name", "host"], {"vm_name": ["VM Name", "vm_name"], "host": ["Host", "host"]})
        {'vm_name': 'VM Name', 'host': 'host'}
    """
    present = set(columns)
    column_map = {}
    for field_name, headers in aliases.items():
        for header in headers:
            if header in present:
                column_map[field_name] = header
                break
    return column_map

def unmapped_columns(columns: List[str], aliases: Dict[str, List[str]]) -> List[str]:
    """Columns of the file that no alias accepts."""
    known = {header for headers in aliases.values() for header in headers}
    return [col for col in columns if col not in known]

def normalize_cell(value: Any) -> Optional[Any]:
    """Normalize a single cell value.

    Handles:
    - NaN/None -> None
    - numpy types -> Python native types
    - Blank strings -> None

    Examples:
        >>> normalize_cell(np.nan)
        None
        >>> normalize_cell(np.int64(42))
        42
        >>> normalize_cell("  ")
        None
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        return value or None
    if pd.isna(value):
        return None
    if isinstance(value, (np.integer, np.floating, np.bool_)):
        return value.item()
    return value

def coerce_text(value: Any) -> Optional[str]:
    """Cell as a trimmed string, or None when blank."""
    value = normalize_cell(value)
    return None if value is None else str(value)

def coerce_int(value: Any, default: int = 0) -> Optional[int]:
    """Parse an integer cell, returning ``default`` when blank.

    Raises:
        ValueError: If the cell holds something that is not a number
        OverflowError: If the cell is infinite or too large for an int
    """
    value = normalize_cell(value)
    if value is None:
        return default
    return int(float(value))

def coerce_float(value: Any, default: float = 0.0) -> Optional[float]:
    """Parse a float cell, returning ``default`` when blank.

    Raises:
        ValueError: If the cell holds something that is not a finite number
    """
    value = normalize_cell(value)
    if value is None:
        return default
    number = float(value)
    if not np.isfinite(number):
        raise ValueError(f"Not a finite number: {value!r}")
    return number

def coerce_bool(value: Any) -> bool:
    """Interpret the usual CSV spellings of a checkbox."""
    value = normalize_cell(value)
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ('yes', 'y', 'true', '1', 'x', 'done')

