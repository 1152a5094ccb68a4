"""Utility functions and helpers."""

from .normalization import normalize_customer_name, matching_key, is_blank_name
from .csv_normalization import normalize_dataframe_columns, build_column_map

__all__ = [
    'normalize_customer_name',
    'matching_key',
    'is_blank_name',
    'normalize_dataframe_columns',
    'build_column_map'
]
