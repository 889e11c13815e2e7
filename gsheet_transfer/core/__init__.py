"""Core module containing constants."""
from gsheet_transfer.core.constants import (
    SHEETS_SCOPES,
    SHEETS_API_NAME,
    SHEETS_API_VERSION,
    VALUE_INPUT_OPTION,
    MAJOR_DIMENSION,
    MIN_COLUMN,
    MAX_COLUMN,
)

__all__ = [
    "SHEETS_SCOPES",
    "SHEETS_API_NAME",
    "SHEETS_API_VERSION",
    "VALUE_INPUT_OPTION",
    "MAJOR_DIMENSION",
    "MIN_COLUMN",
    "MAX_COLUMN",
]
