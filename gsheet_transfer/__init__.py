"""Transfer tabular data to and from a Google Sheets spreadsheet."""
from gsheet_transfer.models import SpreadsheetConfig
from gsheet_transfer.services.google import (
    GoogleSheetsClient,
    GoogleSheetsError,
    build_range,
    column_address,
    shape_map_rows,
)

__version__ = "1.0.0"

__all__ = [
    "SpreadsheetConfig",
    "GoogleSheetsClient",
    "GoogleSheetsError",
    "build_range",
    "column_address",
    "shape_map_rows",
]
