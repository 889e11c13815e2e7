"""Google services package for Google Sheets transfers."""

from gsheet_transfer.services.google.exceptions import (
    GoogleSheetsError,
    GoogleSheetsAuthError,
    GoogleSheetsRangeError,
    GoogleSheetsAPIError,
    GoogleSheetsPermissionError,
    GoogleSheetsNotFoundError,
    GoogleSheetsEmptyResultError,
)
from gsheet_transfer.services.google.addressing import column_address, build_range
from gsheet_transfer.services.google.shaping import render_cell, shape_map_rows
from gsheet_transfer.services.google.auth import build_sheets_service, ensure_client
from gsheet_transfer.services.google.sheets_client import GoogleSheetsClient

__all__ = [
    "GoogleSheetsClient",
    "build_sheets_service",
    "ensure_client",
    "column_address",
    "build_range",
    "render_cell",
    "shape_map_rows",
    "GoogleSheetsError",
    "GoogleSheetsAuthError",
    "GoogleSheetsRangeError",
    "GoogleSheetsAPIError",
    "GoogleSheetsPermissionError",
    "GoogleSheetsNotFoundError",
    "GoogleSheetsEmptyResultError",
]
