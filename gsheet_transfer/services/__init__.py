"""Services module for gsheet-transfer."""
from gsheet_transfer.services.google import GoogleSheetsClient

__all__ = [
    "GoogleSheetsClient",
]
