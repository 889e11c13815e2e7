"""Spreadsheet connection configuration."""
import threading
from dataclasses import dataclass, field
from typing import Any, Optional

from gsheet_transfer import config as app_config
from gsheet_transfer.services.google.exceptions import GoogleSheetsAuthError


@dataclass
class SpreadsheetConfig:
    """Credentials and target spreadsheet for a series of transfers.

    ``client`` starts empty and is filled in the first time a transfer needs
    it; ``lock`` serializes that initialization so concurrent callers sharing
    one config authenticate once.
    """

    google_credentials: bytes = field(repr=False)
    spreadsheet_id: str
    client: Optional[Any] = field(default=None, repr=False, compare=False)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @classmethod
    def from_settings(cls, settings=None) -> "SpreadsheetConfig":
        """Build a config from application settings.

        Args:
            settings: A ``Settings`` instance; defaults to the global settings

        Raises:
            GoogleSheetsAuthError: If the spreadsheet ID or credentials are
                missing, or the key file cannot be read
        """
        if settings is None:
            settings = app_config.settings

        if not settings.has_google_credentials:
            raise GoogleSheetsAuthError(
                "Google service account credentials not configured",
                details={"hint": "Set GOOGLE_SPREADSHEET_ID and GOOGLE_SERVICE_ACCOUNT_JSON."},
            )

        try:
            credentials = settings.google_credentials_bytes
        except OSError as e:
            raise GoogleSheetsAuthError(
                f"Cannot read service account key file: {e}",
                details={"error": str(e), "path": str(settings.google_service_account_file)},
            ) from e

        return cls(
            google_credentials=credentials,
            spreadsheet_id=settings.google_spreadsheet_id,
        )
