"""Service account authentication for the Sheets API."""
import json
import logging
from typing import Union

from google.oauth2 import service_account
from googleapiclient.discovery import build

from gsheet_transfer.core.constants import SHEETS_API_NAME, SHEETS_API_VERSION, SHEETS_SCOPES
from gsheet_transfer.services.google.exceptions import GoogleSheetsAuthError

logger = logging.getLogger(__name__)


def build_sheets_service(credentials: Union[bytes, str]):
    """Build an authenticated Sheets API service from a service account key.

    Args:
        credentials: Raw service account JSON key

    Returns:
        A googleapiclient ``Resource`` for Sheets v4.

    Raises:
        GoogleSheetsAuthError: If the key is missing or malformed, or the
            service cannot be built
    """
    if not credentials:
        raise GoogleSheetsAuthError("Google service account credentials not configured")

    try:
        service_account_info = json.loads(credentials)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error(f"Invalid service account JSON: {e}")
        raise GoogleSheetsAuthError(
            "Invalid service account JSON format",
            details={"error": str(e)},
        ) from e

    try:
        creds = service_account.Credentials.from_service_account_info(
            service_account_info,
            scopes=SHEETS_SCOPES,
        )
        service = build(
            SHEETS_API_NAME, SHEETS_API_VERSION, credentials=creds, cache_discovery=False
        )
    except Exception as e:
        logger.error(f"Failed to initialize Google Sheets service: {e}")
        raise GoogleSheetsAuthError(
            f"Authentication failed: {e}",
            details={"error": str(e)},
        ) from e

    logger.info(f"Google Sheets service initialized for {creds.service_account_email}")
    return service


def ensure_client(config):
    """Return the config's Sheets service, creating it on first use.

    The check-then-build sequence runs under ``config.lock``, so concurrent
    callers sharing a config wait for one authentication instead of racing.
    Once set, the cached client is never replaced.

    Args:
        config: A ``SpreadsheetConfig``

    Raises:
        GoogleSheetsAuthError: If the client cannot be built
    """
    if config.client is not None:
        return config.client

    with config.lock:
        if config.client is None:
            config.client = build_sheets_service(config.google_credentials)
        else:
            logger.debug("Sheets client created by a concurrent caller")
    return config.client
