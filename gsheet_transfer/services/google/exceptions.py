"""Custom exceptions for Google Sheets transfers."""


class GoogleSheetsError(Exception):
    """Base exception for Google Sheets errors."""

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class GoogleSheetsAuthError(GoogleSheetsError):
    """Raised when credentials cannot be parsed or the client cannot be built."""

    pass


class GoogleSheetsRangeError(GoogleSheetsError):
    """Raised when a target range cannot be addressed.

    Column indexes are limited to [1, 674]; anything outside that window
    has no column letters and would yield a malformed range expression.
    """

    def __init__(self, message: str, sheet: str = None, details: dict = None):
        self.sheet = sheet
        super().__init__(message, details)


class GoogleSheetsAPIError(GoogleSheetsError):
    """Raised when the Google Sheets API returns an error."""

    def __init__(self, message: str, status_code: int = None, details: dict = None):
        self.status_code = status_code
        super().__init__(message, details)


class GoogleSheetsPermissionError(GoogleSheetsAPIError):
    """Raised when access is forbidden (HTTP 403).

    Troubleshooting:
    - Share the spreadsheet with the service account email
    - Grant Editor access for write and clear operations
    """

    def __init__(self, message: str = None, details: dict = None):
        super().__init__(
            message or "Permission denied. Ensure the spreadsheet is shared with the service account.",
            status_code=403,
            details=details,
        )


class GoogleSheetsNotFoundError(GoogleSheetsAPIError):
    """Raised when a spreadsheet or worksheet is not found (HTTP 404)."""

    def __init__(self, message: str = None, details: dict = None):
        super().__init__(
            message or "Spreadsheet or worksheet not found.",
            status_code=404,
            details=details,
        )


class GoogleSheetsEmptyResultError(GoogleSheetsError):
    """Raised when a read succeeds but returns no rows."""

    def __init__(self, source_range: str = None, message: str = None, details: dict = None):
        self.source_range = source_range
        super().__init__(
            message or f"No values received for range {source_range or 'Unknown'}",
            details=details,
        )
