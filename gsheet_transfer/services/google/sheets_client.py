"""Google Sheets API client for moving tabular data in and out of a spreadsheet."""
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from googleapiclient.errors import HttpError

from gsheet_transfer.core.constants import MAJOR_DIMENSION, VALUE_INPUT_OPTION
from gsheet_transfer.models.value_range import ClearResult, UpdateResult, ValueRange
from gsheet_transfer.services.google.addressing import build_range
from gsheet_transfer.services.google.auth import ensure_client
from gsheet_transfer.services.google.exceptions import (
    GoogleSheetsAPIError,
    GoogleSheetsEmptyResultError,
    GoogleSheetsNotFoundError,
    GoogleSheetsPermissionError,
)
from gsheet_transfer.services.google.shaping import shape_map_rows

logger = logging.getLogger(__name__)


def _translate_http_error(e: HttpError, target: str) -> GoogleSheetsAPIError:
    """Map an HttpError onto the matching GoogleSheetsAPIError subclass."""
    status = e.resp.status
    if status == 404:
        logger.warning(f"Range '{target}' not found")
        return GoogleSheetsNotFoundError(
            f"Spreadsheet or range '{target}' not found",
            details={"range": target},
        )
    if status == 403:
        logger.error(f"Permission denied for '{target}': {e}")
        return GoogleSheetsPermissionError(details={"range": target})

    logger.error(f"Google Sheets API error: {e}")
    return GoogleSheetsAPIError(
        f"Wrong http return code {status}: {e.reason}",
        status_code=status,
        details={"range": target, "error": str(e)},
    )


class GoogleSheetsClient:
    """Read, write and clear values in one spreadsheet.

    Uses service account authentication for server-to-server access; the
    spreadsheet must be shared with the service account email. The
    authenticated service is created on first use and cached on the
    ``SpreadsheetConfig``, so several clients can share one config.

    Every call is a single blocking request. Errors are raised immediately,
    nothing is retried.
    """

    def __init__(self, config):
        """Initialize the client (lazy authentication).

        Args:
            config: ``SpreadsheetConfig`` holding credentials and the spreadsheet ID
        """
        self.config = config

    def _values(self):
        """The ``spreadsheets().values()`` collection of the authenticated service."""
        return ensure_client(self.config).spreadsheets().values()

    def write_array(
        self,
        sheet: str,
        row: int,
        col: int,
        data: Sequence[Sequence[Any]],
    ) -> Optional[UpdateResult]:
        """Write a 2D array to a worksheet, starting at (row, col).

        Values are sent with USER_ENTERED semantics so the service parses
        numbers, dates and formulas as if typed in.

        Args:
            sheet: Name of the worksheet tab
            row: 1-based row of the top-left cell
            col: 1-based column of the top-left cell
            data: Rows of cell values; the first row's length sets the width

        Returns:
            The update summary, or None when ``data`` has no rows or columns
            (nothing is sent in that case).

        Raises:
            GoogleSheetsRangeError: If the columns cannot be addressed
            GoogleSheetsAuthError: If authentication fails
            GoogleSheetsAPIError: If the API call fails
        """
        if len(data) == 0 or len(data[0]) == 0:
            logger.debug(f"Nothing to write to '{sheet}', skipping")
            return None

        target = build_range(sheet, row, col, len(data), len(data[0]))
        logger.debug(f"Writing {len(data)} rows to {target}")
        value_range = ValueRange(
            range=target,
            major_dimension=MAJOR_DIMENSION,
            values=[list(r) for r in data],
        )

        try:
            response = (
                self._values()
                .update(
                    spreadsheetId=self.config.spreadsheet_id,
                    range=target,
                    valueInputOption=VALUE_INPUT_OPTION,
                    body=value_range.to_request_body(),
                )
                .execute()
            )
        except HttpError as e:
            raise _translate_http_error(e, target) from e

        result = UpdateResult.model_validate(response or {})
        logger.info(f"Updated {result.updated_cells} cells in {result.updated_range or target}")
        return result

    def write_map_rows(
        self,
        sheet: str,
        row: int,
        col: int,
        rows: Sequence[Mapping[str, Any]],
    ) -> Optional[UpdateResult]:
        """Write a list of dicts as a header row plus data rows.

        Columns are the sorted keys of the first row; see ``shape_map_rows``.

        Returns:
            The update summary, or None when there was nothing to write.
        """
        return self.write_array(sheet, row, col, shape_map_rows(rows))

    def read_array(self, source_range: str) -> List[List[Any]]:
        """Fetch the values of a range.

        Args:
            source_range: Range expression, e.g. "Sheet1!A1:D20"

        Returns:
            2D list of cell values as typed by the service. Trailing empty
            cells are omitted by the API, so rows may differ in length.

        Raises:
            GoogleSheetsEmptyResultError: If the range holds no values
            GoogleSheetsAuthError: If authentication fails
            GoogleSheetsAPIError: If the API call fails
        """
        try:
            result = (
                self._values()
                .get(spreadsheetId=self.config.spreadsheet_id, range=source_range)
                .execute()
            )
        except HttpError as e:
            raise _translate_http_error(e, source_range) from e

        values = result.get("values", [])
        if not values:
            logger.warning(f"No values received for '{source_range}'")
            raise GoogleSheetsEmptyResultError(source_range)

        logger.info(f"Retrieved {len(values)} rows from '{source_range}'")
        return values

    def clear_range(self, the_range: str) -> ClearResult:
        """Clear the values of a range, keeping its formatting.

        Raises:
            GoogleSheetsAuthError: If authentication fails
            GoogleSheetsAPIError: If the API call fails
        """
        try:
            response = (
                self._values()
                .clear(spreadsheetId=self.config.spreadsheet_id, range=the_range, body={})
                .execute()
            )
        except HttpError as e:
            raise _translate_http_error(e, the_range) from e

        return ClearResult.model_validate(response or {})

    def clear_sheet(self, source_range: str, body: Optional[Dict[str, Any]] = None) -> ClearResult:
        """Clear the values of a range with an explicit ClearValuesRequest body.

        Args:
            source_range: Range expression to clear
            body: Request body sent with the call (empty by default)

        Raises:
            GoogleSheetsAuthError: If authentication fails
            GoogleSheetsAPIError: If the API call fails
        """
        try:
            response = (
                self._values()
                .clear(
                    spreadsheetId=self.config.spreadsheet_id,
                    range=source_range,
                    body=body if body is not None else {},
                )
                .execute()
            )
        except HttpError as e:
            logger.error(f"Failed to clear '{source_range}': {e}")
            raise _translate_http_error(e, source_range) from e

        result = ClearResult.model_validate(response or {})
        logger.info(f"Cleared {result.cleared_range or source_range}")
        return result
