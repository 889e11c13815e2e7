"""A1 notation helpers for column letters and range expressions."""
from gsheet_transfer.core.constants import MIN_COLUMN, MAX_COLUMN
from gsheet_transfer.services.google.exceptions import GoogleSheetsRangeError


def column_address(col: int) -> str:
    """Return the column letters ("A", "AA", ...) for a 1-based column index.

    Indexes outside [1, 674] return an empty string.

    The two-letter branch is plain arithmetic rather than bijective base-26,
    so multiples of 26 above 26 map onto "@" (52 -> "B@"). Existing range
    strings depend on this mapping.
    """
    if col < MIN_COLUMN or col > MAX_COLUMN:
        return ""
    if col <= 26:
        return chr(ord("A") + col - 1)
    return chr(ord("A") + col // 26 - 1) + chr(ord("A") + col % 26 - 1)


def build_range(
    sheet: str,
    start_row: int,
    start_col: int,
    row_count: int,
    col_count: int,
) -> str:
    """Build the range expression covering a block of data.

    The end cell is ``start + count`` on both axes, one past the last data
    cell, e.g. ``build_range("Sheet1", 2, 2, 3, 2) == "Sheet1!B2:D5"``.

    Args:
        sheet: Worksheet tab name
        start_row: 1-based row of the top-left cell
        start_col: 1-based column of the top-left cell
        row_count: Number of data rows
        col_count: Number of data columns

    Returns:
        The range expression, or an empty string when there is nothing to
        address (zero rows or zero columns).

    Raises:
        GoogleSheetsRangeError: If the start or end column has no letters
    """
    if row_count == 0 or col_count == 0:
        return ""

    end_col = start_col + col_count
    start_letters = column_address(start_col)
    end_letters = column_address(end_col)
    if not start_letters or not end_letters:
        raise GoogleSheetsRangeError(
            f"Columns {start_col}-{end_col} fall outside the addressable range "
            f"{MIN_COLUMN}-{MAX_COLUMN}",
            sheet=sheet,
            details={"start_col": start_col, "end_col": end_col},
        )

    return f"{sheet}!{start_letters}{start_row}:{end_letters}{start_row + row_count}"
