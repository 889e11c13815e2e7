"""Convert mapping rows into the header + rows array sent to a sheet."""
from datetime import date, datetime
from typing import Any, List, Mapping, Sequence


def render_cell(value: Any) -> str:
    """Render a cell value as the text a user would type into the sheet.

    None becomes an empty string and booleans render lower-case, so the
    USER_ENTERED input option parses them back to typed values.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e15:
        # whole floats drop the trailing ".0"
        return str(int(value))
    return str(value)


def shape_map_rows(rows: Sequence[Mapping[str, Any]]) -> List[List[str]]:
    """Turn a list of dicts into a header row followed by data rows.

    Columns are the keys of the first row, sorted. Later rows are read with
    that key set only; a missing key renders as an empty cell and extra keys
    are ignored.

    Args:
        rows: One mapping per logical row

    Returns:
        ``[header, *data_rows]`` with every cell rendered to text, or an
        empty list when ``rows`` is empty or the first row has no keys.
    """
    if not rows or not rows[0]:
        return []

    keys = sorted(rows[0].keys())
    shaped = [list(keys)]
    for row in rows:
        shaped.append([render_cell(row.get(key)) for key in keys])
    return shaped
