# Models Module
from .value_range import ValueRange, UpdateResult, ClearResult
from .spreadsheet import SpreadsheetConfig

__all__ = [
    # Wire models
    "ValueRange",
    "UpdateResult",
    "ClearResult",
    # Connection config
    "SpreadsheetConfig",
]
