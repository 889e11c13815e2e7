"""Constants shared by the Google Sheets transfer helpers."""

# OAuth scope granting read/write access to spreadsheets
SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]

SHEETS_API_NAME = "sheets"
SHEETS_API_VERSION = "v4"

# Values are parsed as if typed into the UI (numbers, dates, formulas)
VALUE_INPUT_OPTION = "USER_ENTERED"
MAJOR_DIMENSION = "ROWS"

# Addressable column window for the two-letter codec
MIN_COLUMN = 1
MAX_COLUMN = 674
