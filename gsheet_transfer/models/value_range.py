"""Pydantic models for Sheets values requests and responses."""
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class ValueRange(BaseModel):
    """Block of cell values addressed by a range expression."""
    range: str = Field(..., description="Target range, e.g. 'Sheet1!B2:D5'")
    major_dimension: Literal["ROWS", "COLUMNS"] = Field(
        default="ROWS", alias="majorDimension", description="Orientation of values"
    )
    values: List[List[Any]] = Field(default_factory=list, description="Cell values")

    model_config = ConfigDict(populate_by_name=True)

    def to_request_body(self) -> Dict[str, Any]:
        """Body for a values.update request."""
        return {"majorDimension": self.major_dimension, "values": self.values}


class UpdateResult(BaseModel):
    """Summary returned by a values.update call."""
    spreadsheet_id: str = Field(default="", alias="spreadsheetId")
    updated_range: str = Field(default="", alias="updatedRange")
    updated_rows: int = Field(default=0, ge=0, alias="updatedRows")
    updated_columns: int = Field(default=0, ge=0, alias="updatedColumns")
    updated_cells: int = Field(default=0, ge=0, alias="updatedCells")

    model_config = ConfigDict(populate_by_name=True)


class ClearResult(BaseModel):
    """Summary returned by a values.clear call."""
    spreadsheet_id: str = Field(default="", alias="spreadsheetId")
    cleared_range: Optional[str] = Field(default=None, alias="clearedRange")

    model_config = ConfigDict(populate_by_name=True)
