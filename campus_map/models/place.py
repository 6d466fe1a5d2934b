from sqlmodel import SQLModel, Field
from pydantic import field_validator
from typing import Any, Optional

class PlaceBase(SQLModel):
    name: str = Field(min_length=1, index=True)
    # Kept as text: records may carry missing or unparsable coordinates,
    # which only the map layer filters out
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    category: Optional[str] = None  # building, food, library, sports...
    description: Optional[str] = None

class Place(PlaceBase, table=True):

    id: int = Field(primary_key=True)

class PlaceCreate(PlaceBase):
    id: int

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def coordinate_as_text(cls, value: Any) -> Optional[str]:
        if value is None or isinstance(value, str):
            return value
        return str(value)

class PlaceRead(PlaceBase):
    id: int

class StoreInfo(SQLModel, table=True):
    """Single-row table recording the schema revision of the store file"""

    id: int = Field(default=1, primary_key=True)
    schema_version: int
