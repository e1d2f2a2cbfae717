# terraai/schemas/data_requests.py
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from .common import Location
from ..utils.time import parse_date

class BaseDataQuery(BaseModel):
    location: Location
    when: str | None = Field(None, description="ISO date or datetime; default now (UTC)")

    @field_validator("when")
    @classmethod
    def _iso_when(cls, v: str | None) -> str | None:
        if v:
            try:
                parse_date(v)
            except ValueError:
                raise ValueError(f"'{v}' is not an ISO date or datetime")
        return v

class TileQuery(BaseDataQuery):
    zoom: int = Field(3, ge=0, le=18)

class ImageryQuery(BaseDataQuery):
    pass

class TileUrlResponse(BaseModel):
    layer: str
    date: str
    x: int
    y: int
    z: int
    bounds: dict
    url: str

class LayerCatalog(BaseModel):
    layers: dict
    defaults: list[str]
    categories: dict[str, list[str]]
    note: Optional[str] = None
