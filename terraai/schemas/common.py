from pydantic import BaseModel, ConfigDict, Field
from typing import Generic, Literal, Optional, TypeVar

T = TypeVar("T")

DataOrigin = Literal["live", "fallback", "cached"]
FallbackReason = Literal["cache_hit", "live_disabled", "api_unavailable", "simulated", "invalid_input"]

class Location(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)

class TileLayer(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    url_template: str
    description: str
    max_zoom: int

class ServiceResponse(BaseModel, Generic[T]):
    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    source: DataOrigin
    reason: Optional[FallbackReason] = None

class Coordinates(BaseModel):
    lat: float
    lon: float

class AgriculturalReading(BaseModel):
    temperature: float      # °C
    humidity: float         # %
    soil_moisture: float    # %
    precipitation: float    # mm
    vegetation_index: float # NDVI
    coordinates: Coordinates
    timestamp: str
    source: str = "NASA POWER (simulated)"

class Position(BaseModel):
    x: float
    y: float
    z: float

class SatellitePosition(BaseModel):
    id: str
    name: str
    position: Position
    orbit: str = "Sun-synchronous"
    status: str = "operational"

class ValueRange(BaseModel):
    min: float
    max: float

class DataLayer(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    color: str
    icon: str
    description: str
    unit: Optional[str] = None
    range: Optional[ValueRange] = None
