# terraai/services/data_layers.py
from typing import Optional

from ..schemas.common import DataLayer, ValueRange

DEFAULT_COLOR = "#666666"
LOW_COLOR, MID_COLOR, HIGH_COLOR = "#ef4444", "#eab308", "#22c55e"

DATA_LAYERS: dict[str, DataLayer] = {
    "NDVI": DataLayer(
        id="MODIS_Terra_NDVI_8Day", name="Vegetation Health (NDVI)", color="#4ade80", icon="Sprout",
        description="Measures plant health and density", unit="index", range=ValueRange(min=-1, max=1),
    ),
    "SOIL_MOISTURE": DataLayer(
        id="SMAP_L4_Soil_Moisture", name="Soil Moisture", color="#0ea5e9", icon="Droplets",
        description="Ground water content from SMAP satellite", unit="%", range=ValueRange(min=0, max=100),
    ),
    "TEMPERATURE": DataLayer(
        id="MODIS_Terra_Land_Surface_Temp_Day", name="Surface Temperature", color="#f97316", icon="Thermometer",
        description="Land surface temperature measurements", unit="°C", range=ValueRange(min=-20, max=60),
    ),
    "PRECIPITATION": DataLayer(
        id="GPM_3IMERGDF_06_Precipitation", name="Precipitation", color="#06b6d4", icon="Cloud",
        description="Rainfall data from GPM satellite", unit="mm/hr", range=ValueRange(min=0, max=50),
    ),
    "ELEVATION": DataLayer(
        id="ASTER_GDEM_DEM", name="Terrain Elevation", color="#84cc16", icon="Mountain",
        description="3D terrain height data", unit="m", range=ValueRange(min=-500, max=8000),
    ),
    "LAND_COVER": DataLayer(
        id="MODIS_Terra_Land_Cover_Type", name="Land Cover Type", color="#8b5cf6", icon="Map",
        description="Surface vegetation and land use classification", unit="class",
    ),
    "SOIL_TYPE": DataLayer(
        id="HWSD_SOIL_TYPE", name="Soil Classification", color="#d97706", icon="Layers",
        description="Soil type and composition data", unit="class",
    ),
}

def get_data_layer_by_id(layer_id: str) -> Optional[DataLayer]:
    return next((layer for layer in DATA_LAYERS.values() if layer.id == layer_id), None)

def format_value(key: str, value: float) -> str:
    """
    Display string for a reading of layer `key`.
    `%` layers take a 0-1 fraction.
    """
    layer = DATA_LAYERS.get(key)
    unit = layer.unit if layer else None
    if unit == "%":
        return f"{value * 100:.1f}%"
    if unit == "°C":
        return f"{value:.1f}°C"
    if unit == "mm/hr":
        return f"{value:.2f} mm/hr"
    if unit == "m":
        return f"{value:.0f}m"
    if unit == "index":
        return f"{value:.3f}"
    return str(value)

def value_color(key: str, value: float) -> str:
    layer = DATA_LAYERS.get(key)
    if layer is None:
        return DEFAULT_COLOR
    if layer.range is None:
        return layer.color

    normalized = (value - layer.range.min) / (layer.range.max - layer.range.min)
    if normalized < 0.33:
        return LOW_COLOR
    if normalized < 0.66:
        return MID_COLOR
    return HIGH_COLOR
