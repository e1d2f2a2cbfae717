# terraai/services/gibs_tiles.py
from datetime import date as _date, datetime
from typing import Callable, Optional, Union

from ..core.config import settings
from ..schemas.common import TileLayer
from ..utils.geo import GeoBounds, TileCoordinate, lat_lng_to_tile, tile_to_bounds
from ..utils.time import format_date_for_gibs, utcnow

DateLike = Union[str, _date, datetime, None]

def _gibs_template(layer_id: str, level: int) -> str:
    # GoogleMapsCompatible_Level{N} is the deepest tile matrix GIBS serves for the layer
    return (
        f"{settings.gibs_base}/{layer_id}/default/{{date}}/"
        f"GoogleMapsCompatible_Level{level}/{{z}}/{{y}}/{{x}}.png"
    )

def _layer(layer_id: str, name: str, level: int, description: str) -> TileLayer:
    return TileLayer(
        id=layer_id,
        name=name,
        url_template=_gibs_template(layer_id, level),
        description=description,
        max_zoom=level,
    )

GIBS_LAYERS: dict[str, TileLayer] = {
    # Vegetation & agriculture
    "MODIS_NDVI": _layer("MODIS_Terra_NDVI_8Day", "MODIS NDVI (8-day)", 9, "Vegetation health index"),
    "MODIS_TRUE_COLOR": _layer(
        "MODIS_Terra_CorrectedReflectance_TrueColor", "MODIS True Color", 9, "Satellite true color imagery"
    ),
    "VIIRS_NDVI": _layer("VIIRS_SNPP_NDVI", "VIIRS NDVI", 8, "High-resolution vegetation index"),
    # Soil & water
    "SMAP_SOIL_MOISTURE": _layer(
        "SMAP_L3_Passive_Soil_Moisture_Gamma", "SMAP Soil Moisture", 6, "Soil moisture levels"
    ),
    "GPM_PRECIPITATION": _layer(
        "GPM_3IMERGHH_06_precipitationCal", "GPM Precipitation", 8, "Half-hourly precipitation rate"
    ),
    # Temperature
    "MODIS_LST_DAY": _layer(
        "MODIS_Terra_Land_Surface_Temp_Day", "MODIS Land Surface Temperature (Day)", 7, "Daytime surface temperature"
    ),
    "MODIS_LST_NIGHT": _layer(
        "MODIS_Terra_Land_Surface_Temp_Night", "MODIS Land Surface Temperature (Night)", 7, "Nighttime surface temperature"
    ),
}

DEFAULT_LAYERS = ("MODIS_TRUE_COLOR", "MODIS_NDVI", "SMAP_SOIL_MOISTURE")

LAYER_CATEGORIES: dict[str, tuple[str, ...]] = {
    "vegetation": ("MODIS_NDVI", "VIIRS_NDVI"),
    "imagery": ("MODIS_TRUE_COLOR",),
    "soil": ("SMAP_SOIL_MOISTURE",),
    "weather": ("GPM_PRECIPITATION",),
    "temperature": ("MODIS_LST_DAY", "MODIS_LST_NIGHT"),
}

def get_layer(key: str) -> Optional[TileLayer]:
    return GIBS_LAYERS.get(key)

def get_layer_by_id(layer_id: str) -> Optional[TileLayer]:
    return next((layer for layer in GIBS_LAYERS.values() if layer.id == layer_id), None)

def build_tile_url(
    layer: TileLayer,
    x: int,
    y: int,
    z: int,
    date: DateLike = None,
    clock: Callable[[], datetime] = utcnow,
) -> str:
    """
    Fill the {date}/{z}/{y}/{x} placeholders of `layer.url_template`.
    A string date is used as-is; anything else goes through format_date_for_gibs.
    Placeholders absent from the template are simply not substituted.
    """
    date_str = date if isinstance(date, str) else format_date_for_gibs(date, clock=clock)
    return (
        layer.url_template
        .replace("{date}", date_str)
        .replace("{z}", str(z))
        .replace("{y}", str(y))
        .replace("{x}", str(x))
    )

def tile_url_for_location(
    layer: TileLayer,
    lat: float,
    lng: float,
    zoom: int,
    date: DateLike = None,
    clock: Callable[[], datetime] = utcnow,
) -> tuple[TileCoordinate, GeoBounds, str]:
    tile = lat_lng_to_tile(lat, lng, zoom)
    bounds = tile_to_bounds(tile.x, tile.y, tile.z)
    return tile, bounds, build_tile_url(layer, tile.x, tile.y, tile.z, date=date, clock=clock)
