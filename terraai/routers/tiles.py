# terraai/routers/tiles.py
from fastapi import APIRouter, HTTPException
from dataclasses import asdict

from ..schemas.data_requests import LayerCatalog, TileQuery, TileUrlResponse
from ..services.gibs_tiles import DEFAULT_LAYERS, GIBS_LAYERS, LAYER_CATEGORIES, get_layer, tile_url_for_location
from ..utils.geo import tile_to_bounds
from ..utils.time import format_date_for_gibs, parse_date

router = APIRouter(prefix="/tiles", tags=["tiles"])


@router.get("/layers", response_model=LayerCatalog)
def layers():
    return LayerCatalog(
        layers={k: v.model_dump() for k, v in GIBS_LAYERS.items()},
        defaults=list(DEFAULT_LAYERS),
        categories={k: list(v) for k, v in LAYER_CATEGORIES.items()},
        note="NASA GIBS WMTS (EPSG:3857); free, no login required.",
    )


@router.get("/bounds/{z}/{x}/{y}")
def bounds(z: int, x: int, y: int):
    if z < 0 or not (0 <= x < 2 ** z and 0 <= y < 2 ** z):
        raise HTTPException(400, f"tile {z}/{x}/{y} is outside the zoom {z} grid")
    return asdict(tile_to_bounds(x, y, z))


@router.post("/{layer_key}/url", response_model=TileUrlResponse)
def tile_url(layer_key: str, q: TileQuery):
    layer = get_layer(layer_key)
    if layer is None:
        raise HTTPException(404, f"Unknown layer '{layer_key}'")

    date_str = format_date_for_gibs(parse_date(q.when))
    try:
        tile, tile_bounds, url = tile_url_for_location(layer, q.location.lat, q.location.lon, q.zoom, date=date_str)
    except ValueError as e:
        # Mercator term undefined at the poles
        raise HTTPException(422, f"Cannot project latitude {q.location.lat}: {e}")
    if not tile.is_valid:
        # beyond the Web-Mercator latitude limit (~85.0511)
        raise HTTPException(422, f"Latitude {q.location.lat} falls outside the zoom {q.zoom} tile grid")
    return TileUrlResponse(
        layer=layer.id,
        date=date_str,
        x=tile.x,
        y=tile.y,
        z=tile.z,
        bounds=asdict(tile_bounds),
        url=url,
    )
