from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from terraai.schemas.common import TileLayer
from terraai.services.gibs_tiles import (
    DEFAULT_LAYERS,
    GIBS_LAYERS,
    LAYER_CATEGORIES,
    build_tile_url,
    get_layer,
    get_layer_by_id,
    tile_url_for_location,
)

PLACEHOLDERS = ("{x}", "{y}", "{z}", "{date}")


def test_layer_ids_are_unique():
    ids = [layer.id for layer in GIBS_LAYERS.values()]
    assert len(ids) == len(set(ids))


def test_templates_follow_wmts_shape():
    for layer in GIBS_LAYERS.values():
        assert f"/{layer.id}/default/{{date}}/GoogleMapsCompatible_Level{layer.max_zoom}/{{z}}/{{y}}/{{x}}.png" in layer.url_template


@pytest.mark.parametrize("key", sorted(GIBS_LAYERS))
def test_build_tile_url_replaces_every_placeholder(key):
    url = build_tile_url(GIBS_LAYERS[key], 1, 2, 3, "2024-01-01")
    for p in PLACEHOLDERS:
        assert p not in url
    assert url.endswith("/2024-01-01/GoogleMapsCompatible_Level%d/3/2/1.png" % GIBS_LAYERS[key].max_zoom)


def test_build_tile_url_uses_clock_when_no_date():
    fixed = datetime(2023, 6, 15, 8, 0, tzinfo=timezone.utc)
    url = build_tile_url(GIBS_LAYERS["MODIS_NDVI"], 0, 0, 0, clock=lambda: fixed)
    assert "/default/2023-06-15/" in url


def test_build_tile_url_formats_datetime():
    url = build_tile_url(GIBS_LAYERS["VIIRS_NDVI"], 5, 6, 7, datetime(2022, 12, 31, 23, 0))
    assert "/default/2022-12-31/" in url


def test_missing_placeholder_is_left_alone():
    layer = TileLayer(id="t", name="t", url_template="https://tiles.example/{z}/{x}.png", description="", max_zoom=4)
    assert build_tile_url(layer, 1, 2, 3, "2024-01-01") == "https://tiles.example/3/1.png"


def test_tile_layer_is_immutable():
    with pytest.raises(ValidationError):
        GIBS_LAYERS["MODIS_NDVI"].name = "changed"


def test_defaults_and_categories_reference_catalog():
    for key in DEFAULT_LAYERS:
        assert key in GIBS_LAYERS
    for keys in LAYER_CATEGORIES.values():
        for key in keys:
            assert key in GIBS_LAYERS


def test_lookups():
    assert get_layer("GPM_PRECIPITATION").id == "GPM_3IMERGHH_06_precipitationCal"
    assert get_layer("NOPE") is None
    assert get_layer_by_id("VIIRS_SNPP_NDVI") is GIBS_LAYERS["VIIRS_NDVI"]
    assert get_layer_by_id("nope") is None


def test_tile_url_for_location():
    tile, bounds, url = tile_url_for_location(GIBS_LAYERS["MODIS_TRUE_COLOR"], 40.0, -74.0, 6, date="2024-05-01")
    assert bounds.contains(40.0, -74.0)
    assert url.endswith(f"/2024-05-01/GoogleMapsCompatible_Level9/6/{tile.y}/{tile.x}.png")
