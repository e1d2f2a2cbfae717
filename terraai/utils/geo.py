import math
from dataclasses import dataclass

@dataclass(frozen=True)
class TileCoordinate:
    x: int
    y: int
    z: int

    @property
    def is_valid(self) -> bool:
        n = 2 ** self.z
        return 0 <= self.x < n and 0 <= self.y < n

@dataclass(frozen=True)
class GeoBounds:
    north: float
    south: float
    east: float
    west: float

    def contains(self, lat: float, lon: float) -> bool:
        return self.south <= lat <= self.north and self.west <= lon <= self.east

def lat_lng_to_tile(lat: float, lng: float, zoom: int) -> TileCoordinate:
    """
    Slippy-map tile containing (lat, lng) at `zoom`.
    No clamping: pole-adjacent latitudes or odd zooms give indices outside [0, 2**zoom).
    """
    n = 2 ** zoom
    phi = math.radians(lat)
    x = math.floor((lng + 180.0) / 360.0 * n)
    y = math.floor((1.0 - math.log(math.tan(phi) + 1.0 / math.cos(phi)) / math.pi) / 2.0 * n)
    return TileCoordinate(x=x, y=y, z=zoom)

def tile_to_bounds(x: int, y: int, zoom: int) -> GeoBounds:
    n = 2 ** zoom
    return GeoBounds(
        north=math.degrees(math.atan(math.sinh(math.pi * (1 - 2 * y / n)))),
        south=math.degrees(math.atan(math.sinh(math.pi * (1 - 2 * (y + 1) / n)))),
        east=(x + 1) / n * 360.0 - 180.0,
        west=x / n * 360.0 - 180.0,
    )
