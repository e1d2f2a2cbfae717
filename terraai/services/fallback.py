# terraai/services/fallback.py
"""
Best-effort NASA data for the game UI.

Lookups go cache -> synthesized value; nothing here raises to the caller.
The live API is probed once (HEAD with timeout) and the result is kept for
the life of the service; it only changes the `reason` reported on responses.
"""
import asyncio
import logging
import math
import random
from datetime import datetime, timedelta
from typing import Callable, List, Optional

import httpx

from ..core.config import settings
from ..schemas.common import (
    AgriculturalReading,
    Coordinates,
    Position,
    SatellitePosition,
    ServiceResponse,
)
from ..utils.http import head
from ..utils.time import utcnow
from .cache import TTLCache

log = logging.getLogger(__name__)

FALLBACK_IMAGES = (
    "https://www.nasa.gov/wp-content/uploads/2023/03/potw2143a.jpg",
    "https://www.nasa.gov/wp-content/uploads/2023/03/web_first_images_release-5.png",
    "https://www.nasa.gov/wp-content/uploads/2023/03/hubble_crab_nebula.jpg",
)

SATELLITES = (
    ("TERRA", "Terra (EOS AM-1)"),
    ("AQUA", "Aqua (EOS PM-1)"),
    ("LANDSAT8", "Landsat 8"),
)

# [lo, hi) ranges for simulated readings
AGRI_RANGES = {
    "temperature": (22.0, 30.0),
    "humidity": (40.0, 70.0),
    "soil_moisture": (30.0, 70.0),
    "precipitation": (0.0, 5.0),
    "vegetation_index": (0.3, 0.8),
}

def _key_part(v: float) -> str:
    return f"{v:.4f}"

def _image_index(lat: float, lon: float) -> Optional[int]:
    try:
        return abs(math.floor(lat + lon)) % len(FALLBACK_IMAGES)
    except (ValueError, OverflowError):
        # NaN / inf coordinates
        return None

class FallbackDataService:
    def __init__(
        self,
        cache: Optional[TTLCache] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = utcnow,
        probe_url: Optional[str] = None,
        probe_timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.cache = cache or TTLCache(ttl=timedelta(seconds=settings.cache_ttl_seconds), clock=clock)
        self.rng = rng or random.Random()
        self.clock = clock
        self.probe_url = probe_url or settings.nasa_probe_url
        self.probe_timeout = settings.probe_timeout if probe_timeout is None else probe_timeout
        self.client = client
        self.api_available = True
        self._probed = False
        self._probe_task: Optional[asyncio.Task] = None

    # -------- availability probe --------
    async def probe(self) -> bool:
        """One-shot HEAD against the NASA API; later calls return the first result."""
        if self._probed:
            return self.api_available
        self._probed = True
        try:
            r = await head(
                self.probe_url,
                params={"api_key": settings.nasa_api_key},
                timeout=self.probe_timeout,
                client=self.client,
            )
            self.api_available = True
            log.info("NASA API reachable (HTTP %s)", r["status_code"])
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self.api_available = False
            log.warning("NASA API unreachable, using fallback mode: %s", e)
        return self.api_available

    def start_probe(self) -> asyncio.Task:
        """Schedule probe() on the running loop (call from async context)."""
        if self._probe_task is None:
            self._probe_task = asyncio.ensure_future(self.probe())
        return self._probe_task

    def _fallback_reason(self) -> str:
        return "live_disabled" if self.api_available else "api_unavailable"

    def status(self) -> dict:
        return {
            "api_available": self.api_available,
            "probed": self._probed,
            "cache_entries": len(self.cache),
        }

    # -------- operations --------
    async def get_earth_imagery(self, lat: float, lon: float, date: Optional[str] = None) -> ServiceResponse[str]:
        key = f"earth_{_key_part(lat)}_{_key_part(lon)}_{date or 'latest'}"
        cached = self.cache.get(key)
        if cached is not None:
            return ServiceResponse[str](success=True, data=cached, source="cached", reason="cache_hit")

        # live imagery is never fetched here (browser clients hit CORS on it)
        idx = _image_index(lat, lon)
        url = FALLBACK_IMAGES[idx or 0]
        self.cache.set(key, url)
        reason = "invalid_input" if idx is None else self._fallback_reason()
        return ServiceResponse[str](success=True, data=url, source="fallback", reason=reason)

    async def get_agricultural_data(self, lat: float, lon: float) -> ServiceResponse[AgriculturalReading]:
        key = f"agricultural_{_key_part(lat)}_{_key_part(lon)}"
        cached = self.cache.get(key)
        if cached is not None:
            return ServiceResponse[AgriculturalReading](
                success=True, data=cached.model_copy(deep=True), source="cached", reason="cache_hit"
            )

        draws = {name: self.rng.uniform(lo, hi) for name, (lo, hi) in AGRI_RANGES.items()}
        # uniform() may return hi on float rounding; keep the half-open range
        for name, (lo, hi) in AGRI_RANGES.items():
            if draws[name] >= hi:
                draws[name] = lo
        reading = AgriculturalReading(
            **draws,
            coordinates=Coordinates(lat=lat, lon=lon),
            timestamp=self.clock().isoformat(),
        )
        self.cache.set(key, reading)
        return ServiceResponse[AgriculturalReading](
            success=True, data=reading.model_copy(deep=True), source="fallback", reason=self._fallback_reason()
        )

    async def get_satellite_positions(self) -> ServiceResponse[List[SatellitePosition]]:
        sats = [
            SatellitePosition(
                id=sat_id,
                name=name,
                position=Position(
                    x=self.rng.uniform(-1, 1),
                    y=self.rng.uniform(-1, 1),
                    z=self.rng.uniform(-1, 1),
                ),
            )
            for sat_id, name in SATELLITES
        ]
        return ServiceResponse[List[SatellitePosition]](success=True, data=sats, source="fallback", reason="simulated")

    def get_image_url(self, lat: float, lon: float, date: Optional[str] = None) -> str:
        # `date` does not affect selection
        return FALLBACK_IMAGES[_image_index(lat, lon) or 0]
