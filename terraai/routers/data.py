# terraai/routers/data.py
from fastapi import APIRouter, Depends
from typing import List

from ..schemas.common import AgriculturalReading, DataLayer, SatellitePosition, ServiceResponse
from ..schemas.data_requests import ImageryQuery
from ..services.data_layers import DATA_LAYERS
from ..services.fallback import FallbackDataService
from ..utils.time import format_date_for_gibs, parse_date
from .deps import get_fallback_service

router = APIRouter(prefix="/data", tags=["data"])


def _date_or_none(when: str | None) -> str | None:
    return format_date_for_gibs(parse_date(when)) if when else None


@router.post("/earth-imagery", response_model=ServiceResponse[str])
async def earth_imagery(q: ImageryQuery, svc: FallbackDataService = Depends(get_fallback_service)):
    return await svc.get_earth_imagery(q.location.lat, q.location.lon, _date_or_none(q.when))


@router.post("/image-url")
def image_url(q: ImageryQuery, svc: FallbackDataService = Depends(get_fallback_service)):
    return {"url": svc.get_image_url(q.location.lat, q.location.lon, _date_or_none(q.when))}


@router.post("/agricultural", response_model=ServiceResponse[AgriculturalReading])
async def agricultural(q: ImageryQuery, svc: FallbackDataService = Depends(get_fallback_service)):
    return await svc.get_agricultural_data(q.location.lat, q.location.lon)


@router.get("/satellites", response_model=ServiceResponse[List[SatellitePosition]])
async def satellites(svc: FallbackDataService = Depends(get_fallback_service)):
    return await svc.get_satellite_positions()


@router.get("/layers", response_model=dict[str, DataLayer])
def data_layers():
    return DATA_LAYERS
