from fastapi import Request

from ..services.fallback import FallbackDataService

def get_fallback_service(request: Request) -> FallbackDataService:
    return request.app.state.fallback_service
