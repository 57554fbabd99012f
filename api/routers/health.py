# File: api/routers/health.py
from fastapi import APIRouter, Depends

from api.dependencies.settings import get_settings
from services.settings import Settings


router = APIRouter()


@router.get("/health")
async def health_check(settings: Settings = Depends(get_settings)):
    """Liveness plus which credentialed registries are usable. No registry is contacted."""
    return {
        "status": "ok",
        "credentials": {
            settings.google_maps.name: bool(settings.google_maps.api_key),
            settings.screening_list.name: bool(settings.screening_list.api_key),
        },
    }
