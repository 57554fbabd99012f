# api/dependencies/settings.py
from fastapi import Request

from services.settings import Settings, load_settings


def get_settings(request: Request) -> Settings:
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        settings = load_settings()
        request.app.state.settings = settings
    return settings
