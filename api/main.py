# api/main.py
from dotenv import load_dotenv
import os

env = os.getenv("APP_ENV", "local")
if env == "local":
    load_dotenv(".env.local")
else:
    load_dotenv(".env")

from fastapi import FastAPI
from contextlib import asynccontextmanager
import logging

from api.routers import health, tools
from services.settings import load_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"🚀 Starting RoseScout tools ({env}), loading registry settings")
    app.state.settings = load_settings()
    missing = [
        cfg.api_key_env
        for cfg in (app.state.settings.google_maps, app.state.settings.screening_list)
        if not cfg.api_key
    ]
    if missing:
        logger.warning(f"⚠️ Missing credentials, dependent tools will answer with an error: {', '.join(missing)}")
    yield
    logger.info("🛑 Shutting down RoseScout tools")


app = FastAPI(
    title="RoseScout - Research and Compliance Tools",
    version="1.0.0",
    description=(
        "Research and compliance tools for accessing academic publications, grants, "
        "researcher profiles, and screening lists."
    ),
    lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(tools.router, prefix="/tools", tags=["Tools"])


@app.get("/")
async def root():
    return {"message": "RoseScout tools running 🚀"}
