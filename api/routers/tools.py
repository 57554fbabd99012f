# File: api/routers/tools.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
import logging

from api.dependencies.settings import get_settings
from api.models.tool_models import ToolCallRequest, ToolCallResponse, ToolDescription
from services.settings import Settings
from services.tool_service import UnknownToolError, call_tool, list_tools

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/", response_model=List[ToolDescription])
async def tools_endpoint() -> List[ToolDescription]:
    return list_tools()


@router.post("/{name}", response_model=ToolCallResponse)
async def call_tool_endpoint(
    name: str,
    payload: ToolCallRequest,
    settings: Settings = Depends(get_settings),
) -> ToolCallResponse:
    """Tool failures come back as "Error: ..." text with a 200; only unknown tools are 404."""
    try:
        result = await call_tool(name, payload.arguments, settings)
    except UnknownToolError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return ToolCallResponse(name=name, result=result)
