"""API routes."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from loguru import logger

from ..services.action import handle_request

router = APIRouter(prefix="/api", tags=["api"])

# Every method is routed here so that non-POST requests get the adapter's 405 body.
_CONVERT_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/convert", methods=_CONVERT_METHODS)
async def api_convert(request: Request):
    """Convert {"md": "..."} into Notion blocks. Returns {"children": [...]}."""
    content_type = request.headers.get("content-type", "")
    payload: Any = None
    if request.method == "POST" and (not content_type or "application/json" in content_type.lower()):
        try:
            payload = await request.json()
        except ValueError:
            logger.info("Request body is not valid JSON")
    result = handle_request(payload, method=request.method, content_type=content_type)
    return JSONResponse(result.body, status_code=result.status_code, headers=result.headers)
