"""Request gating around the converter: method, content type, payload, status codes.

``handle_request`` is shared by the FastAPI route and by ``main``, the
serverless action entry that receives ``__ow_method``/``__ow_headers``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from loguru import logger
from pydantic import ValidationError

from ..models import ConvertRequest, ConvertResponse, ErrorResponse
from .block_converter import markdown_to_notion

USAGE_HINT = 'With a body containing markdown in a "md" field. example: {"md": "## Hello World"}'


def _json_headers() -> dict[str, str]:
    return {"Content-Type": "application/json"}


@dataclass
class ActionResponse:
    status_code: int
    body: dict[str, Any]
    headers: dict[str, str] = field(default_factory=_json_headers)

    def to_dict(self) -> dict[str, Any]:
        return {"body": self.body, "statusCode": self.status_code, "headers": self.headers}


def _error(status_code: int, message: str, **extra_headers: str) -> ActionResponse:
    headers = _json_headers()
    headers.update(extra_headers)
    return ActionResponse(status_code, ErrorResponse(error=message).model_dump(), headers)


def handle_request(
    payload: Any,
    method: str | None = None,
    content_type: str | None = None,
) -> ActionResponse:
    """Validate the request and convert ``payload["md"]``. Never raises."""
    if method and method.lower() != "post":
        logger.info(f"Rejected {method} request")
        return _error(405, f"Method not allowed. Only POST requests are supported. {USAGE_HINT}", Allow="POST")

    if content_type and "application/json" not in content_type.lower():
        logger.info(f"Rejected content type {content_type!r}")
        return _error(
            415,
            f"Unsupported Media Type. Please send request with application/json content type. {USAGE_HINT}",
        )

    data = payload if isinstance(payload, dict) else {}
    if not data.get("md"):
        return _error(400, f"Bad Request: No markdown content provided in the request body. {USAGE_HINT}")
    try:
        request = ConvertRequest.model_validate(data)
    except ValidationError as e:
        logger.info(f"Invalid convert payload: {e.error_count()} error(s)")
        return _error(400, f'Bad Request: The "md" field must be a string. {USAGE_HINT}')

    try:
        children = markdown_to_notion(request.md)
    except Exception as e:
        logger.exception(f"Conversion failed: {e}")
        return _error(500, f"Internal Server Error: {e}")

    logger.debug(f"Converted {len(request.md)} chars into {len(children)} blocks")
    return ActionResponse(200, ConvertResponse(children=children).model_dump())


def main(args: dict[str, Any]) -> dict[str, Any]:
    """Serverless action entry: ``{"md": ..., "__ow_method": ..., "__ow_headers": {...}}``."""
    headers = args.get("__ow_headers") or {}
    return handle_request(
        args,
        method=args.get("__ow_method"),
        content_type=headers.get("content-type", ""),
    ).to_dict()
