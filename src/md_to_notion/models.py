"""Pydantic models for API request/response."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class ConvertRequest(BaseModel):
    md: str | None = None


class ConvertResponse(BaseModel):
    children: list[dict[str, Any]]


class ErrorResponse(BaseModel):
    error: str
