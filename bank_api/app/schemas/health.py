"""Pydantic model for the health check response."""

from typing import Any, Dict

from pydantic import BaseModel, Field


class HealthStatus(BaseModel):
    status: str = Field("ok", examples=["ok"])
    info: Dict[str, Any] = Field(default_factory=dict)
    error: Dict[str, Any] = Field(default_factory=dict)
    details: Dict[str, Any] = Field(default_factory=dict)
