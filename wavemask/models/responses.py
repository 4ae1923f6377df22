"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    transforms_registered: int = 0


class InvertResponse(BaseModel):
    path: str
    commands: int = 0
    completed: list[str] = Field(default_factory=list)
    diagnostics: list[str] = Field(default_factory=list)
    errors: dict[str, str] = Field(default_factory=dict)


class EncloseResponse(BaseModel):
    path: str
    outcome: str
    diagnostics: list[str] = Field(default_factory=list)


class SvgMaskResponse(BaseModel):
    svg: str


class MasksResponse(BaseModel):
    top: str
    bottom: str
    outcome: str = "matched"
    coverage_top: float = 0.0
    coverage_bottom: float = 0.0
