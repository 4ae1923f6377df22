"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PathRequest(BaseModel):
    path: str = Field(..., description="Path d attribute")
    width: float | None = Field(default=None, gt=0, description="viewBox width")
    height: float | None = Field(default=None, gt=0, description="viewBox height")


class SvgMaskRequest(BaseModel):
    svg: str = Field(..., description="SVG document containing one path")
    width: float | None = Field(default=None, gt=0, description="viewBox width override")
    height: float | None = Field(default=None, gt=0, description="viewBox height override")
