"""FastAPI dependency injection."""

from __future__ import annotations

from wavemask.config import Settings, settings


def get_settings() -> Settings:
    return settings


def resolve_viewbox(
    width: float | None, height: float | None, cfg: Settings
) -> tuple[float, float]:
    return (
        width if width is not None else cfg.default_width,
        height if height is not None else cfg.default_height,
    )
