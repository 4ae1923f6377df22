"""POST /api/invert, /api/enclose, /api/invert-svg, /api/masks — path transforms."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from wavemask.config import Settings
from wavemask.dependencies import get_settings, resolve_viewbox
from wavemask.engine.config import PipelineConfig
from wavemask.engine.coverage import mask_coverage
from wavemask.engine.enclosure import enclose_path_above
from wavemask.engine.inverter import invert_svg_mask
from wavemask.engine.masks import section_masks
from wavemask.engine.pipeline import run_recipe
from wavemask.models.requests import PathRequest, SvgMaskRequest
from wavemask.models.responses import (
    EncloseResponse,
    InvertResponse,
    MasksResponse,
    SvgMaskResponse,
)

router = APIRouter()


@router.post("/invert", response_model=InvertResponse)
async def invert(req: PathRequest, cfg: Settings = Depends(get_settings)) -> InvertResponse:
    width, height = resolve_viewbox(req.width, req.height, cfg)
    ctx = run_recipe(
        req.path,
        "invert",
        width=width,
        height=height,
        config=PipelineConfig(precision=cfg.number_precision),
    )
    return InvertResponse(
        path=ctx.text,
        commands=ctx.num_commands,
        completed=ctx.completed_transforms,
        diagnostics=ctx.diagnostics,
        errors=ctx.errors,
    )


@router.post("/enclose", response_model=EncloseResponse)
async def enclose(req: PathRequest, cfg: Settings = Depends(get_settings)) -> EncloseResponse:
    width, height = resolve_viewbox(req.width, req.height, cfg)
    result = enclose_path_above(req.path, width, height)
    return EncloseResponse(
        path=result.path,
        outcome=result.outcome.value,
        diagnostics=result.diagnostics,
    )


@router.post("/invert-svg", response_model=SvgMaskResponse)
async def invert_svg(req: SvgMaskRequest, cfg: Settings = Depends(get_settings)) -> SvgMaskResponse:
    svg = invert_svg_mask(req.svg, req.width, req.height, precision=cfg.number_precision)
    return SvgMaskResponse(svg=svg)


@router.post("/masks", response_model=MasksResponse)
async def masks(req: PathRequest, cfg: Settings = Depends(get_settings)) -> MasksResponse:
    width, height = resolve_viewbox(req.width, req.height, cfg)
    pair = section_masks(req.path, width, height)
    samples = cfg.coverage_samples_per_segment
    return MasksResponse(
        top=pair.top,
        bottom=pair.bottom,
        outcome=pair.enclosure.outcome.value,
        coverage_top=round(mask_coverage(req.path, width, height, samples), 4),
        coverage_bottom=round(mask_coverage(pair.bottom_path, width, height, samples), 4),
    )
