"""Registered pipeline steps. Each wraps one pure function from the engine."""

from __future__ import annotations

import logging

from wavemask.engine.context import PathContext
from wavemask.engine.enclosure import enclose_path_above
from wavemask.engine.registry import Layer, transform
from wavemask.engine.transforms import mirror_reverse, vertical_flip
from wavemask.svg.commands import validate_path_data
from wavemask.svg.serializer import serialize_path
from wavemask.svg.tokenizer import parse_path_data

logger = logging.getLogger(__name__)


@transform(
    id="T0.01",
    layer=Layer.TEXT_REWRITE,
    description="Rewrite a baseline wave to enclose the area above the curve",
    tags={"enclose"},
)
def enclose_above(ctx: PathContext) -> None:
    result = enclose_path_above(ctx.text, ctx.width, ctx.height)
    ctx.text = result.path
    ctx.enclosure = result.outcome
    ctx.diagnostics.extend(result.diagnostics)


@transform(
    id="T1.01",
    layer=Layer.PARSING,
    description="Tokenize path data into typed commands",
    tags={"always"},
)
def parse(ctx: PathContext) -> None:
    ctx.commands = parse_path_data(ctx.text)
    if not len(ctx.commands):
        ctx.diagnostics.append("no path commands found")
        return
    ctx.diagnostics.extend(validate_path_data(ctx.commands))


@transform(
    id="T2.01",
    layer=Layer.GEOMETRY,
    dependencies=["T1.01"],
    description="Flip Y coordinates across the viewBox height",
    tags={"invert", "flip"},
)
def vertical_flip_step(ctx: PathContext) -> None:
    ctx.commands = vertical_flip(ctx.commands, ctx.height)


@transform(
    id="T2.02",
    layer=Layer.GEOMETRY,
    dependencies=["T1.01"],
    after=["T2.01"],
    description="Reverse command order and mirror X across the viewBox width",
    tags={"invert", "mirror"},
)
def mirror_reverse_step(ctx: PathContext) -> None:
    ctx.commands = mirror_reverse(ctx.commands, ctx.width)


@transform(
    id="T3.01",
    layer=Layer.SERIALIZATION,
    dependencies=["T1.01"],
    after=["T2.01", "T2.02"],
    description="Serialize commands back to path data",
    tags={"invert", "flip", "mirror"},
)
def serialize(ctx: PathContext) -> None:
    ctx.text = serialize_path(ctx.commands, ctx.precision)
    logger.debug("Serialized %d commands", len(ctx.commands))
