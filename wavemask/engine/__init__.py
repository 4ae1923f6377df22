"""wavemask path transform engine."""

from wavemask.engine.context import PathContext
from wavemask.engine.enclosure import EnclosureOutcome, EnclosureResult, enclose_path, enclose_path_above
from wavemask.engine.inverter import invert_path, invert_svg_mask
from wavemask.engine.pipeline import Pipeline, create_pipeline, run_recipe
from wavemask.engine.registry import Layer, get_registry, transform
from wavemask.engine.transforms import invert, mirror_reverse, vertical_flip

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "PathContext",
    "Pipeline",
    "create_pipeline",
    "run_recipe",
    "vertical_flip",
    "mirror_reverse",
    "invert",
    "invert_path",
    "invert_svg_mask",
    "enclose_path",
    "enclose_path_above",
    "EnclosureOutcome",
    "EnclosureResult",
]
