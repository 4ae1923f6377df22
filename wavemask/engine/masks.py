"""CSS mask values for a section's top and bottom edges."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

from wavemask.engine.enclosure import EnclosureResult, enclose_path_above
from wavemask.svg.serializer import path_to_svg

# Characters encodeURI leaves alone
_URI_SAFE = ";,/?:@&=+$-_.!~*'()#"


@dataclass(frozen=True)
class MaskPair:
    top: str
    bottom: str
    # Enclosure rewrite behind ``bottom``
    enclosure: EnclosureResult

    @property
    def bottom_path(self) -> str:
        return self.enclosure.path


def mask_url(svg_text: str) -> str:
    """``url('data:image/svg+xml,...')`` value for a mask-image property."""
    return f"url('data:image/svg+xml,{quote(svg_text, safe=_URI_SAFE)}')"


def section_masks(path_data: str, width: float, height: float) -> MaskPair:
    """Top mask from the authored wave, bottom mask from its enclosure rewrite."""
    enclosure = enclose_path_above(path_data, width, height)
    top = path_to_svg(path_data, width, height)
    bottom = path_to_svg(enclosure.path, width, height)
    return MaskPair(top=mask_url(top), bottom=mask_url(bottom), enclosure=enclosure)
