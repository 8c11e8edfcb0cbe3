"""Placement of finished parts for combined output files."""
import dataclasses

from . import config


def place_parts(parts, spacing=None):
    """Lay parts side by side along +X, `spacing` apart, starting at x = 0.

    Returns new Part records; each part keeps its own Y/Z position, so parts
    standing on z = 0 stay on the build plate.
    """
    if spacing is None:
        spacing = config.LAYOUT_SPACING
    placed = []
    cursor = 0.0
    for part in parts:
        bb = part.solid.val().BoundingBox()
        offset = (cursor - bb.xmin, 0.0, 0.0)
        placed.append(dataclasses.replace(part, placement=offset))
        cursor += bb.xlen + spacing
    return placed
