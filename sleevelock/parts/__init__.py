"""Part assemblers and the generation entry point."""
import logging
from dataclasses import dataclass, field

import cadquery as cq

from .body import make_body
from .bolts import make_bolts
from .cap import make_cap
from .sleeve import make_sleeve

log = logging.getLogger(__name__)

PART_GROUPS = ("body", "sleeve", "cap", "bolts")


@dataclass(frozen=True)
class Part:
    """Finished solid plus the translation that places it in a combined layout."""

    name: str
    solid: cq.Workplane
    placement: tuple[float, float, float] = field(default=(0.0, 0.0, 0.0))

    def placed(self) -> cq.Workplane:
        if not any(self.placement):
            return self.solid
        return self.solid.translate(self.placement)


def build_parts(params, only=None) -> list[Part]:
    """Build every part enabled by the generate_* toggles.

    `only` narrows the selection further to a subset of PART_GROUPS.
    Order: body, sleeve, cap, bolt pieces.
    """
    selected = [
        group for group in PART_GROUPS
        if params[f"generate_{group}"] and (only is None or group in only)
    ]
    parts = []
    for group in selected:
        log.info("Building %s", group)
        if group == "body":
            parts.append(Part("body", make_body(params)))
        elif group == "sleeve":
            parts.append(Part("sleeve", make_sleeve(params)))
        elif group == "cap":
            parts.append(Part("cap", make_cap(params)))
        else:
            parts.extend(Part(name, solid) for name, solid in make_bolts(params))
    return parts


__all__ = ["PART_GROUPS", "Part", "build_parts", "make_body", "make_bolts", "make_cap", "make_sleeve"]
