"""Augmented Cylinder: cylinder or frustum with per-end chamfer and overhang."""
from dataclasses import dataclass

import cadquery as cq

from .chamfer import anticone
from .csg import difference, move, solid, union
from .overhang import cone_stump
from .resolve import first_of


@dataclass(frozen=True)
class CylinderSpec:
    """Resolved dimensions of one augmented cylinder [mm].

    d1/d2 are the bottom/top diameters, x1/x2 the widened face diameters
    (0 where that end has no overhang).
    """

    h: float
    d1: float
    d2: float
    c1: float
    c2: float
    o1: float
    o2: float
    x1: float
    x2: float

    def face_diameter(self, end):
        """Diameter the chamfer of `end` (1 or 2) bevels."""
        d, x = (self.d1, self.x1) if end == 1 else (self.d2, self.x2)
        return x if x > 0 else d


def _twice(r):
    return None if r is None else 2 * r


def resolve_cylinder(h, r=None, d=None, r1=None, r2=None, d1=None, d2=None,
                     c=None, c1=None, c2=None, o=None, o1=None, o2=None) -> CylinderSpec:
    """Pick the effective diameters, chamfers and overhangs.

    Per end: d1 > 2*r1 > d > 2*r > 0 for the diameter, c1 > c > 0 for the
    chamfer and o1 > o > 0 for the overhang (same for end 2).
    """
    bottom = first_of(d1, _twice(r1), d, _twice(r))
    top = first_of(d2, _twice(r2), d, _twice(r))
    over1 = first_of(o1, o)
    over2 = first_of(o2, o)
    return CylinderSpec(
        h=h,
        d1=bottom,
        d2=top,
        c1=first_of(c1, c),
        c2=first_of(c2, c),
        o1=over1,
        o2=over2,
        x1=bottom + 2 * over1 if over1 > 0 else 0.0,
        x2=top + 2 * over2 if over2 > 0 else 0.0,
    )


def cylinder(h, center=False, **kwargs) -> cq.Workplane:
    """Build an augmented cylinder along +Z from z = 0 (centred on z = 0 with `center`).

    Accepts the keyword arguments of `resolve_cylinder()`. Overhang stumps are
    added first, then the chamfer cutters bevel the (possibly widened) faces.
    """
    spec = resolve_cylinder(h, **kwargs)
    return build_cylinder(spec, center)


def build_cylinder(spec: CylinderSpec, center=False) -> cq.Workplane:
    if spec.d1 == spec.d2:
        base = cq.Solid.makeCylinder(spec.d1 / 2, spec.h)
    else:
        base = cq.Solid.makeCone(spec.d1 / 2, spec.d2 / 2, spec.h)
    body = union(
        solid(base),
        cone_stump(spec.d1, spec.o1),
        cone_stump(spec.d2, spec.o2, z=spec.h, top=True),
    )
    body = difference(
        body,
        anticone(spec.face_diameter(1), spec.c1),
        anticone(spec.face_diameter(2), spec.c2, z=spec.h, top=True),
    )
    if center:
        body = move(body, z=-spec.h / 2)
    return body
