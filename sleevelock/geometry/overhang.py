"""45 degree overhang stumps.

A stump widens a face by `o` on every side and slopes back to the face
outline at depth `o`, so the extra material is self-supporting when printed.
Stumps stay inside the primitive they are attached to along its axis: they
never make a part longer, only wider at the face.
"""
import cadquery as cq

from .csg import intersection, solid

_PLANES = {"x": "YZ", "y": "ZX", "z": "XY"}


def cone_stump(d, o, z=0.0, top=False):
    """Circular stump for a face of diameter `d` lying at height `z`.

    Built as the common part of a 45 degree cone (diameter X = d + 2o at the
    face, closing to a point X/2 further in) and a cylinder of diameter X
    reaching (X - d)/2 into the solid. `top` means the solid lies below the
    face. Returns None when `o` is not positive.
    """
    if not o or o <= 0:
        return None
    x = d + 2 * o
    depth = (x - d) / 2
    direction = cq.Vector(0, 0, -1 if top else 1)
    base = cq.Vector(0, 0, z)
    cone = solid(cq.Solid.makeCone(x / 2, 0, x / 2, base, direction))
    collar = solid(cq.Solid.makeCylinder(x / 2, depth, base, direction))
    return intersection(cone, collar)


def pyramid_stump(axis, a, b, o, inward=1, flare=(1, 1)):
    """Rectangular stump for an a x b face normal to `axis`, at the origin.

    The (a + 2o) x (b + 2o) base lies on the face plane, the a x b top at
    depth `o` towards `inward` (+1 or -1 along the axis). `a` and `b` are the
    face extents along the next two axes in cyclic order. A zero in `flare`
    keeps that direction flush with the face, so the stump only widens
    along the other one. Returns None when `o` is not positive.
    """
    if not o or o <= 0:
        return None
    return (
        cq.Workplane(_PLANES[axis])
        .rect(a + 2 * o * flare[0], b + 2 * o * flare[1])
        .workplane(offset=inward * o)
        .rect(a, b)
        .loft(ruled=True)
    )
