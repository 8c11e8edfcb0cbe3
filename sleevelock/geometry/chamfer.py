"""Chamfer cutters: solids subtracted from a primitive to bevel it."""
import cadquery as cq

from .csg import difference, prism, solid
from .resolve import EDGE_CORNERS

EPS = 0.01  # [mm] cutter overshoot past the surface it bevels


def edge_prism(axis, index, cross, length, size, grow=(0.0, 0.0), start=0.0):
    """Triangular prism bevelling edge `index` of a box along `axis`.

    `cross` is the box extent (su, sv) across the edge, in the cyclic (u, v)
    order of `axis`. The hypotenuse passes through the points `size` away
    from the corner on both faces; the other two sides overshoot by EPS.
    `grow` moves the corner outward in (u, v), used when an overhang stump
    widens the adjoining face. The prism runs from `start` along `axis`.
    """
    if not size or size <= 0:
        return None
    su, sv = cross
    side_u, side_v = EDGE_CORNERS[index]
    du = -1 if side_u else 1
    dv = -1 if side_v else 1
    u0 = (su if side_u else 0.0) - du * grow[0]
    v0 = (sv if side_v else 0.0) - dv * grow[1]
    points = [
        (u0 + du * (size + EPS), v0 - dv * EPS),
        (u0 - du * EPS, v0 + dv * (size + EPS)),
        (u0 - du * EPS, v0 - dv * EPS),
    ]
    return prism(axis, points, length, start)


def anticone(d, c, z=0.0, top=False):
    """Ring that bevels the circular face of diameter `d` at height `z` by `c`.

    The cutter is a cylinder of diameter d + 2c with a 45 degree cone taken
    out of it, reaching 2c into the solid (below the face when `top`).
    """
    if not c or c <= 0:
        return None
    sign = -1 if top else 1
    direction = cq.Vector(0, 0, sign)
    base = cq.Vector(0, 0, z - sign * EPS)
    height = 2 * c + EPS
    inner = d / 2 - c - EPS
    outer = d / 2 + c
    ring = solid(cq.Solid.makeCylinder(outer + EPS, height, base, direction))
    if inner > 0:
        core = cq.Solid.makeCone(inner, outer, height, base, direction)
    else:
        # apex lies inside the solid
        apex = base + direction * -inner
        core = cq.Solid.makeCone(0, outer, height + inner, apex, direction)
    return difference(ring, solid(core))


def groove(axis, length, depth, start=None):
    """Right-angled V prism along `axis` for serrations.

    The apex sits on the axis, the V opens towards +u (the first cross axis)
    and is `depth` deep plus overshoot. The prism is centred on the origin
    along `axis` unless `start` is given.
    """
    reach = depth + EPS
    points = [(0.0, 0.0), (reach, -reach), (reach, reach)]
    if start is None:
        start = -length / 2
    return prism(axis, points, length, start)
