"""Augmented Cube: box with 12 chamfer-able edges and 6 overhang-able faces."""
import cadquery as cq

from .chamfer import edge_prism
from .csg import difference, move, solid, union
from .overhang import pyramid_stump
from .resolve import AXES, CROSS_AXES, EDGE_CORNERS, resolve_chamfers, resolve_overhangs


def _vector(**coords):
    return tuple(coords.get(axis, 0.0) for axis in AXES)


def box(size, center=False, c=None, cx=None, cy=None, cz=None,
        o=None, o1=None, o2=None, flush=(), **overrides) -> cq.Workplane:
    """Box of `size` (sx, sy, sz) with its minimum corner at the origin.

    Chamfers resolve per edge as cx1..cz4 > cx/cy/cz > c > 0, overhangs per
    face as ox1..oz2 > o1/o2 (z faces) > o > 0. Stumps are added first; a
    chamfered edge next to an overhung face is moved out to the widened
    outline. Stumps never widen along the axes named in `flush`, which is
    how a box joins other solids at those ends. Unknown override names
    raise TypeError.
    """
    extent = dict(zip(AXES, size))
    edges = {k: v for k, v in overrides.items() if k.startswith("c")}
    faces = {k: v for k, v in overrides.items() if not k.startswith("c")}
    chamfers = resolve_chamfers(c=c, cx=cx, cy=cy, cz=cz, **edges)
    overhangs = resolve_overhangs(o=o, o1=o1, o2=o2, **faces)

    stumps = []
    for name, depth in overhangs.items():
        if depth <= 0:
            continue
        axis, side = name[1], int(name[2]) - 1
        u, v = CROSS_AXES[axis]
        flare = (int(u not in flush), int(v not in flush))
        stump = pyramid_stump(axis, extent[u], extent[v], depth,
                              inward=-1 if side else 1, flare=flare)
        position = {axis: extent[axis] * side, u: extent[u] / 2, v: extent[v] / 2}
        stumps.append(move(stump, *_vector(**position)))

    cutters = []
    for name, size_ in chamfers.items():
        if size_ <= 0:
            continue
        axis, index = name[1], int(name[2])
        u, v = CROSS_AXES[axis]
        side_u, side_v = EDGE_CORNERS[index]
        cross = (extent[u], extent[v])
        grow = (
            0.0 if u in flush else overhangs[f"o{v}{side_v + 1}"],
            0.0 if v in flush else overhangs[f"o{u}{side_u + 1}"],
        )
        # overhung end faces: the box corner is buried in the stump there,
        # so only the widened face outline gets bevelled
        low, high = overhangs[f"o{axis}1"], overhangs[f"o{axis}2"]
        if extent[axis] - low - high > 0:
            cutters.append(edge_prism(axis, index, cross, extent[axis] - low - high,
                                      size_, grow, start=low))
        for start, depth in ((0.0, low), (extent[axis] - high, high)):
            if depth > 0:
                widened = (0.0 if u in flush else max(grow[0], depth),
                           0.0 if v in flush else max(grow[1], depth))
                cutters.append(edge_prism(axis, index, cross, depth, size_, widened,
                                          start=start))

    body = union(solid(cq.Solid.makeBox(*size)), *stumps)
    body = difference(body, *cutters)
    if center:
        body = move(body, *(-s / 2 for s in size))
    return body
