"""Layered defaults for chamfer and overhang overrides.

Every chamfer/overhang amount is picked from an ordered list of optional
overrides: the most specific one that is set wins, otherwise 0.
"""
AXES = ("x", "y", "z")

# Edges are indexed 1-4 per axis. With (u, v) the next two axes in cyclic
# order, index k sits at corner (u, v) of the cross-section:
# 1 -> (0, 0), 2 -> (su, 0), 3 -> (su, sv), 4 -> (0, sv).
# Walking 1-2-3-4 is clockwise when looking along +axis.
CROSS_AXES = {"x": ("y", "z"), "y": ("z", "x"), "z": ("x", "y")}
EDGE_CORNERS = {1: (0, 0), 2: (1, 0), 3: (1, 1), 4: (0, 1)}

EDGE_NAMES = tuple(f"c{axis}{k}" for axis in AXES for k in EDGE_CORNERS)
# ox1 is the face at x = 0, ox2 the face at x = sx, and so on.
FACE_NAMES = tuple(f"o{axis}{k}" for axis in AXES for k in (1, 2))


def first_of(*values, default=0.0):
    """First value that is not None, or `default`."""
    for value in values:
        if value is not None:
            return value
    return default


def resolve_chamfers(c=None, cx=None, cy=None, cz=None, **edges) -> dict[str, float]:
    """Chamfer size per edge: specific edge > axis (cx/cy/cz) > global c > 0."""
    _check_names(edges, EDGE_NAMES, "edge")
    axis = {"x": cx, "y": cy, "z": cz}
    return {name: first_of(edges.get(name), axis[name[1]], c) for name in EDGE_NAMES}


def resolve_overhangs(o=None, o1=None, o2=None, **faces) -> dict[str, float]:
    """Overhang depth per face: specific face > o1/o2 (z faces only) > global o > 0."""
    _check_names(faces, FACE_NAMES, "face")
    alias = {"oz1": o1, "oz2": o2}
    return {name: first_of(faces.get(name), alias.get(name), o) for name in FACE_NAMES}


def _check_names(given, known, kind):
    unknown = sorted(set(given) - set(known))
    if unknown:
        raise TypeError(f"unknown {kind} override(s): {', '.join(unknown)}")
