"""Boolean composition over CadQuery Workplanes.

A Solid is a `cq.Workplane` holding one solid (or compound). Every function
here returns a new Workplane and leaves its operands untouched. `None`
operands stand for features that were switched off and are skipped.
"""
import cadquery as cq


def solid(shape) -> cq.Workplane:
    """Wrap a raw `cq.Shape` into a Workplane."""
    return cq.Workplane("XY").add(shape)


def union(*solids):
    """Union of all non-None operands, or None if there are none."""
    parts = [s for s in solids if s is not None]
    if not parts:
        return None
    result = parts[0]
    for part in parts[1:]:
        result = result.union(part)
    return result


def difference(base, *cutters):
    """`base` minus every non-None cutter."""
    result = base
    for cutter in cutters:
        if cutter is not None:
            result = result.cut(cutter)
    return result


def intersection(base, *others):
    """Common volume of `base` and every non-None operand."""
    result = base
    for other in others:
        if other is not None:
            result = result.intersect(other)
    return result


def turn(wp, x=0.0, y=0.0, z=0.0):
    """Rotate about the global X, then Y, then Z axis through the origin [deg]."""
    for axis, angle in (((1, 0, 0), x), ((0, 1, 0), y), ((0, 0, 1), z)):
        if angle:
            wp = wp.rotate((0, 0, 0), axis, angle)
    return wp


def move(wp, x=0.0, y=0.0, z=0.0):
    """Translate, skipping None operands."""
    if wp is None:
        return None
    return wp.translate((x, y, z))


def prism(axis, points, length, start=0.0):
    """Extrude a closed polygon along +axis from `start` for `length`.

    `points` are (u, v) pairs in the cross-section, with (u, v) the next two
    axes in cyclic order: x -> (y, z), y -> (z, x), z -> (x, y).
    """
    plane = {"x": "YZ", "y": "ZX", "z": "XY"}[axis]
    wp = cq.Workplane(plane).polyline(points).close().extrude(length)
    offset = {"x": (start, 0, 0), "y": (0, start, 0), "z": (0, 0, start)}[axis]
    return wp.translate(offset)
