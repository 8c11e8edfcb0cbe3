"""Compound profiles built from augmented primitives.

* `bar`  - rounded rectangular bar used by the body, sleeve and cap.
* `slot` - rounded channel with a locking extension at its far end.
"""
import math

import cadquery as cq

from .csg import move, turn, union
from .cube import box
from .cylinder import cylinder
from .slots import slot_layout


def bar(width, thickness, length, c1=None, c2=None, o1=None, o2=None) -> cq.Workplane:
    """Bar with round long sides: width along X, thickness along Y, length along Z.

    Centred in X and Y, z in [0, length]. The two side cylinders have
    diameter = thickness; the cube between them only gets its bottom/top
    X edges and z faces treated, the joins stay sharp and its overhang
    stumps widen along Y only, inside the flare of the side cylinders.
    """
    spread = width - thickness
    if spread <= 0:
        return cylinder(length, d=thickness, c1=c1, c2=c2, o1=o1, o2=o2)
    sides = [
        move(cylinder(length, d=thickness, c1=c1, c2=c2, o1=o1, o2=o2), x=x)
        for x in (-spread / 2, spread / 2)
    ]
    middle = box(
        (spread, thickness, length),
        cx1=c1, cx2=c1, cx3=c2, cx4=c2,
        oz1=o1, oz2=o2,
        flush=("x",),
    )
    return union(move(middle, -spread / 2, -thickness / 2, 0), *sides)


def _stroke(segment, width, thickness, o1, o2):
    piece = box((segment.length, width, thickness), oz1=o1, oz2=o2, flush=("x",))
    piece = turn(move(piece, y=-width / 2), z=math.degrees(segment.angle))
    return move(piece, *segment.start, 0)


def slot(width, thickness, length, diagonal=True, right=1.0, back=1.0, left=0.0,
         o=None, o1=None, o2=None) -> cq.Workplane:
    """Slot solid in the XY plane, z in [0, thickness].

    Every segment end is capped with a cylinder of diameter `width`; `o`
    (or `o1`/`o2`) widens the bottom/top faces, which bevels the rims when
    the slot is used as a cutter.
    """
    o1 = o if o1 is None else o1
    o2 = o if o2 is None else o2
    layout = slot_layout(width, length, diagonal, right, back, left)
    ends = [layout.channel.start]
    for segment in layout.segments:
        if segment.end not in ends:
            ends.append(segment.end)
    caps = [
        move(cylinder(thickness, d=width, o1=o1, o2=o2), x, y, 0)
        for x, y in ends
    ]
    strokes = [_stroke(s, width, thickness, o1, o2) for s in layout.segments]
    return union(*caps, *strokes)
