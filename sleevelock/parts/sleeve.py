"""Sleeve: hollow bar the body slides in.

Rear mouth at z = 0 (closed by the end cap), front mouth at z = sleeve_length.
The bolt slot runs through both Y walls at x = body_offset, from slot_start
to slot_end, with the lock extension at the front end pointing to +X and back
towards the rear, plus an optional straight extension towards -X.
"""
import logging

import cadquery as cq

from ..geometry.chamfer import EPS, groove
from ..geometry.csg import difference, move, prism, turn, union
from ..geometry.cylinder import cylinder
from ..geometry.profiles import bar, slot

log = logging.getLogger(__name__)


def make_shell(params):
    length = params.sleeve_length
    outer = bar(params.sleeve_outer_width, params.sleeve_outer_thickness, length,
                c1=params.edge_chamfer, c2=params.edge_chamfer)
    rim = params.rim_chamfer
    cavity = bar(params.sleeve_inner_width, params.sleeve_inner_thickness, length,
                 o1=rim, o2=rim)
    return difference(outer, cavity)


def make_slot(params):
    """Bolt slot cutter through both walls."""
    t = params.sleeve_outer_thickness
    cutter = slot(
        params.slot_width, t, params.travel,
        diagonal=params.lock_diagonal,
        right=params.lock_right,
        back=params.lock_back,
        left=params.lock_left,
        o=params.rim_chamfer,
    )
    # channel along +Z, thickness along -Y
    cutter = turn(cutter, x=90)
    return move(cutter, params.body_offset, t / 2, params.slot_start)


def make_detents(params):
    """Holes through both walls that the end cap pins snap into."""
    t = params.sleeve_outer_thickness
    d = params.detent_diameter + 2 * params.cap_clearance
    hole = cylinder(t, d=d, o=params.edge_chamfer)
    return move(turn(hole, x=-90), 0, -t / 2, params.detent_position)


def make_grips(params):
    """V-grooves across both Y faces, grip_pitch apart from grip_start."""
    if not params.grip or params.grip_count <= 0:
        return None
    half = params.sleeve_outer_thickness / 2
    length = params.sleeve_outer_width + 2 * EPS
    front = union(*(
        move(groove("x", length, params.grip_depth), 0, half - params.grip_depth,
             params.grip_start + i * params.grip_pitch)
        for i in range(params.grip_count)
    ))
    return union(front, turn(front, z=180))


def make_marker(params):
    """Arrow engraved on the +Y face, pointing to the front."""
    if not params.marker:
        return None
    size, z = params.marker_size, params.marker_position
    depth = params.marker_depth
    # (z, x) pairs
    arrow = [(z, -size / 2), (z, size / 2), (z + size, 0.0)]
    return prism("y", arrow, depth + EPS, start=params.sleeve_outer_thickness / 2 - depth)


def make_sleeve(params) -> cq.Workplane:
    log.debug("Sleeve outer %.2f x %.2f, inner %.2f x %.2f, length %.2f",
              params.sleeve_outer_width, params.sleeve_outer_thickness,
              params.sleeve_inner_width, params.sleeve_inner_thickness,
              params.sleeve_length)
    log.debug("Slot %.2f -> %.2f at x=%.2f", params.slot_start, params.slot_end,
              params.body_offset)
    return difference(
        make_shell(params),
        make_slot(params),
        make_detents(params),
        make_grips(params),
        make_marker(params),
    )
