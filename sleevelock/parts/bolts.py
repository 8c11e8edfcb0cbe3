"""Bolts: the pieces that ride in the sleeve slot and hold the body.

Every piece stands on its knob (z = 0) with the shaft pointing up. The shaft
passes one sleeve wall, the body hole and the other wall, so the two pieces
of a bolt meet from opposite sides.
"""
import logging

import cadquery as cq

from ..geometry.chamfer import EPS, groove
from ..geometry.csg import difference, move, turn, union
from ..geometry.cylinder import cylinder
from ..params import BoltType

log = logging.getLogger(__name__)


def make_knob(params):
    """Chamfered disc with vertical V grip grooves around the rim."""
    c = params.edge_chamfer
    knob = cylinder(params.knob_height, d=params.knob_diameter, c=c)
    count = params.knob_grips
    if not params.grip or count <= 0:
        return knob
    radius = params.knob_diameter / 2
    depth = params.grip_depth
    cut = move(
        groove("z", params.knob_height + 2 * EPS, depth, start=-EPS),
        x=radius - depth,
    )
    grooves = [turn(cut, z=i * 360 / count) for i in range(count)]
    return difference(knob, *grooves)


def make_shaft(params, d, length):
    """Shaft on top of the knob, flared into it, tip chamfered."""
    shaft = cylinder(length, d=d, o1=params.edge_overhang,
                     c2=min(params.edge_chamfer, d / 4))
    return move(shaft, z=params.knob_height)


def make_bore(params, d, depth):
    """Hole cutter of `depth` from z = 0, its top rim bevelled."""
    return cylinder(depth, d=d, o2=params.edge_chamfer)


def split_halves(params):
    half = params.bolt_length / 2
    piece = union(make_knob(params), make_shaft(params, params.bolt_diameter, half))
    return [("bolt_a", piece), ("bolt_b", piece)]


def classic(params):
    """Long shaft piece plus a knob with a socket for the shaft end."""
    shaft = union(
        make_knob(params),
        make_shaft(params, params.bolt_diameter, params.bolt_length + params.socket_depth),
    )
    depth = params.socket_depth
    socket = move(make_bore(params, params.bolt_diameter + params.bolt_fit, depth),
                  z=params.knob_height - depth)
    return [("bolt_shaft", shaft), ("bolt_socket", difference(make_knob(params), socket))]


def paired_sheath(params):
    """Thin pin piece sliding into a tube piece of bolt diameter."""
    length = params.bolt_length
    pin = union(make_knob(params), make_shaft(params, params.pin_diameter, length))
    tube = union(make_knob(params), make_shaft(params, params.bolt_diameter, length))
    bore = move(make_bore(params, params.pin_diameter + params.bolt_fit, length),
                z=params.knob_height)
    return [("bolt_pin", pin), ("bolt_sheath", difference(tube, bore))]


def knob_only(params):
    """Two knobs clamped by a screw through countersunk holes."""
    d = params.screw_diameter
    sink = min(d / 2, params.knob_height / 2)
    hole = cylinder(params.knob_height, d=d, o2=sink)
    knob = difference(make_knob(params), hole)
    return [("knob_a", knob), ("knob_b", knob)]


BUILDERS = {
    BoltType.SPLIT_HALVES: split_halves,
    BoltType.CLASSIC: classic,
    BoltType.PAIRED_SHEATH: paired_sheath,
    BoltType.KNOB_ONLY: knob_only,
}


def make_bolts(params) -> list[tuple[str, cq.Workplane]]:
    """Printable pieces for the selected bolt_type, as (name, solid) pairs."""
    log.debug("Bolt %s: diameter %.2f, length %.2f", params.bolt_type.value,
              params.bolt_diameter, params.bolt_length)
    return BUILDERS[params.bolt_type](params)
