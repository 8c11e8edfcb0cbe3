"""End cap: flange below z = 0, plug above it that fits the sleeve mouth."""
import logging

import cadquery as cq

from ..geometry.csg import difference, move, turn, union
from ..geometry.cylinder import cylinder
from ..geometry.profiles import bar, slot
from ..params import Attachment

log = logging.getLogger(__name__)

PIN_EMBED = 0.2  # [mm] detent pin length sunk into the plug


def make_flange(params):
    c = params.edge_chamfer
    flange = bar(params.sleeve_outer_width, params.sleeve_outer_thickness,
                 params.cap_thickness, c1=c, c2=c)
    return move(flange, z=-params.cap_thickness)


def make_plug(params):
    """Plug with a flared base and a chamfered lead-in."""
    return bar(params.plug_width, params.plug_thickness, params.cap_depth,
               o1=params.edge_overhang, c2=params.edge_chamfer)


def make_pins(params):
    """Detent pins on both Y faces of the plug."""
    height = params.detent_height + PIN_EMBED
    tip = min(params.edge_chamfer, params.detent_height / 2)
    pin = cylinder(height, d=params.detent_diameter, c2=tip)
    face = params.plug_thickness / 2 - PIN_EMBED
    z = params.detent_position
    return union(
        move(turn(pin, x=-90), 0, face, z),
        move(turn(pin, x=90), 0, -face, z),
    )


def make_attachment(params):
    """Lanyard hole or slot through the flange along Y."""
    t = params.sleeve_outer_thickness
    z = -params.cap_thickness / 2
    d = params.attachment_diameter
    if params.attachment == Attachment.HOLE:
        hole = cylinder(t, d=d, o=params.edge_chamfer)
        return move(turn(hole, x=-90), 0, -t / 2, z)
    if params.attachment == Attachment.SLOT:
        length = params.attachment_length
        cutter = slot(d, t, length, right=0, back=0, o=params.edge_chamfer)
        # channel along +X, thickness along -Y
        cutter = turn(cutter, x=90, y=90)
        return move(cutter, -length / 2, t / 2, z)
    return None


def make_cap(params) -> cq.Workplane:
    log.debug("Cap plug %.2f x %.2f x %.2f, attachment %s",
              params.plug_width, params.plug_thickness, params.cap_depth,
              params.attachment.value)
    cap = union(make_flange(params), make_plug(params), make_pins(params))
    return difference(cap, make_attachment(params))
