"""Body: flat bar sliding in the sleeve.

Rear end at z = 0, tip at z = body_length. The bolt hole sits on x = 0,
which lines up with the sleeve slot at x = body_offset once the body is
shifted into the sleeve cavity.
"""
import logging

import cadquery as cq

from ..geometry.chamfer import EPS
from ..geometry.csg import difference, intersection, move, prism, turn
from ..geometry.cylinder import cylinder
from ..geometry.profiles import bar, slot

log = logging.getLogger(__name__)


def make_hole(params):
    """Bolt through-hole along Y at hole_position, rims bevelled."""
    t = params.body_thickness
    hole = cylinder(t, d=params.hole_diameter, o=params.edge_chamfer)
    return move(turn(hole, x=-90), 0, -t / 2, params.hole_position)


def make_tip_cut(params):
    """Triangle removed from the -X corner of the tip, leaving the point at +X."""
    if params.tip_length <= 0:
        return None
    w, t, length = params.body_width, params.body_thickness, params.body_length
    slope = params.tip_length / w
    reach = w / 2 + EPS
    # (z, x) pairs: the hypotenuse runs from (L - tip, -w/2) to (L, w/2)
    mid = length - params.tip_length / 2
    points = [
        (mid - slope * reach, -reach),
        (length + slope * reach + EPS, -reach),
        (mid + slope * reach, reach),
    ]
    return prism("y", points, t + 2 * EPS, start=-t / 2 - EPS)


def make_hook(params):
    """Rounded notch cut into the -X side at hook_z."""
    if not params.hook:
        return None
    w, t = params.hook_width, params.body_thickness
    notch = slot(w, t + 2 * EPS, params.hook_depth + w / 2, right=0, back=0)
    # channel along +X, thickness along -Y
    notch = turn(notch, x=90, y=90)
    return move(notch, -params.body_width / 2 - w, t / 2 + EPS, params.hook_z)


def make_edge(params):
    """Keep-region that thins the +X side down to edge_thickness."""
    if not params.edge:
        return None
    w, t, length = params.body_width, params.body_thickness, params.body_length
    knee = w / 2 - params.edge_width
    lip = params.edge_thickness / 2
    far = w / 2 + 1
    points = [
        (-far, -t / 2 - 1),
        (knee, -t / 2 - 1),
        (knee, -t / 2),
        (w / 2, -lip),
        (far, -lip),
        (far, lip),
        (w / 2, lip),
        (knee, t / 2),
        (knee, t / 2 + 1),
        (-far, t / 2 + 1),
    ]
    return prism("z", points, length + 2, start=-1)


def make_body(params) -> cq.Workplane:
    c = params.edge_chamfer
    log.debug("Body %.2f x %.2f x %.2f, chamfer %.2f",
              params.body_width, params.body_thickness, params.body_length, c)
    body = bar(params.body_width, params.body_thickness, params.body_length, c1=c, c2=c)
    body = difference(body, make_hole(params), make_tip_cut(params), make_hook(params))
    return intersection(body, make_edge(params))
