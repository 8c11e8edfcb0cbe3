"""
Shared fixtures for sleevelock tests.

Geometry tests call `pytest.importorskip("cadquery")` at module level, so the
parameter and layout tests still run where no geometry kernel is installed.
"""
import pytest

from sleevelock.params import ParameterSet


@pytest.fixture
def defaults():
    """ParameterSet with every primary value at its default."""
    return ParameterSet.defaults()


@pytest.fixture
def plain_body_params():
    """30 x 5 x 80 body, 6 mm hole at 20 mm, chamfer 0.5, no overhang or cut-outs."""
    return ParameterSet.from_mapping({
        "body_width": 30,
        "body_thickness": 5,
        "body_length": 80,
        "hole_diameter": 6,
        "hole_position": 20,
        "chamfer": True,
        "chamfer_size": 0.5,
        "overhang": False,
        "tip_length": 0,
        "hook": False,
        "edge": False,
    })


@pytest.fixture
def draft():
    """Fast ParameterSet: no chamfers or overhangs, coarse tessellation."""
    return ParameterSet.from_mapping({"draft": True})


def bbox(wp):
    """(xmin, ymin, zmin, xmax, ymax, zmax) of a Workplane's solid."""
    bb = wp.val().BoundingBox()
    return (bb.xmin, bb.ymin, bb.zmin, bb.xmax, bb.ymax, bb.zmax)


def size(wp):
    bb = wp.val().BoundingBox()
    return (bb.xlen, bb.ylen, bb.zlen)


def volume(wp):
    return wp.val().Volume()


def inside(wp, point):
    """True when `point` lies inside the solid."""
    return wp.val().isInside(point)
