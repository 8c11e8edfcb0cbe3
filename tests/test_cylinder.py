"""Tests for the augmented cylinder."""
import math

import pytest

cq = pytest.importorskip("cadquery")

from conftest import bbox, inside, volume  # noqa: E402
from sleevelock.geometry.cylinder import CylinderSpec, cylinder, resolve_cylinder  # noqa: E402


class TestResolveCylinder:

    def test_defaults_to_zero(self):
        spec = resolve_cylinder(10)
        assert (spec.d1, spec.d2, spec.c1, spec.c2, spec.o1, spec.o2) == (0, 0, 0, 0, 0, 0)

    def test_diameter_beats_radius(self):
        spec = resolve_cylinder(10, r=1, d=4)
        assert spec.d1 == spec.d2 == 4

    def test_end_diameter_beats_end_radius(self):
        spec = resolve_cylinder(10, d1=3, r1=5, d=1)
        assert spec.d1 == 3
        assert spec.d2 == 1

    def test_end_radius_beats_shared_diameter(self):
        spec = resolve_cylinder(10, r1=2, d=1)
        assert spec.d1 == 4
        assert spec.d2 == 1

    def test_per_end_chamfer_and_overhang(self):
        spec = resolve_cylinder(10, d=6, c=0.5, c2=1, o=0.3, o1=0)
        assert (spec.c1, spec.c2) == (0.5, 1)
        assert (spec.o1, spec.o2) == (0, 0.3)

    def test_extended_diameters(self):
        spec = resolve_cylinder(10, d=6, o2=1)
        assert spec.x1 == 0
        assert spec.x2 == pytest.approx(8)

    def test_chamfer_uses_widened_face(self):
        spec = CylinderSpec(h=5, d1=6, d2=6, c1=0.5, c2=0.5, o1=1, o2=0, x1=8, x2=0)
        assert spec.face_diameter(1) == 8
        assert spec.face_diameter(2) == 6


class TestCylinderGeometry:

    def test_plain_cylinder(self):
        wp = cylinder(20, d=10)
        assert volume(wp) == pytest.approx(math.pi * 25 * 20, rel=1e-6)
        assert bbox(wp) == pytest.approx((-5, -5, 0, 5, 5, 20), abs=1e-3)

    def test_frustum(self):
        wp = cylinder(10, d1=10, d2=4)
        assert volume(wp) == pytest.approx(math.pi * 10 / 3 * (25 + 10 + 4), rel=1e-6)

    def test_center(self):
        wp = cylinder(20, d=10, center=True)
        assert bbox(wp) == pytest.approx((-5, -5, -10, 5, 5, 10), abs=1e-3)

    def test_overhang_widens_face_without_lengthening(self):
        wp = cylinder(20, d=10, o1=1)
        assert bbox(wp) == pytest.approx((-6, -6, 0, 6, 6, 20), abs=1e-3)
        # radius shrinks from d/2 + o at the face to d/2 at depth o
        assert inside(wp, (5.8, 0, 0.1))
        assert not inside(wp, (5.5, 0, 1.5))

    def test_chamfer_bevels_end(self):
        wp = cylinder(10, d=10, c1=1)
        assert not inside(wp, (4.8, 0, 0.1))
        assert inside(wp, (4.8, 0, 5))
        assert inside(wp, (4.8, 0, 9.95))
        assert bbox(wp)[5] == pytest.approx(10, abs=1e-3)

    def test_chamfer_and_overhang_keep_height(self):
        wp = cylinder(20, d=10, c=1, o=1)
        _, _, zmin, _, _, zmax = bbox(wp)
        assert zmin == pytest.approx(0, abs=1e-3)
        assert zmax == pytest.approx(20, abs=1e-3)
        # chamfer cuts into the overhang flange
        assert not inside(wp, (5.9, 0, 0.05))
        assert inside(wp, (5.4, 0, 0.5))
