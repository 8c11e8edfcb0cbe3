"""Tests for the augmented cube: edge indexing, chamfers, overhang stumps."""
import pytest

cq = pytest.importorskip("cadquery")

from conftest import bbox, inside, volume  # noqa: E402
from sleevelock.geometry.cube import box  # noqa: E402

SIZE = (10, 20, 30)


class TestPlainBox:

    def test_matches_unmodified_box(self):
        wp = box(SIZE)
        plain = cq.Workplane("XY").add(cq.Solid.makeBox(*SIZE))
        assert volume(wp) == pytest.approx(volume(plain), rel=1e-9)
        assert bbox(wp) == pytest.approx(bbox(plain), abs=1e-6)

    def test_explicit_zeros_change_nothing(self):
        wp = box(SIZE, c=0, o=0, cx1=0, oz2=0)
        assert volume(wp) == pytest.approx(6000, rel=1e-9)

    def test_center(self):
        assert bbox(box(SIZE, center=True)) == pytest.approx((-5, -10, -15, 5, 10, 15), abs=1e-6)

    def test_unknown_override(self):
        with pytest.raises(TypeError):
            box(SIZE, cq9=1)


class TestEdgeChamfers:

    def test_single_edge_volume(self):
        wp = box(SIZE, cz1=2)
        assert volume(wp) == pytest.approx(6000 - 0.5 * 2 * 2 * 30, rel=1e-6)

    def test_z_edge_1_is_at_origin(self):
        wp = box(SIZE, cz1=2)
        assert not inside(wp, (0.5, 0.5, 15))
        assert inside(wp, (1.5, 1.5, 15))
        assert inside(wp, (9.5, 19.5, 15))

    def test_x_edge_3_is_opposite_origin(self):
        wp = box(SIZE, cx3=2)
        assert volume(wp) == pytest.approx(6000 - 0.5 * 2 * 2 * 10, rel=1e-6)
        assert not inside(wp, (5, 19.5, 29.5))
        assert inside(wp, (5, 0.5, 0.5))

    def test_y_edge_2_sits_at_far_z(self):
        # y edges walk (z, x): edge 2 is at z = sz, x = 0
        wp = box(SIZE, cy2=2)
        assert not inside(wp, (0.5, 10, 29.5))
        assert inside(wp, (9.5, 10, 29.5))
        assert inside(wp, (0.5, 10, 0.5))

    def test_global_with_specific_override(self):
        wp = box(SIZE, c=0.5, cx1=2)
        assert not inside(wp, (5, 1.0, 0.8))
        # the opposite x edge only gets the global size
        assert inside(wp, (5, 19.0, 29.2))
        assert not inside(wp, (5, 19.8, 29.8))


class TestFaceOverhangs:

    def test_bottom_stump_widens_without_lengthening(self):
        wp = box(SIZE, oz1=1)
        assert bbox(wp) == pytest.approx((-1, -1, 0, 11, 21, 30), abs=1e-3)

    def test_bottom_stump_volume(self):
        # prismatoid 12x22 -> 10x20 over 1 mm, minus the part inside the box
        stump = (12 * 22 + 10 * 20 + 4 * 11 * 21) / 6
        wp = box(SIZE, o1=1)
        assert volume(wp) == pytest.approx(6000 + stump - 200, rel=1e-4)

    def test_stump_slopes_at_45_degrees(self):
        wp = box(SIZE, oz1=1)
        assert inside(wp, (-0.4, 10, 0.5))
        assert not inside(wp, (-0.6, 10, 0.5))

    def test_top_stump(self):
        wp = box(SIZE, oz2=1)
        assert bbox(wp) == pytest.approx((-1, -1, 0, 11, 21, 30), abs=1e-3)
        assert inside(wp, (-0.4, 10, 29.5))

    def test_side_face(self):
        wp = box(SIZE, ox2=1)
        assert bbox(wp) == pytest.approx((0, -1, -1, 10, 21, 31), abs=1e-3)

    def test_chamfer_follows_widened_face(self):
        wp = box(SIZE, oz1=1, cx1=0.5)
        # edge moved out to y = -1 on the widened bottom face
        assert not inside(wp, (5, -0.8, 0.1))
        assert inside(wp, (5, -0.3, 0.5))

    def test_edge_into_overhung_face_keeps_stump_whole(self):
        wp = box(SIZE, oz1=1, cz1=0.5)
        # no groove through the stump along the edge
        assert inside(wp, (0.1, 0.1, 0.05))
        assert inside(wp, (-0.3, 0.1, 0.05))
        # the widened face corner is bevelled instead
        assert not inside(wp, (-0.9, -0.9, 0.02))
        # above the stump the box edge is chamfered as usual
        assert not inside(wp, (0.1, 0.1, 15))
        assert inside(wp, (0.5, 0.5, 15))


class TestFlushAxes:

    def test_stump_does_not_widen_along_flush_axis(self):
        wp = box(SIZE, oz1=1, flush=("x",))
        assert bbox(wp) == pytest.approx((0, -1, 0, 10, 21, 30), abs=1e-3)
        assert inside(wp, (5, -0.4, 0.5))
        assert not inside(wp, (-0.1, 10, 0.02))

    def test_chamfer_corner_stays_on_flush_face(self):
        wp = box(SIZE, oz1=1, cx1=0.5, flush=("x",))
        assert not inside(wp, (5, -0.8, 0.1))
        assert inside(wp, (5, -0.3, 0.5))
