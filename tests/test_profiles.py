"""Tests for the compound bar and slot profiles."""
import math

import pytest

cq = pytest.importorskip("cadquery")

from conftest import bbox, inside, volume  # noqa: E402
from sleevelock.geometry.profiles import bar, slot  # noqa: E402


class TestBar:

    def test_plain_bar(self):
        wp = bar(30, 5, 80)
        assert bbox(wp) == pytest.approx((-15, -2.5, 0, 15, 2.5, 80), abs=1e-3)
        assert volume(wp) == pytest.approx((25 * 5 + math.pi * 2.5 ** 2) * 80, rel=1e-6)
        assert len(wp.val().Solids()) == 1

    def test_chamfer_keeps_extent(self):
        wp = bar(30, 5, 80, c1=0.5, c2=0.5)
        assert bbox(wp) == pytest.approx((-15, -2.5, 0, 15, 2.5, 80), abs=1e-3)
        assert volume(wp) < (25 * 5 + math.pi * 2.5 ** 2) * 80

    def test_chamfer_on_flat_and_round_parts(self):
        wp = bar(30, 5, 80, c1=1)
        assert not inside(wp, (0, 2.3, 0.1))
        assert not inside(wp, (14.8, 0, 0.1))
        assert inside(wp, (0, 2.3, 40))

    def test_overhang_flares_both_ends(self):
        wp = bar(30, 5, 80, o1=1, o2=1)
        assert bbox(wp) == pytest.approx((-16, -3.5, 0, 16, 3.5, 80), abs=1e-3)
        assert inside(wp, (0, 3.3, 0.1))
        assert inside(wp, (0, -3.3, 79.9))
        assert not inside(wp, (0, 3.3, 40))

    def test_flare_stays_round_at_the_joins(self):
        wp = bar(30, 5, 80, o1=1)
        # side cylinder axis at x = 12.5, flared radius 3.5 at the face
        assert not inside(wp, (13.4, -3.4, 0.02))
        assert inside(wp, (12.0, -3.4, 0.02))

    def test_chamfered_flare_stays_round_at_the_joins(self):
        wp = bar(30, 5, 80, c1=0.5, o1=1)
        assert not inside(wp, (12.9, -3.45, 0.02))
        assert inside(wp, (0, -3.0, 0.3))

    def test_narrow_bar_is_a_cylinder(self):
        wp = bar(5, 5, 10)
        assert volume(wp) == pytest.approx(math.pi * 2.5 ** 2 * 10, rel=1e-6)


class TestSlot:

    def test_plain_slot(self):
        wp = slot(6, 2, 30, right=0, back=0)
        assert bbox(wp) == pytest.approx((-3, -3, 0, 3, 33, 2), abs=1e-3)
        assert volume(wp) == pytest.approx((6 * 30 + math.pi * 9) * 2, rel=1e-6)

    def test_diagonal_lock(self):
        wp = slot(6, 2, 30, diagonal=True, right=1, back=1)
        assert bbox(wp) == pytest.approx((-3, -3, 0, 9, 33, 2), abs=1e-3)
        assert inside(wp, (6, 24, 1))
        assert inside(wp, (3, 27, 1))

    def test_l_lock_without_notch(self):
        wp = slot(6, 2, 30, diagonal=False, right=1.2, back=1)
        assert bbox(wp)[3] == pytest.approx(7.2 + 3, abs=1e-3)
        assert not inside(wp, (7.2, 24.5, 1))

    def test_l_lock_with_notch(self):
        wp = slot(6, 2, 30, diagonal=False, right=1.3, back=1)
        assert bbox(wp)[3] == pytest.approx(7.8 + 3, abs=1e-3)
        assert inside(wp, (7.8, 24.5, 1))

    def test_left_extension(self):
        wp = slot(6, 2, 30, right=0, back=0, left=1)
        assert bbox(wp) == pytest.approx((-9, -3, 0, 3, 33, 2), abs=1e-3)
        assert inside(wp, (-6, 30, 1))
        assert not inside(wp, (-6, 26, 1))

    def test_stroke_flare_stays_round_at_the_caps(self):
        wp = slot(6, 2, 30, right=0, back=0, o=0.5)
        # cap at the channel start has flared radius 3.5
        assert not inside(wp, (3.4, -0.9, 0.02))
        assert inside(wp, (3.4, 0.5, 0.02))

    def test_rim_overhang(self):
        wp = slot(6, 2, 30, right=0, back=0, o=0.5)
        assert bbox(wp) == pytest.approx((-3.5, -3.5, 0, 3.5, 33.5, 2), abs=1e-3)
        assert inside(wp, (3.3, 15, 0.1))
        assert not inside(wp, (3.3, 15, 1))
