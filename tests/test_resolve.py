"""Tests for chamfer/overhang override resolution."""
import pytest

from sleevelock.geometry.resolve import (
    EDGE_NAMES,
    FACE_NAMES,
    first_of,
    resolve_chamfers,
    resolve_overhangs,
)


class TestFirstOf:

    def test_returns_first_set_value(self):
        assert first_of(None, 2.0, 3.0) == 2.0

    def test_zero_counts_as_set(self):
        assert first_of(None, 0, 5.0) == 0

    def test_default_when_nothing_set(self):
        assert first_of(None, None) == 0.0
        assert first_of(default=1.5) == 1.5


class TestChamferTable:

    def test_twelve_edges(self):
        assert len(EDGE_NAMES) == 12
        assert set(resolve_chamfers()) == set(EDGE_NAMES)

    def test_all_zero_by_default(self):
        assert all(v == 0 for v in resolve_chamfers().values())

    def test_specific_edge_beats_global(self):
        table = resolve_chamfers(c=1, cx1=2)
        assert table["cx1"] == 2
        assert all(v == 1 for k, v in table.items() if k != "cx1")

    def test_axis_beats_global(self):
        table = resolve_chamfers(c=1, cy=3)
        for name, value in table.items():
            assert value == (3 if name.startswith("cy") else 1)

    def test_specific_beats_axis(self):
        table = resolve_chamfers(cz=3, cz4=0.5)
        assert table["cz4"] == 0.5
        assert table["cz1"] == table["cz2"] == table["cz3"] == 3
        assert table["cx1"] == 0

    def test_explicit_zero_overrides_global(self):
        table = resolve_chamfers(c=1, cx=0)
        assert table["cx2"] == 0
        assert table["cy2"] == 1

    def test_unknown_edge_rejected(self):
        with pytest.raises(TypeError, match="cx5"):
            resolve_chamfers(cx5=1)


class TestOverhangTable:

    def test_six_faces(self):
        assert len(FACE_NAMES) == 6
        assert set(resolve_overhangs()) == set(FACE_NAMES)

    def test_global_applies_everywhere(self):
        assert all(v == 0.4 for v in resolve_overhangs(o=0.4).values())

    def test_o1_o2_only_touch_z_faces(self):
        table = resolve_overhangs(o1=1, o2=2)
        assert table["oz1"] == 1
        assert table["oz2"] == 2
        assert table["ox1"] == table["oy2"] == 0

    def test_specific_face_beats_alias(self):
        table = resolve_overhangs(o=0.2, o1=1, oz1=3)
        assert table["oz1"] == 3
        assert table["oz2"] == 0.2

    def test_unknown_face_rejected(self):
        with pytest.raises(TypeError, match="oz3"):
            resolve_overhangs(oz3=1)
