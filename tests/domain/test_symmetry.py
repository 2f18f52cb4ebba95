"""Tests for lattice_discovery.domain.symmetry."""

from __future__ import annotations

import pytest

from lattice_discovery.domain.symmetry import expand_octant, in_canonical_octant, reflect_point


class TestReflectPoint:
    def test_origin_is_its_own_orbit(self) -> None:
        assert reflect_point((0, 0)) == ((0, 0),)

    @pytest.mark.parametrize("point", [(1, 0), (7, 0), (1, 1), (12, 12)])
    def test_axis_points_have_four_images(self, point: tuple[int, int]) -> None:
        images = reflect_point(point)
        assert len(images) == 4
        assert len(set(images)) == 4
        assert images[0] == point

    @pytest.mark.parametrize("point", [(2, 1), (9, 4), (100, 99)])
    def test_interior_points_have_eight_images(self, point: tuple[int, int]) -> None:
        images = reflect_point(point)
        assert len(images) == 8
        assert len(set(images)) == 8

    def test_exact_axis_images(self) -> None:
        assert set(reflect_point((3, 0))) == {(3, 0), (-3, 0), (0, 3), (0, -3)}
        assert set(reflect_point((2, 2))) == {(2, 2), (-2, -2), (-2, 2), (2, -2)}

    @pytest.mark.parametrize("point", [(0, 0), (5, 0), (5, 5), (5, 2), (31, 17)])
    def test_images_use_the_same_magnitudes(self, point: tuple[int, int]) -> None:
        magnitudes = set(point)
        for ix, iy in reflect_point(point):
            assert {abs(ix), abs(iy)} == magnitudes

    @pytest.mark.parametrize("point", [(-1, 0), (1, 2), (0, 1), (3, -1)])
    def test_rejects_points_outside_octant(self, point: tuple[int, int]) -> None:
        with pytest.raises(ValueError, match="canonical octant"):
            reflect_point(point)


class TestExpandOctant:
    def test_originals_first_then_reflections(self) -> None:
        expanded = expand_octant([(1, 0), (2, 1)])
        assert expanded[:2] == ((1, 0), (2, 1))
        assert expanded[2:5] == ((-1, 0), (0, 1), (0, -1))
        assert len(expanded) == 2 + 3 + 7

    def test_empty_input(self) -> None:
        assert expand_octant([]) == ()

    def test_accepts_any_iterable(self) -> None:
        assert expand_octant(iter([(0, 0)])) == ((0, 0),)

    def test_rejects_points_outside_octant(self) -> None:
        with pytest.raises(ValueError):
            expand_octant([(1, 0), (0, 1)])


def test_in_canonical_octant() -> None:
    assert in_canonical_octant((0, 0))
    assert in_canonical_octant((4, 4))
    assert in_canonical_octant((4, 0))
    assert not in_canonical_octant((3, 4))
    assert not in_canonical_octant((4, -1))
