"""Structural properties of computed distance fields on irregular masks."""

import math

import numpy as np
import pytest

from sdfgen.field.engine import DistanceFieldEngine, compute_half_vectors
from sdfgen.raster.grid import make_mask

pytestmark = pytest.mark.unit


def _brute_force_distance(filled):
    """Distance from every cell to the nearest opposite-class cell."""
    height, width = filled.shape
    ys, xs = np.mgrid[0:height, 0:width]
    result = np.empty(filled.shape, dtype=np.float64)
    for y in range(height):
        for x in range(width):
            other = filled != filled[y, x]
            result[y, x] = np.hypot(xs[other] - x, ys[other] - y).min()
    return result


@pytest.fixture
def engine(internal_config):
    return DistanceFieldEngine(internal_config)


class TestSignAndMagnitude:

    def test_sign_follows_mask(self, engine, random_mask):
        field = engine.compute_sdf(random_mask)

        np.testing.assert_array_equal(field.values < 0, random_mask.values)
        assert np.all(field.values != 0)

    def test_never_closer_than_nearest_opposite_cell(self, engine, random_mask):
        """Every reported distance belongs to a real opposite-class cell."""
        field = engine.compute_sdf(random_mask)
        exact = _brute_force_distance(random_mask.values)

        assert np.all(np.abs(field.values) >= exact.astype(np.float32) * (1 - 1e-6))

    def test_unit_distance_next_to_boundary(self, engine, random_mask):
        """Cells with an edge neighbor of the other class sit at exactly 1."""
        filled = random_mask.values
        field = engine.compute_sdf(random_mask).values
        height, width = filled.shape

        for y in range(height):
            for x in range(width):
                edge_neighbors = [
                    filled[ny, nx]
                    for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1))
                    if 0 <= nx < width and 0 <= ny < height
                ]
                if any(n != filled[y, x] for n in edge_neighbors):
                    assert abs(field[y, x]) == 1.0

    def test_diagonal_only_contact_is_sqrt2(self, engine):
        values = np.zeros((4, 4), dtype=bool)
        values[:2, :2] = True
        field = engine.compute_sdf(make_mask(values)).values

        assert field[2, 2] == pytest.approx(math.sqrt(2), rel=1e-6)
        assert field[1, 1] == -1.0


class TestSymmetry:

    def test_complement_negates_field(self, engine, random_mask):
        """Swapping filled and empty flips every sign and keeps magnitudes."""
        field = engine.compute_sdf(random_mask).values
        inverted = engine.compute_sdf(make_mask(~random_mask.values)).values

        np.testing.assert_array_equal(inverted, -field)

    def test_complement_of_center_cell(self, engine, center_mask):
        inverted = engine.compute_sdf(make_mask(~center_mask.values)).values

        assert inverted[1, 1] == 1.0
        assert inverted[0, 1] == -1.0


class TestHalfVectorProperties:

    def test_half_vectors_are_even(self, random_mask):
        hv = compute_half_vectors(random_mask.values)

        assert np.all(hv % 2 == 0)

    def test_half_vectors_point_at_opposite_class(self, random_mask):
        """cell - hv/2 lands inside the grid on a cell of the other class."""
        filled = random_mask.values
        hv = compute_half_vectors(filled)
        height, width = filled.shape

        for y in range(height):
            for x in range(width):
                sx = x - hv[y, x, 0] // 2
                sy = y - hv[y, x, 1] // 2
                assert 0 <= sx < width and 0 <= sy < height
                assert filled[sy, sx] != filled[y, x]

    def test_distance_is_half_vector_length(self, engine, random_mask):
        hv = compute_half_vectors(random_mask.values)
        field = engine.compute_sdf(random_mask).values

        expected = (np.hypot(hv[..., 0], hv[..., 1]) / 2).astype(np.float32)
        np.testing.assert_array_equal(np.abs(field), expected)
