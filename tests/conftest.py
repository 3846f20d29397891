import matplotlib

matplotlib.use("Agg")

import pytest

from convex_hull.point_set import from_points


@pytest.fixture
def triangle():
    return from_points([(0, 0), (1, 0), (0, 1)])


@pytest.fixture
def interior_seed():
    """First point lies inside the hull, below the centroid."""
    return from_points([(1, 0.5), (0, 0), (2, 0), (1, 2)])
