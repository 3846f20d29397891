import random
from typing import NamedTuple, Tuple

from convex_hull.vector2 import Vector2


class PointSet(NamedTuple):
    """Fixed sample points plus their centroid. Read-only once built."""
    points: Tuple[Vector2, ...]
    centroid: Vector2


def initialize_points(count, bound, rng=None):
    """
    Draws `count` points uniformly from [-bound, bound] x [-bound, bound].
    rng: anything with a uniform(a, b) method, e.g. random.Random(seed) for a reproducible session.
    The centroid is accumulated as sum(p * (1/count)) while drawing, in draw order.
    """
    if count < 1:
        raise ValueError(f"Need at least one point to define a centroid, got count={count}")
    if bound < 0:
        raise ValueError(f"Sampling bound must be non-negative, got {bound}")
    rng = rng if rng is not None else random.Random()

    weight = 1.0 / count
    centroid = Vector2(0.0, 0.0)
    points = []
    for _ in range(count):
        pt = Vector2(rng.uniform(-bound, bound), rng.uniform(-bound, bound))
        centroid = centroid + pt * weight
        points.append(pt)
    return PointSet(tuple(points), centroid)


def from_points(points):
    """Builds a PointSet from given (x, y) pairs, keeping their order."""
    points = [Vector2(float(p[0]), float(p[1])) for p in points]
    if not points:
        raise ValueError("Point set is empty, centroid is undefined.")

    weight = 1.0 / len(points)
    centroid = Vector2(0.0, 0.0)
    for pt in points:
        centroid = centroid + pt * weight
    return PointSet(tuple(points), centroid)
