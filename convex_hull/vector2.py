import math
from typing import NamedTuple

from convex_hull.constants import EPSILON


class Vector2(NamedTuple):
    """2D point / vector. Being a tuple, it can go anywhere an (x, y) pair is expected."""
    x: float
    y: float

    def __add__(self, other):
        return add(self, other)

    def __sub__(self, other):
        return sub(self, other)

    def __mul__(self, k):
        return scale(self, k)

    __rmul__ = __mul__

    def norm(self):
        return norm(self)


def add(a, b):
    return Vector2(a[0] + b[0], a[1] + b[1])


def sub(a, b):
    return Vector2(a[0] - b[0], a[1] - b[1])


def scale(a, k):
    return Vector2(a[0] * k, a[1] * k)


def norm(a):
    return math.sqrt(a[0] * a[0] + a[1] * a[1])


def dot(a, b):
    return a[0] * b[0] + a[1] * b[1]


def cross(a, b):
    # z-component of the 3D cross product, positive when b is counter-clockwise of a
    return a[0] * b[1] - a[1] * b[0]


def approx_equal(a, b, eps=EPSILON):
    """Component-wise equality within eps. This is the only notion of vertex identity used."""
    return abs(a[0] - b[0]) < eps and abs(a[1] - b[1]) < eps
