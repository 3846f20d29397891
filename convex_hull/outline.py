"""
Turns points and segments into drawable outlines.

Outlines are laid out as triangle strips, four vertices per primitive:
(new outer, previous outer, new inner, previous inner) for a point ring and
(end -n, start +n, end +n, start -n) for a segment, n being the half-width normal.
"""
import math

from convex_hull.constants import EPSILON, POINT_INNER_RADIUS, POINT_NODES, POINT_OUTER_RADIUS, SEGMENT_WIDTH
from convex_hull.vector2 import Vector2, approx_equal, norm


def point_outline(center, outer_radius=POINT_OUTER_RADIUS, inner_radius=POINT_INNER_RADIUS,
                  subdivisions=POINT_NODES):
    """Annulus marker around `center`: 4 * subdivisions (x, y) pairs."""
    center = Vector2(*center)
    a = center + Vector2(outer_radius, 0.0)
    b = center + Vector2(inner_radius, 0.0)
    strip = []
    for j in range(1, subdivisions + 1):
        ang = 2 * math.pi * j / subdivisions
        direction = Vector2(math.cos(ang), math.sin(ang))
        c = center + direction * outer_radius
        d = center + direction * inner_radius
        strip.extend([c, a, d, b])
        a, b = c, d
    return strip


def segment_outline(p1, p2, width=SEGMENT_WIDTH, eps=EPSILON):
    """Thin rectangle of total width `width` around p1 -> p2. Empty for a zero-length segment."""
    p1, p2 = Vector2(*p1), Vector2(*p2)
    if approx_equal(p1, p2, eps):
        return []
    v = p2 - p1
    n = Vector2(-v.y, v.x)
    offset = n * (width / (2.0 * norm(n)))

    a = p1 + offset
    b = p1 - offset
    c = p2 - offset
    d = p2 + offset
    return [c, a, d, b]


def strip_triangles(strip):
    # each 4-vertex primitive (v0, v1, v2, v3) covers triangles (v0, v1, v2) and (v1, v2, v3)
    triangles = []
    for i in range(0, len(strip) - 3, 4):
        v0, v1, v2, v3 = strip[i:i + 4]
        triangles.append((v0, v1, v2))
        triangles.append((v1, v2, v3))
    return triangles
