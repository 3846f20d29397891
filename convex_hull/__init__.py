from convex_hull.vector2 import Vector2, add, approx_equal, norm, scale, sub
from convex_hull.point_set import PointSet, from_points, initialize_points
from convex_hull.hull_builder import CLOSED, EMPTY, GROWING, HullBuilder, hull_trace, turn_angle
from convex_hull.outline import point_outline, segment_outline, strip_triangles
