import math

from convex_hull.constants import EPSILON, MAX_STEPS
from convex_hull.vector2 import Vector2, approx_equal, cross, dot

EMPTY = 'empty'
GROWING = 'growing'
CLOSED = 'closed'


def turn_angle(v1, v2):
    """
    Signed angle from v1 to v2 in degrees, counter-clockwise positive.
    Negative angles are folded as 180 - angle (not mirrored), so every clockwise
    turn ranks behind every counter-clockwise one.
    """
    ang = math.degrees(math.atan2(cross(v1, v2), dot(v1, v2)))
    if ang < 0:
        ang = 180.0 - ang
    return ang


class HullBuilder:
    """
    Gift-wrapping walk that accepts at most one hull vertex per advance() call.

    The walk pivots on the bearing centroid -> last vertex and always turns toward the
    candidate with the smallest angle. Revisiting an earlier vertex either closes the
    loop (revisit of the first vertex) or discards the wind-up prefix in front of it.
    """

    def __init__(self, point_set, eps=EPSILON, vertices=None):
        # vertices: resume from a previously captured vertices() snapshot
        self.point_set = point_set
        self.eps = eps
        self._hull = [Vector2(*v) for v in vertices] if vertices else []
        self._closed = False
        self._steps = 0
        self._last_angle = None

    @property
    def state(self):
        if self._closed:
            return CLOSED
        return GROWING if self._hull else EMPTY

    @property
    def steps(self):
        return self._steps

    @property
    def last_angle(self):
        return self._last_angle

    def vertices(self):
        return tuple(self._hull)

    def advance(self):
        """Runs one construction step. Returns False once the hull is closed."""
        if self._closed:
            return False

        hull = self._hull
        if len(hull) > 1:
            newest = hull[-1]
            for idx in range(len(hull) - 1):
                if approx_equal(newest, hull[idx], self.eps):
                    if idx == 0:
                        self._closed = True
                        return False
                    del hull[:idx + 1]
                    break

        if not hull:
            hull.append(self.point_set.points[0])
        else:
            self._extend()

        self._steps += 1
        return True

    def _extend(self):
        hull = self._hull
        last = hull[-1]
        v1 = last - self.point_set.centroid

        closest = 0
        min_ang = 360.0
        for idx, pt in enumerate(self.point_set.points):
            if approx_equal(pt, last, self.eps):  # zero-length candidate
                continue
            ang = turn_angle(v1, pt - last)
            if ang < min_ang:
                min_ang = ang
                closest = idx

        self._last_angle = min_ang
        winner = self.point_set.points[closest]
        # a lone seed is swapped for a better starting vertex instead of being extended
        if len(hull) == 1 and min_ang < 90:
            hull[0] = winner
        else:
            hull.append(winner)


def hull_trace(point_set, max_steps=MAX_STEPS, eps=EPSILON, builder=None):
    """
    Runs a HullBuilder to completion and yields one state dict per step for animation.
    Stops after max_steps advances if the walk never closes.
    builder: drive an existing session instead of a fresh one, its state is read back by the caller.
    """
    builder = builder if builder is not None else HullBuilder(point_set, eps=eps)
    points = list(point_set.points)

    for _ in range(max_steps):
        if not builder.advance():
            hull = list(builder.vertices())
            yield {
                'all_points': points,
                'hull_points': hull,
                'centroid': point_set.centroid,
                'current_pivot': hull[-1],
                'step': builder.steps,
                'status': f"Hull complete! Found {len(hull) - 1} points.",
                # closing vertex already repeats the first one
                'final_hull_path': hull,
            }
            return

        hull = list(builder.vertices())
        if builder.last_angle is None:
            status = f"Seeded hull with {hull[-1]}"
        else:
            status = f"Step {builder.steps}: accepted {hull[-1]} (turn {builder.last_angle:.2f} deg)"
        yield {
            'all_points': points,
            'hull_points': hull,
            'centroid': point_set.centroid,
            'current_pivot': hull[-1],
            'step': builder.steps,
            'status': status,
            'final_hull_path': None,
        }
