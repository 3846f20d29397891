# Geometry
EPSILON = 1e-9          # tolerance for vertex identity (loop closure, zero-length candidates)
POINT_NODES = 72        # angular subdivisions of a point ring
POINT_OUTER_RADIUS = 0.02
POINT_INNER_RADIUS = 0.015
SEGMENT_WIDTH = 0.01

# Sampling
SAMPLES = 20
SAMPLE_BOUND = 0.9      # points are drawn from [-SAMPLE_BOUND, SAMPLE_BOUND]^2

# Animation
ANIME_INTERVAL = 0.1    # seconds between solver steps
MAX_STEPS = 1000        # cap on advance() calls, degenerate sets may never close
WINDOW_SIZE = (900, 900)
DPI = 100
OUT_DIR = "out"

# Colors (RGBA)
BACKGROUND_COLOR = (0.07, 0.13, 0.17, 1.0)
SAMPLE_COLOR = (1.0, 1.0, 1.0, 1.0)
HULL_COLOR = (0.0, 1.0, 0.0, 1.0)
PROBE_COLOR = (1.0, 0.0, 1.0, 0.1)
