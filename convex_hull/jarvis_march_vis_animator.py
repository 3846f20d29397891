import argparse
import random
import sys
from pathlib import Path

import matplotlib
import matplotlib.pyplot as plt
import matplotlib.animation as animation
from matplotlib.collections import PolyCollection

from convex_hull import constants
from convex_hull.hull_builder import CLOSED, HullBuilder, hull_trace
from convex_hull.outline import point_outline, segment_outline, strip_triangles
from convex_hull.point_set import initialize_points


def hull_triangles(hull, centroid):
    """
    Splits the current hull into two triangle lists:
    accepted vertices and edges, and the probe (newest vertex, centroid, centroid -> newest vertex).
    """
    accepted = []
    probe = []
    if not hull:
        return accepted, probe

    for vertex in hull[:-1]:
        accepted.extend(strip_triangles(point_outline(vertex)))
    for i in range(1, len(hull)):
        accepted.extend(strip_triangles(segment_outline(hull[i], hull[i - 1])))

    probe.extend(strip_triangles(point_outline(hull[-1])))
    probe.extend(strip_triangles(point_outline(centroid)))
    probe.extend(strip_triangles(segment_outline(centroid, hull[-1])))
    return accepted, probe


class HullAnimation:
    """One visualization session: the builder, the figure and the frame export directory."""

    def __init__(self, point_set, out_dir=None, eps=constants.EPSILON):
        self.point_set = point_set
        self.builder = HullBuilder(point_set, eps=eps)
        self.out_dir = Path(out_dir) if out_dir else None
        self.saved = 0
        self.anim = None

        if self.out_dir is not None:
            self.out_dir.mkdir(parents=True, exist_ok=True)
            # only the previous run's numbered frames are overwritten
            for old_frame in self.out_dir.glob("*.png"):
                if old_frame.stem.isdigit():
                    old_frame.unlink()

        width, height = constants.WINDOW_SIZE
        self.fig = plt.figure(figsize=(width / constants.DPI, height / constants.DPI), dpi=constants.DPI)
        self.fig.patch.set_facecolor(constants.BACKGROUND_COLOR)
        self.ax = self.fig.add_axes([0, 0, 1, 1])
        self.ax.set_xlim(-1, 1)
        self.ax.set_ylim(-1, 1)
        self.ax.set_aspect('equal', adjustable='box')
        self.ax.set_facecolor(constants.BACKGROUND_COLOR)
        self.ax.set_axis_off()

        samples = []
        for pt in point_set.points:
            samples.extend(strip_triangles(point_outline(pt)))
        self.sample_collection = PolyCollection(samples, facecolors=constants.SAMPLE_COLOR, edgecolors='none')
        self.hull_collection = PolyCollection([], facecolors=constants.HULL_COLOR, edgecolors='none')
        self.probe_collection = PolyCollection([], facecolors=constants.PROBE_COLOR, edgecolors='none')
        for collection in (self.sample_collection, self.hull_collection, self.probe_collection):
            self.ax.add_collection(collection)

        # Text annotation for status
        self.status_text = self.ax.text(0.02, 0.98, "", transform=self.ax.transAxes, ha="left", va="top",
                                        fontsize=9, color=constants.SAMPLE_COLOR)

    def frames(self, max_steps=constants.MAX_STEPS):
        return hull_trace(self.point_set, max_steps=max_steps, builder=self.builder)

    def artists(self):
        return self.sample_collection, self.hull_collection, self.probe_collection, self.status_text

    def draw_hull(self, hull):
        accepted, probe = hull_triangles(hull, self.point_set.centroid)
        self.hull_collection.set_verts(accepted)
        self.probe_collection.set_verts(probe)

    def init_animation(self):
        # also called on resize, so redraw whatever the builder holds so far
        self.draw_hull(self.builder.vertices())
        return self.artists()

    def update_animation(self, frame_data):
        self.draw_hull(frame_data['hull_points'])
        self.status_text.set_text(frame_data['status'])
        # the closing frame repeats the last accepted step, nothing new to export
        if frame_data['final_hull_path'] is None:
            self.save_frame()
        return self.artists()

    def save_frame(self):
        self.saved += 1
        if self.out_dir is None:
            return None
        path = self.out_dir / f"{self.saved}.png"
        self.fig.savefig(path, dpi=constants.DPI, facecolor=self.fig.get_facecolor())
        print(path)
        return path

    def show(self, interval=constants.ANIME_INTERVAL, max_steps=constants.MAX_STEPS):
        self.anim = animation.FuncAnimation(self.fig,
                                            self.update_animation,
                                            frames=self.frames(max_steps),
                                            init_func=self.init_animation,
                                            blit=False,
                                            interval=interval * 1000,  # Milliseconds between frames
                                            repeat=False,
                                            cache_frame_data=False)
        plt.show()

    def run(self, max_steps=constants.MAX_STEPS):
        """Headless loop over the same frames the window would show."""
        self.init_animation()
        for frame_data in self.frames(max_steps):
            self.update_animation(frame_data)
        return self.builder.vertices()

    def close(self):
        plt.close(self.fig)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Step-by-step gift wrapping convex hull visualization")
    parser.add_argument("--samples", type=int, default=constants.SAMPLES, help="number of random points")
    parser.add_argument("--bound", type=float, default=constants.SAMPLE_BOUND, help="points are drawn from [-bound, bound]")
    parser.add_argument("--seed", type=int, default=None, help="seed for a reproducible point set")
    parser.add_argument("--out-dir", default=constants.OUT_DIR, help="where numbered frames are written, '' disables export")
    parser.add_argument("--interval", type=float, default=constants.ANIME_INTERVAL, help="seconds between steps")
    parser.add_argument("--max-steps", type=int, default=constants.MAX_STEPS)
    parser.add_argument("--no-show", action="store_true", help="run without a window")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    try:
        point_set = initialize_points(args.samples, args.bound, random.Random(args.seed))
    except ValueError as e:
        print(f"{e}. Exiting.")
        sys.exit(1)

    if args.no_show:
        matplotlib.use("Agg")

    session = HullAnimation(point_set, out_dir=args.out_dir or None)
    try:
        if args.no_show:
            hull = session.run(max_steps=args.max_steps)
        else:
            session.show(interval=args.interval, max_steps=args.max_steps)
            hull = session.builder.vertices()
    finally:
        session.close()

    if session.builder.state == CLOSED:
        print("\nFinal Convex Hull Points (in order):")
    else:
        print("\nHull Points (potentially incomplete, walk did not close):")
    for pt in hull:
        print(pt)
    return hull


if __name__ == '__main__':
    main()
