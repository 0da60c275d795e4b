"""
Trace sequences of complex numbers in the 2‑D plane with matplotlib.

>>> from xcomplex import Complex
>>> from xcomplex.plot import animate, orbit
>>> anim = animate(orbit(Complex(1, 0), Complex.cis(0.1), 60))
"""
import logging
from typing import Iterable, List, Tuple, Union

import matplotlib.animation as animation
import matplotlib.pyplot as plt
import numpy as np

from .number import Complex

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_MS = 200
MARGIN = 0.1                     # axes padding, fraction of the span
POINT_STYLE = "ro"
TRAIL_STYLE = "b-"

Point = Union[Complex, complex, Tuple[float, float]]


def as_complex(z: Point) -> Complex:
    """Convert a `Complex`, Python `complex`, real or (x, y) pair."""
    if isinstance(z, Complex):
        return z
    if isinstance(z, tuple):
        if len(z) != 2:
            raise TypeError(f"Expected an (x, y) pair, got {len(z)} items")
        return Complex(*z)
    if isinstance(z, (int, float, complex, np.number)):
        return Complex.from_builtin(z)
    raise TypeError(f"Cannot plot {type(z).__name__} as a complex number")


def orbit(start: Complex, step: Complex, count: int) -> List[Complex]:
    """``[start, start·step, start·step², …]`` with ``count`` items."""
    points = [start]
    for _ in range(1, count):
        points.append(points[-1] * step)
    return points


def _collect(sequence: Iterable[Point]) -> List[Complex]:
    seq = [as_complex(z) for z in sequence]
    if not seq:
        raise ValueError("Nothing to plot: the sequence is empty")
    return seq


def _fit_axes(ax, seq: List[Complex]) -> None:
    """Square box centred on the origin that fits every finite point."""
    parts = np.array([(z.re, z.im) for z in seq]).ravel()
    span = np.abs(parts[np.isfinite(parts)]).max(initial=1.0)
    margin = MARGIN * span

    ax.set_aspect("equal")
    ax.set_xlim(-span - margin, span + margin)
    ax.set_ylim(-span - margin, span + margin)
    ax.set_xlabel("Re")
    ax.set_ylabel("Im")
    ax.grid(True, linestyle="--", alpha=0.3)


def plot_path(sequence: Iterable[Point], ax=None):
    """Draw the whole sequence as a polyline; returns the Axes."""
    seq = _collect(sequence)
    if ax is None:
        _, ax = plt.subplots()
    _fit_axes(ax, seq)
    ax.plot([z.re for z in seq], [z.im for z in seq], TRAIL_STYLE, alpha=0.5, linewidth=1)
    ax.plot([seq[-1].re], [seq[-1].im], POINT_STYLE, markersize=6)
    ax.set_title("Complex path")
    return ax


class Trail:
    """Moving point plus the path it has covered so far."""

    def __init__(self, ax, seq: List[Complex]):
        self.ax = ax
        self.seq = seq
        self.point, = ax.plot([], [], POINT_STYLE, markersize=6)
        self.trail, = ax.plot([], [], TRAIL_STYLE, alpha=0.5, linewidth=1)
        self.history_x: List[float] = []
        self.history_y: List[float] = []

    def reset(self):
        self.history_x.clear()
        self.history_y.clear()
        self.point.set_data([], [])
        self.trail.set_data([], [])
        return self.point, self.trail

    def update(self, frame: int):
        z = self.seq[frame]
        self.history_x.append(z.re)
        self.history_y.append(z.im)

        self.point.set_data([z.re], [z.im])
        self.trail.set_data(self.history_x, self.history_y)
        self.ax.set_title(f"t = {frame}  |  z = {z.re:+.3f} {z.im:+.3f}i")
        return self.point, self.trail


def animate(
    sequence: Iterable[Point],
    *,
    interval: int = DEFAULT_INTERVAL_MS,
    show: bool = True,
) -> animation.FuncAnimation:
    """
    Animate a sequence of complex‑number samples in the 2‑D plane.

    Parameters
    ----------
    sequence : iterable of `Complex`, Python `complex`, or (x,y) tuples
    interval : delay between frames in **ms**
    show     : call ``plt.show()`` before returning

    Returns
    -------
    matplotlib.animation.FuncAnimation – keep a reference, or save() it.
    """
    seq = _collect(sequence)

    fig, ax = plt.subplots()
    _fit_axes(ax, seq)
    ax.set_title("Complex number animation")
    trail = Trail(ax, seq)

    logger.debug("Animating %d frames at %d ms", len(seq), interval)
    anim = animation.FuncAnimation(
        fig,
        trail.update,
        frames=len(seq),
        init_func=trail.reset,
        interval=interval,
        blit=True,
        repeat=False,
    )
    if show:
        plt.show()
    return anim


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    animate(orbit(Complex(1, 0), Complex.cis(np.pi / 180), 360), interval=1)
