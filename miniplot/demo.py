"""
Example chart: three joint angles and their derivatives against time, plus a short vector.
"""

import logging

import numpy as np

from miniplot import colors
from miniplot.plot import MiniPlot

logger = logging.getLogger(__name__)


def build_demo(n: int = 1000, dt: float = 0.01) -> MiniPlot:
    """Build the joint-angle chart (3 sine rows, 3 dashed cosine rows, one pointed vector)."""
    time = np.arange(n) * dt
    rows = np.arange(3)[:, None]
    theta = np.sin(time[None, :] + rows)
    theta_d = np.cos(time[None, :] + rows)
    line = np.array([1.0, 2.0, 3.0, 4.0, 5.0, 6.0])

    return (
        MiniPlot("Joint Angles")
        .xlabel("Time")
        .ylabel("Angle [rad]")
        .matrix_rows(time, theta)
        .pointed()
        .matrix_rows(time, theta_d)
        .color(colors.RED)
        .dashed()
        .plot(line)
        .name("Line")
        .pointed()
        .legend()
    )


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    chart = build_demo()
    logger.info("Showing %r with %d lines", chart.title, len(chart))
    chart.show()


if __name__ == "__main__":
    main()
