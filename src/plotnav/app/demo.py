# PlotNav
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Demo window: a sample trace with the default interactions attached.

Left-drag selects a zoom rectangle (hold x / y to restrict it), the wheel zooms
at the cursor, right-drag pans and ctrl+click resets the limits.
"""

from __future__ import annotations

import argparse
import logging
import sys

import numpy as np

from plotnav.app.settings import InteractionSettings
from plotnav.axis import Axis, add_default_interactions
from plotnav.core.logging_config import setup_logging

log = logging.getLogger(__name__)


def _sample_data(n: int = 2000) -> tuple[np.ndarray, np.ndarray]:
    t = np.linspace(0.0, 20.0, n)
    y = np.sin(t) * np.exp(-t / 15.0) + 0.05 * np.random.default_rng(0).standard_normal(n)
    return t, y


def _build_pyqtgraph(settings: InteractionSettings):
    from plotnav.backends.pyqtgraph_backend import PgAxisBackend

    widget, backend = PgAxisBackend.create_plot_widget(title="PlotNav (pyqtgraph)")
    t, y = _sample_data()
    widget.plot(t, y, pen="c")
    axis = Axis(backend, settings=settings)
    return widget, axis


def _build_matplotlib(settings: InteractionSettings):
    from matplotlib.backends.backend_qt5agg import FigureCanvasQTAgg
    from matplotlib.figure import Figure
    from PyQt5.QtCore import Qt

    from plotnav.backends.mpl_backend import MplAxisBackend

    figure = Figure(figsize=(8, 5), layout="constrained")
    canvas = FigureCanvasQTAgg(figure)
    canvas.setFocusPolicy(Qt.StrongFocus)
    ax = figure.add_subplot(111)
    t, y = _sample_data()
    ax.plot(t, y, color="tab:blue")
    ax.set_title("PlotNav (matplotlib)")
    axis = Axis(MplAxisBackend(ax), settings=settings)
    return canvas, axis


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser("plotnav-demo")
    parser.add_argument("--backend", choices=("pyqtgraph", "matplotlib"), default="pyqtgraph")
    parser.add_argument("--scroll-speed", type=float, default=0.1)
    parser.add_argument("--reset-delay", type=float, default=0.2)
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        setup_logging(console_level=getattr(logging, args.log_level))
    except OSError as e:
        logging.basicConfig(level=logging.INFO)
        log.error(f"Failed to setup logging: {e}", exc_info=True)

    from PyQt5.QtWidgets import QApplication

    app = QApplication.instance() or QApplication(sys.argv[:1])
    settings = InteractionSettings(scroll_speed=args.scroll_speed, reset_delay=args.reset_delay)
    builder = _build_pyqtgraph if args.backend == "pyqtgraph" else _build_matplotlib
    widget, axis = builder(settings)
    add_default_interactions(axis)
    axis.autolimits()
    log.info("Interactions: %s", ", ".join(axis.interactions))

    widget.resize(900, 600)
    widget.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
