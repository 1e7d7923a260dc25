import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

pg = pytest.importorskip("pyqtgraph")
QtWidgets = pytest.importorskip("PyQt5.QtWidgets")

from plotnav.axis import Axis, add_default_interactions  # noqa: E402
from plotnav.backends.pyqtgraph_backend import InteractionViewBox, PgAxisBackend  # noqa: E402
from plotnav.core.geometry import Rect  # noqa: E402
from plotnav.interactions.events import MouseButton  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


@pytest.fixture
def plot(qapp, timers):
    widget, backend = PgAxisBackend.create_plot_widget()
    widget.resize(400, 300)
    widget.show()
    qapp.processEvents()
    axis = Axis(backend, limits=Rect((0, 0), (10, 10)), timer_factory=timers)
    yield widget, backend, axis
    backend.disconnect()
    widget.close()


def _range(backend):
    (x0, x1), (y0, y1) = backend.view_box.targetRange()
    return x0, x1, y0, y1


def test_plain_viewbox_is_rejected(qapp):
    with pytest.raises(TypeError):
        PgAxisBackend(pg.PlotItem())


def test_limits_are_applied_without_padding(plot):
    _, backend, axis = plot
    assert _range(backend) == pytest.approx((0.0, 10.0, 0.0, 10.0))

    axis.targetlimits.value = Rect((2, 3), (4, 5))
    assert _range(backend) == pytest.approx((2.0, 6.0, 3.0, 8.0))


def test_reversal_inverts_view(plot):
    _, backend, axis = plot
    axis.yreversed.value = True
    assert backend.view_box.yInverted()


def test_pixel_round_trip(plot):
    _, backend, _ = plot
    vb = backend.view_box
    center = (vb.width() / 2, vb.height() / 2)
    assert backend.pixel_to_data(center) == pytest.approx((5.0, 5.0), abs=1e-6)
    assert backend.pixel_to_data((0.0, 0.0)) == pytest.approx((0.0, 0.0), abs=1e-6)


def test_drag_zoom_adds_and_removes_overlay(plot):
    _, backend, axis = plot
    add_default_interactions(axis)
    vb = backend.view_box
    w, h = vb.width(), vb.height()

    backend.feed_press(MouseButton.left, (0.2 * w, 0.2 * h))
    backend.feed_move((0.6 * w, 0.6 * h))
    overlay = axis.interactions["rectanglezoom"].handler.plots
    items = list(overlay)
    assert len(items) == 2
    assert all(item.scene() is not None for item in items)

    backend.feed_release(MouseButton.left, (0.6 * w, 0.6 * h))

    assert _range(backend) == pytest.approx((2.0, 6.0, 2.0, 6.0), abs=1e-6)
    assert all(item.scene() is None for item in items)


def test_scroll_pins_axis_item_size(plot, timers):
    _, backend, axis = plot
    add_default_interactions(axis)
    bottom = backend._plot_item.getAxis("bottom")

    backend.feed_scroll(-1.0, (backend.view_box.width() / 2, backend.view_box.height() / 2))

    assert bottom.fixedHeight is not None
    assert _range(backend)[:2] == pytest.approx((0.5, 9.5), abs=1e-6)

    timers.fire_all()
    assert bottom.fixedHeight is None


def test_data_bounds_ignore_overlay_items(plot):
    widget, backend, _ = plot
    assert backend.data_bounds() is None

    widget.plot([0, 10], [0, 5])
    backend.add_drawable("wireframe", [(0, 0), (100, 100)])
    bounds = backend.data_bounds()
    # curves may pad their bounds by a pixel or so
    assert bounds.origin == pytest.approx((0.0, 0.0), abs=0.1)
    assert bounds.widths == pytest.approx((10.0, 5.0), abs=0.2)


def test_viewbox_without_backend_ignores_input(qapp):
    vb = InteractionViewBox()
    assert vb._backend is None
