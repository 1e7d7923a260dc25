"""Host adapters that connect an Axis to a plotting toolkit."""

from importlib import import_module

from plotnav.backends.abstract_backend import AxisBackend
from plotnav.backends.headless import HeadlessBackend
from plotnav.backends.mouse_state import KeyTracker, MouseStateMachine

_LAZY_EXPORTS = {
    "MplAxisBackend": ("plotnav.backends.mpl_backend", "MplAxisBackend"),
    "PgAxisBackend": ("plotnav.backends.pyqtgraph_backend", "PgAxisBackend"),
    "InteractionViewBox": ("plotnav.backends.pyqtgraph_backend", "InteractionViewBox"),
}


def __getattr__(name: str):
    if name in _LAZY_EXPORTS:
        module_name, attr = _LAZY_EXPORTS[name]
        value = getattr(import_module(module_name), attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module 'plotnav.backends' has no attribute {name!r}")


__all__ = [
    "AxisBackend",
    "HeadlessBackend",
    "InteractionViewBox",
    "KeyTracker",
    "MouseStateMachine",
    "MplAxisBackend",
    "PgAxisBackend",
]
