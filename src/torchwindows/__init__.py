"""torchwindows: window functions for signal processing in PyTorch."""

from . import polynomial, registry, window_analysis, window_function
from ._exceptions import (
    ArityError,
    MissingCapabilityError,
    ParamRangeError,
    UnknownMetricError,
    UnknownWindowError,
    WindowError,
)
from ._window import Window
from .registry import list_windows, window

__all__ = [
    "ArityError",
    "MissingCapabilityError",
    "ParamRangeError",
    "UnknownMetricError",
    "UnknownWindowError",
    "Window",
    "WindowError",
    "list_windows",
    "polynomial",
    "registry",
    "window",
    "window_analysis",
    "window_function",
]

__version__ = "0.1.0"
