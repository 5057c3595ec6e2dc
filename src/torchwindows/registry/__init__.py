from ._capabilities import Capabilities
from ._window import DEFAULT_REGISTRY, list_windows, window
from ._window_definition import WindowDefinition
from ._window_definitions import WINDOW_DEFINITIONS
from ._window_registry import WindowRegistry

__all__ = [
    "Capabilities",
    "DEFAULT_REGISTRY",
    "WINDOW_DEFINITIONS",
    "WindowDefinition",
    "WindowRegistry",
    "list_windows",
    "window",
]
