"""Color picker layout engine: hex grid and color bar geometry, hit testing,
fallback palettes and gesture state. Nothing here imports a GUI toolkit."""

from .errors import ConfigurationError, DegenerateGeometryError
from .gestures import Action, PointerEvent
from .pickers import ColorBarPicker, HexGridPicker, HitStrategy
from .types import ColorBarParams, HexGridParams

__all__ = [
    "Action",
    "ColorBarParams",
    "ColorBarPicker",
    "ConfigurationError",
    "DegenerateGeometryError",
    "HexGridParams",
    "HexGridPicker",
    "HitStrategy",
    "PointerEvent",
]
