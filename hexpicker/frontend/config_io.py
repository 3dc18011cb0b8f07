"""Load and save picker configuration as JSON.

A config file has two optional sections, ``hex_grid`` and ``color_bar``,
holding the attributes understood by ``HexGridParams.from_dict`` and
``ColorBarParams.from_dict``::

    {
      "hex_grid": {"radius": 4, "stroke_width": 2, "stroke_color": "#000"},
      "color_bar": {"thumb_size": 24, "colors": ["red", "#00ff00"]}
    }

Used by ``app.py`` for its ``--config`` option.
"""

import json
import logging

from ..engine.types import ColorBarParams, HexGridParams

logger = logging.getLogger(__name__)


def load_config(path):
    """Return ``(HexGridParams, ColorBarParams)`` read from a JSON file.

    Missing sections fall back to defaults. Invalid values raise
    ``ConfigurationError``; a malformed file raises ``ValueError``.
    """
    with open(path) as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config root must be an object: {path}")
    hex_params = HexGridParams.from_dict(data.get("hex_grid", {}))
    bar_params = ColorBarParams.from_dict(data.get("color_bar", {}))
    logger.info("Loaded picker config from %s", path)
    return hex_params, bar_params


def save_config(path, hex_params, bar_params):
    data = {
        "hex_grid": hex_params.to_dict(),
        "color_bar": bar_params.to_dict(),
    }
    with open(path, "w") as f:
        json.dump(data, f, indent=2)
