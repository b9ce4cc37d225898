from __future__ import annotations

"""
Global Domain Constants.

Centralizes the rendering defaults and configuration schema identifiers
shared by the model, service and interface layers.
"""

from typing import Tuple

# -----------------------------------------------------------------------------
# RENDERING DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_START_DEPTH: int = 1
DEFAULT_STEP: int = 2
DEFAULT_INDENT_MARKER: str = "-"

STYLE_INDENT: str = "indent"
STYLE_ASCII: str = "ascii"
STYLE_JSON: str = "json"
RENDER_STYLES: Tuple[str, ...] = (STYLE_INDENT, STYLE_ASCII, STYLE_JSON)

# -----------------------------------------------------------------------------
# NODE SERIALIZATION KEYS
# -----------------------------------------------------------------------------

NODE_TYPE_LEAF: str = "leaf"
NODE_TYPE_COMPOSITE: str = "composite"

# -----------------------------------------------------------------------------
# CONFIGURATION SCHEMA
# -----------------------------------------------------------------------------

CURRENT_CONFIG_VERSION: str = "1.0.0"
CONFIG_FILE_NAME: str = "config.json"
