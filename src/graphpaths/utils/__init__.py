# -*- coding: utf-8 -*-
"""
Internal utilities (constants, config, formatting helpers).

This subpackage is intentionally not a user-facing API surface.
Import what you need from concrete modules, for example:

    from graphpaths.utils.constant import DEMO_EDGES
"""

from __future__ import annotations

from graphpaths.utils.config import GraphConfig

# No public re-exports on purpose
__all__: list[str] = ["GraphConfig"]
