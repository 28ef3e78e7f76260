# -*- coding: utf-8 -*-
"""
Session configuration helpers.

The Matplotlib window lives in `game2048.utils.windows` and is imported explicitly by the
interactive script, so that the engine does not load a plotting backend.
"""

from .config import GameConfiguration

__all__ = ["GameConfiguration"]
