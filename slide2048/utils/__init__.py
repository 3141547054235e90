# -*- coding: utf-8 -*-
"""
This module provides the `WindowBoard` class for drawing a game grid in a Matplotlib window.
"""

from .windows import WindowBoard

__all__ = ["WindowBoard"]
