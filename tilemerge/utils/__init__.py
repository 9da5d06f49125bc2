# -*- coding: utf-8 -*-
"""
Helpers for displaying boards and sessions as plain text.
"""

from .render import render_board, render_view

__all__ = ["render_board", "render_view"]
