"""
Views for presenting the decoder wheel.

This module provides the six-cell word display and the icon resources of
the glyph and spiral buttons.
"""

from views.word_view import WordDisplay
from views.icon_view import icon_name, all_icon_names, glyph_grid

__all__ = ["WordDisplay", "icon_name", "all_icon_names", "glyph_grid"]
