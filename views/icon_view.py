"""
Icon resources for glyph and spiral buttons.

Icons are looked up by resource name: "poolradwheel/<ring>/<nn>.png", where
ring 0 holds the Espuar glyphs, ring 1 the Dethek glyphs and ring 2 the
spiral markers. Glyph files are numbered from 01 because position 00 on
each ring is the translate position.
"""

from __future__ import annotations

from typing import Optional

from core.decoder import check_glyph, check_spiral
from core.word_table import NUM_GLYPHS, NUM_SPIRALS, Alphabet

ICON_PACKAGE = "poolradwheel"
SPIRAL_RING = 2

# Button panel layout for one alphabet
GLYPH_ROWS = 7
GLYPH_COLS = 5


def _format_icon_name(ring: int, number: int) -> str:
    return f"{ICON_PACKAGE}/{ring}/{number:02d}.png"


def icon_name(first: int, glyph: Optional[int] = None) -> str:
    """
    Get the resource name of a spiral or glyph icon.

    Called with one argument, first is a spiral. Called with two, first is
    an Alphabet and glyph a glyph of it.

    Args:
        first: Spiral (0..2), or Alphabet when glyph is given
        glyph: Glyph (0..34)

    Returns:
        Resource name, e.g. "poolradwheel/0/01.png"

    Raises:
        ValueError: If an argument is out of range
    """
    if glyph is None:
        check_spiral(first)
        return _format_icon_name(SPIRAL_RING, first)

    alphabet = Alphabet(first)
    check_glyph(alphabet.display_name, glyph)
    return _format_icon_name(int(alphabet), glyph + 1)


def all_icon_names() -> list[str]:
    """List every icon resource: spirals first, then Espuar and Dethek glyphs."""
    names = [icon_name(s) for s in range(NUM_SPIRALS)]
    for alphabet in Alphabet:
        names.extend(icon_name(alphabet, g) for g in range(NUM_GLYPHS))
    return names


def glyph_grid(rows: int = GLYPH_ROWS, cols: int = GLYPH_COLS) -> list[list[int]]:
    """
    Lay the glyphs of one alphabet out as a button panel.

    Args:
        rows: Number of rows
        cols: Number of columns

    Returns:
        rows lists of cols glyph numbers, filled row by row

    Raises:
        ValueError: If rows * cols is not NUM_GLYPHS
    """
    if rows * cols != NUM_GLYPHS:
        raise ValueError(f"Grid {rows}x{cols} does not hold {NUM_GLYPHS} glyphs")
    return [list(range(r * cols, (r + 1) * cols)) for r in range(rows)]
