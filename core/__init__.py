"""
Core logic of the decoder wheel.

This module provides the word tables, the decoding arithmetic and the
selection state that drives a wheel display.
"""

from core.word_table import Game, Alphabet, WordTable, WordTableError, DEFAULT_TABLE
from core.decoder import decode, decode_batch, decode_grid, word_index, TranslateNotSupportedError
from core.selection import Selection, SelectionState, PLACEHOLDER

__all__ = [
    "Game",
    "Alphabet",
    "WordTable",
    "WordTableError",
    "DEFAULT_TABLE",
    "decode",
    "decode_batch",
    "decode_grid",
    "word_index",
    "TranslateNotSupportedError",
    "Selection",
    "SelectionState",
    "PLACEHOLDER",
]
