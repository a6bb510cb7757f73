"""
Output display for decoded words.

The wheel window shows the word in six separate character cells. WordDisplay
keeps those cells and can be registered directly as the notification target
of a SelectionState.
"""

from __future__ import annotations

from typing import Optional, TextIO

from core.word_table import WORD_LENGTH


class WordDisplay:
    """
    Six-cell word display.

    Attributes:
        cells: List of WORD_LENGTH single-character strings
        updates: Number of words shown so far
        stream: Optional stream each rendered word is written to
    """

    def __init__(self, stream: Optional[TextIO] = None):
        """
        Initialize a blank display.

        Args:
            stream: Stream to write each rendered word to (None keeps it silent)
        """
        self.cells = [" "] * WORD_LENGTH
        self.updates = 0
        self.stream = stream

    def __call__(self, word: str) -> None:
        """
        Show a word, one character per cell.

        Args:
            word: Word or placeholder of WORD_LENGTH characters

        Raises:
            ValueError: If word does not fit the cells
        """
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Expected {WORD_LENGTH} characters, got {word!r}")

        for i, char in enumerate(word):
            self.cells[i] = char
        self.updates += 1

        if self.stream is not None:
            self.stream.write(self.render() + "\n")
            self.stream.flush()

    @property
    def text(self) -> str:
        """Current word as a plain string."""
        return "".join(self.cells)

    def is_blank(self) -> bool:
        return all(c == " " for c in self.cells)

    def render(self) -> str:
        """
        Render the cells as a boxed row.

        Returns:
            String like "[B][E][W][A][R][E]"
        """
        return "".join(f"[{c}]" for c in self.cells)
