"""
Selection state behind a decoder wheel window.

Tracks the game, both glyphs and the spiral the user picked last, and
pushes the decoded word to a single display target after every change.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Optional
import logging
import threading

from core.decoder import decode, check_glyph, check_spiral
from core.word_table import (
    DEFAULT_TABLE,
    WORD_LENGTH,
    Alphabet,
    WordTable,
    check_game,
)

logger = logging.getLogger(__name__)

# Shown while the selection is incomplete
PLACEHOLDER = " " * WORD_LENGTH


@dataclass(frozen=True)
class Selection:
    """
    Last choices made on the wheel. None means not chosen yet.

    Attributes:
        game: Game index
        espuar: Espuar glyph
        dethek: Dethek glyph
        spiral: Spiral
    """
    game: Optional[int] = None
    espuar: Optional[int] = None
    dethek: Optional[int] = None
    spiral: Optional[int] = None

    def is_complete(self) -> bool:
        return None not in (self.game, self.espuar, self.dethek, self.spiral)


def _log_word(word: str) -> None:
    logger.info("Word: %s", word)


class SelectionState:
    """
    Holds one Selection and notifies a display target of the decoded word.

    Every mutator updates the selection, decodes it and calls the target
    while holding one lock, so the target never sees a word decoded from a
    partially updated selection.
    """

    def __init__(
        self,
        table: WordTable = DEFAULT_TABLE,
        target: Optional[Callable[[str], None]] = None
    ):
        """
        Initialize with nothing selected.

        Args:
            table: Word table to decode with
            target: Initial display target (defaults to logging the word)
        """
        self.table = table
        self.selection = Selection()
        self._target = target if target is not None else _log_word
        self._lock = threading.RLock()

    def choose_game(self, index: int) -> None:
        """Select the game (0..2)."""
        check_game(index)
        self._update(game=int(index))

    def choose_symbol(self, alphabet: int, index: int) -> None:
        """
        Select a glyph on one of the two rings.

        Args:
            alphabet: Alphabet.ESPUAR or Alphabet.DETHEK
            index: Glyph (0..34)
        """
        alphabet = Alphabet(alphabet)
        check_glyph(alphabet.display_name, index)
        if alphabet == Alphabet.ESPUAR:
            self._update(espuar=int(index))
        else:
            self._update(dethek=int(index))

    def choose_spiral(self, index: int) -> None:
        """Select the spiral (0..2)."""
        check_spiral(index)
        self._update(spiral=int(index))

    def set_notification_target(self, callback: Callable[[str], None]) -> None:
        """
        Replace the display target and show the current word on it.

        Args:
            callback: Called with the decoded word, or PLACEHOLDER
        """
        with self._lock:
            self._target = callback
            self._notify()

    def current_word(self) -> str:
        """Get the decoded word, or PLACEHOLDER while the selection is incomplete."""
        with self._lock:
            word = decode(
                self.selection.game,
                self.selection.espuar,
                self.selection.dethek,
                self.selection.spiral,
                table=self.table
            )
            return word if word is not None else PLACEHOLDER

    def _update(self, **changes) -> None:
        with self._lock:
            self.selection = replace(self.selection, **changes)
            logger.debug("Selection changed: %s", self.selection)
            self._notify()

    def _notify(self) -> None:
        self._target(self.current_word())
