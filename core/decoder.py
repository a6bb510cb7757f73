"""
Decoding of wheel settings into words.

Turning the inner disk until a Dethek glyph sits under an Espuar glyph
exposes one word along each of the three spirals. The word index depends
only on the sum of both glyph positions and the spiral, so the same
setting selects the same index on every game's wheel.
"""

from __future__ import annotations

from typing import Optional
import logging

import numpy as np
import torch

from core.word_table import (
    DEFAULT_TABLE,
    NUM_GLYPHS,
    NUM_SPIRALS,
    TRANSLATE,
    WORDS_PER_GAME,
    WordTable,
    check_game,
)

logger = logging.getLogger(__name__)

# Alignment of the two printed disks
INDEX_OFFSET = 2
SPIRAL_STRIDE = WORDS_PER_GAME // NUM_SPIRALS


class TranslateNotSupportedError(ValueError):
    """Raised when the "Translate from ..." position is used to look up a word."""


def word_index(espuar: int, dethek: int, spiral: int) -> int:
    """
    Compute the wheel position read for a setting.

    Uses floor modulo, so the result stays in [0, 36) even for the
    translate position (-1).

    Args:
        espuar: Espuar glyph (-1..34)
        dethek: Dethek glyph (-1..34)
        spiral: Spiral (0..2)

    Returns:
        Word index (0..35)
    """
    return (INDEX_OFFSET + espuar + dethek + spiral * SPIRAL_STRIDE) % WORDS_PER_GAME


def check_glyph(name: str, glyph: int) -> None:
    if glyph == TRANSLATE:
        raise TranslateNotSupportedError(
            f"{name} glyph {glyph} is the translate position and has no word"
        )
    if not 0 <= glyph < NUM_GLYPHS:
        raise ValueError(f"{name} glyph {glyph} out of range [0, {NUM_GLYPHS})")


def check_spiral(spiral: int) -> None:
    if not 0 <= spiral < NUM_SPIRALS:
        raise ValueError(f"Spiral {spiral} out of range [0, {NUM_SPIRALS})")


def decode(
    game: Optional[int],
    espuar: Optional[int],
    dethek: Optional[int],
    spiral: Optional[int],
    table: WordTable = DEFAULT_TABLE
) -> Optional[str]:
    """
    Read the word for a complete wheel setting.

    Args:
        game: Game index (0..2) or None
        espuar: Espuar glyph (0..34) or None
        dethek: Dethek glyph (0..34) or None
        spiral: Spiral (0..2) or None
        table: Word table to read from

    Returns:
        Six-character word, or None if any argument is None

    Raises:
        TranslateNotSupportedError: If a glyph is the translate position
        ValueError: If an argument is out of range
    """
    if game is None or espuar is None or dethek is None or spiral is None:
        return None

    game = check_game(game)
    check_glyph("Espuar", espuar)
    check_glyph("Dethek", dethek)
    check_spiral(spiral)

    return table.get_word(game, word_index(espuar, dethek, spiral))


def word_index_batch(
    espuar: torch.Tensor,
    dethek: torch.Tensor,
    spirals: torch.Tensor
) -> torch.Tensor:
    """
    Vectorized word_index.

    torch.remainder follows the sign of the divisor, matching Python's %.

    Args:
        espuar: [B] Espuar glyphs
        dethek: [B] Dethek glyphs
        spirals: [B] spirals

    Returns:
        [B] int64 tensor of word indices
    """
    total = INDEX_OFFSET + espuar.long() + dethek.long() + spirals.long() * SPIRAL_STRIDE
    return torch.remainder(total, WORDS_PER_GAME)


def decode_batch(
    games: torch.Tensor,
    espuar: torch.Tensor,
    dethek: torch.Tensor,
    spirals: torch.Tensor,
    table: WordTable = DEFAULT_TABLE,
    device: Optional[torch.device | str] = None
) -> list[str]:
    """
    Decode B wheel settings at once.

    Args:
        games: [B] game indices
        espuar: [B] Espuar glyphs
        dethek: [B] Dethek glyphs
        spirals: [B] spirals
        table: Word table to read from
        device: Device to compute on

    Returns:
        List of B words

    Raises:
        ValueError: If shapes differ or any value is out of range
    """
    if device is None:
        from utils.device import get_device
        device = get_device()
    device = torch.device(device) if isinstance(device, str) else device

    games = torch.as_tensor(games, device=device).long().reshape(-1)
    espuar = torch.as_tensor(espuar, device=device).long().reshape(-1)
    dethek = torch.as_tensor(dethek, device=device).long().reshape(-1)
    spirals = torch.as_tensor(spirals, device=device).long().reshape(-1)

    batch_size = games.shape[0]
    for name, values in (("espuar", espuar), ("dethek", dethek), ("spirals", spirals)):
        if values.shape[0] != batch_size:
            raise ValueError(
                f"Expected {name} of length {batch_size}, got shape {tuple(values.shape)}"
            )

    if torch.any((games < 0) | (games >= table.num_games)):
        raise ValueError(f"Game indices must be in [0, {table.num_games})")
    if torch.any(espuar == TRANSLATE) or torch.any(dethek == TRANSLATE):
        raise TranslateNotSupportedError("Translate position has no word")
    if torch.any((espuar < 0) | (espuar >= NUM_GLYPHS)) or torch.any((dethek < 0) | (dethek >= NUM_GLYPHS)):
        raise ValueError(f"Glyphs must be in [0, {NUM_GLYPHS})")
    if torch.any((spirals < 0) | (spirals >= NUM_SPIRALS)):
        raise ValueError(f"Spirals must be in [0, {NUM_SPIRALS})")

    indices = word_index_batch(espuar, dethek, spirals)
    chars = table.as_tensor(device)[games, indices]  # [B, WORD_LENGTH]

    from utils.device import to_numpy
    return [row.tobytes().decode("ascii") for row in to_numpy(chars)]


def decode_grid(
    game: int,
    spiral: int,
    table: WordTable = DEFAULT_TABLE,
    device: Optional[torch.device | str] = None
) -> np.ndarray:
    """
    Build the reading chart of one spiral.

    Args:
        game: Game index
        spiral: Spiral (0..2)
        table: Word table to read from
        device: Device to compute on

    Returns:
        [NUM_GLYPHS, NUM_GLYPHS] array of words, rows indexed by Espuar glyph
        and columns by Dethek glyph
    """
    game = check_game(game)
    check_spiral(spiral)

    if device is None:
        from utils.device import get_device
        device = get_device()

    glyphs = torch.arange(NUM_GLYPHS, device=device)
    espuar, dethek = torch.meshgrid(glyphs, glyphs, indexing="ij")
    spirals = torch.full_like(espuar, spiral)

    from utils.device import to_numpy
    indices = to_numpy(word_index_batch(espuar, dethek, spirals))
    words = np.asarray(table.get_words(game))
    logger.debug("Built %s chart for spiral %d", game.display_name, spiral)
    return words[indices]
