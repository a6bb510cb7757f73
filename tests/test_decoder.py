"""
Tests for core.decoder module.
"""

import itertools

import numpy as np
import torch
import pytest

from core.decoder import (
    TranslateNotSupportedError,
    decode,
    decode_batch,
    decode_grid,
    word_index,
    word_index_batch,
)
from core.word_table import DEFAULT_TABLE, NUM_GLYPHS, NUM_SPIRALS, TRANSLATE, Game


DEVICE = torch.device("cpu")


def test_known_words_pool_of_radiance():
    """Test the formula against the printed Pool of Radiance wheel."""
    assert decode(0, 0, 0, 0) == "BEWARE"    # (2 + 0 + 0 + 0) mod 36 = 2
    assert decode(0, 0, 0, 1) == "NOTNOW"    # (2 + 0 + 0 + 12) mod 36 = 14
    assert decode(0, 0, 0, 2) == "ZOMBIE"    # (2 + 0 + 0 + 24) mod 36 = 26
    assert decode(0, 34, 34, 0) == "8OASIS"  # 70 mod 36 = 34
    assert decode(0, 33, 0, 0) == "9TROUT"   # 35
    assert decode(0, 34, 0, 0) == "0SOMAS"   # 36 mod 36 = 0


def test_known_words_other_games():
    """Test a few settings on the other two wheels."""
    assert decode(Game.CURSE_OF_THE_AZURE_BONDS, 0, 0, 0) == "BEHOLD"
    assert decode(Game.CURSE_OF_THE_AZURE_BONDS, 10, 21, 0) == "7AZURE"
    assert decode(Game.HILLSFAR, 3, 3, 0) == "HAGGLE"
    assert decode(Game.HILLSFAR, 5, 5, 1) == "XRSEHK"


def test_word_index_formula():
    """Test word_index arithmetic and wrap-around."""
    assert word_index(0, 0, 0) == 2
    assert word_index(0, 0, 1) == 14
    assert word_index(0, 0, 2) == 26
    assert word_index(34, 34, 2) == (2 + 68 + 24) % 36
    assert word_index(17, 17, 0) == 0


def test_word_index_translate_position_is_non_negative():
    """Floor modulo keeps the translate position in range."""
    assert word_index(TRANSLATE, TRANSLATE, 0) == 0
    assert word_index(TRANSLATE, 0, 0) == 1
    assert word_index(TRANSLATE, 34, 2) == 23

    # torch.remainder agrees with Python on negative sums
    negative = word_index_batch(torch.tensor([-5]), torch.tensor([-1]), torch.tensor([0]))
    assert negative.tolist() == [(2 - 6) % 36] == [32]


def test_totality_over_complete_input():
    """Every complete setting yields a word of that game's wheel."""
    for game in Game:
        words = set(DEFAULT_TABLE.get_words(game))
        for espuar, dethek, spiral in itertools.product(
            range(NUM_GLYPHS), range(NUM_GLYPHS), range(NUM_SPIRALS)
        ):
            assert decode(game, espuar, dethek, spiral) in words


def test_incomplete_input_returns_none():
    """Every selection missing one or more choices gives no word."""
    complete = (0, 5, 7, 1)
    checked = 0
    for n_missing in range(1, 5):
        for missing in itertools.combinations(range(4), n_missing):
            args = list(complete)
            for position in missing:
                args[position] = None
            assert decode(*args) is None
            checked += 1

    assert checked == 15


def test_cross_game_index_consistency():
    """The same setting selects the same index on every wheel."""
    for espuar, dethek, spiral in itertools.product(range(0, NUM_GLYPHS, 3), range(0, NUM_GLYPHS, 4), range(NUM_SPIRALS)):
        indices = {
            DEFAULT_TABLE.get_index(game, decode(game, espuar, dethek, spiral))
            for game in Game
        }
        assert indices == {word_index(espuar, dethek, spiral)}

        # Pool of Radiance and Curse of the Azure Bonds share no words
        assert decode(0, espuar, dethek, spiral) != decode(1, espuar, dethek, spiral)


def test_shared_words_between_wheels():
    """Pool of Radiance and Hillsfar print some of the same words."""
    # Index 4 is DRAGON on both wheels
    assert decode(0, 1, 1, 0) == decode(2, 1, 1, 0) == "DRAGON"


def test_translate_position_rejected():
    """Test that decode refuses the translate position."""
    with pytest.raises(TranslateNotSupportedError):
        decode(0, TRANSLATE, 3, 0)
    with pytest.raises(TranslateNotSupportedError):
        decode(0, 3, TRANSLATE, 0)

    # Still a ValueError for callers that only catch that
    with pytest.raises(ValueError):
        decode(0, TRANSLATE, TRANSLATE, 0)


def test_out_of_range_rejected():
    """Test range validation of every argument."""
    with pytest.raises(ValueError, match="Game"):
        decode(3, 0, 0, 0)
    with pytest.raises(ValueError, match="Espuar"):
        decode(0, 35, 0, 0)
    with pytest.raises(ValueError, match="Dethek"):
        decode(0, 0, -2, 0)
    with pytest.raises(ValueError, match="Spiral"):
        decode(0, 0, 0, 3)


def test_word_index_batch_matches_scalar():
    """Test vectorized index computation."""
    espuar = torch.tensor([0, 34, 0, 0, -1])
    dethek = torch.tensor([0, 34, 0, 0, -1])
    spirals = torch.tensor([0, 0, 1, 2, 0])

    indices = word_index_batch(espuar, dethek, spirals)

    expected = [word_index(e, d, s) for e, d, s in zip(espuar.tolist(), dethek.tolist(), spirals.tolist())]
    assert indices.tolist() == expected
    assert indices.dtype == torch.int64


def test_decode_batch():
    """Test batched decoding against scalar decoding."""
    games = torch.tensor([0, 0, 1, 2])
    espuar = torch.tensor([0, 34, 10, 3])
    dethek = torch.tensor([0, 34, 21, 3])
    spirals = torch.tensor([0, 0, 0, 0])

    words = decode_batch(games, espuar, dethek, spirals, device=DEVICE)

    assert words == ["BEWARE", "8OASIS", "7AZURE", "HAGGLE"]


def test_decode_batch_full_sweep():
    """Batched decoding agrees with decode on every setting."""
    settings = list(itertools.product(range(3), range(NUM_GLYPHS), range(NUM_GLYPHS), range(NUM_SPIRALS)))
    games, espuar, dethek, spirals = (torch.tensor(col) for col in zip(*settings))

    words = decode_batch(games, espuar, dethek, spirals, device=DEVICE)

    assert len(words) == len(settings)
    for (g, e, d, s), word in zip(settings[::97], words[::97]):
        assert word == decode(g, e, d, s)


def test_decode_batch_accepts_lists():
    """Plain sequences are converted to tensors."""
    assert decode_batch([0], [0], [0], [1], device="cpu") == ["NOTNOW"]


def test_decode_batch_validation():
    """Test batched range and shape validation."""
    with pytest.raises(ValueError, match="length"):
        decode_batch(torch.tensor([0, 1]), torch.tensor([0]), torch.tensor([0, 0]), torch.tensor([0, 0]), device=DEVICE)
    with pytest.raises(TranslateNotSupportedError):
        decode_batch(torch.tensor([0]), torch.tensor([-1]), torch.tensor([0]), torch.tensor([0]), device=DEVICE)
    with pytest.raises(ValueError, match="Glyphs"):
        decode_batch(torch.tensor([0]), torch.tensor([0]), torch.tensor([35]), torch.tensor([0]), device=DEVICE)
    with pytest.raises(ValueError, match="Spirals"):
        decode_batch(torch.tensor([0]), torch.tensor([0]), torch.tensor([0]), torch.tensor([3]), device=DEVICE)
    with pytest.raises(ValueError, match="Game"):
        decode_batch(torch.tensor([5]), torch.tensor([0]), torch.tensor([0]), torch.tensor([0]), device=DEVICE)


def test_decode_grid():
    """Test the reading chart of one spiral."""
    grid = decode_grid(0, 0, device=DEVICE)

    assert isinstance(grid, np.ndarray)
    assert grid.shape == (NUM_GLYPHS, NUM_GLYPHS)
    assert grid[0, 0] == "BEWARE"
    assert grid[34, 34] == "8OASIS"
    assert grid[33, 0] == "9TROUT"

    # The chart is symmetric: only the glyph sum matters
    assert np.array_equal(grid, grid.T)


def test_decode_grid_spirals_shift_by_twelve():
    """Each spiral reads twelve positions further round the wheel."""
    words = DEFAULT_TABLE.get_words(Game.HILLSFAR)
    for spiral in range(NUM_SPIRALS):
        grid = decode_grid(Game.HILLSFAR, spiral, device=DEVICE)
        assert grid[0, 0] == words[2 + 12 * spiral]


def test_decode_grid_validation():
    """Test range validation of decode_grid."""
    with pytest.raises(ValueError):
        decode_grid(3, 0, device=DEVICE)
    with pytest.raises(ValueError):
        decode_grid(0, 3, device=DEVICE)
