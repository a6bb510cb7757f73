"""
Word tables printed on the three decoder wheels.

Each wheel carries 36 six-letter words on its inner disk, one per relative
rotation of the two disks. This module holds the tables, the game and
alphabet enumerations, and the validation that guards them.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Sequence
import torch


# Wheel geometry
NUM_GLYPHS = 35
NUM_SPIRALS = 3
WORD_LENGTH = 6
WORDS_PER_GAME = 36

# Position on each ring labelled "Translate from ..."
TRANSLATE = -1


class WordTableError(ValueError):
    """Raised when a word table does not have the shape of a decoder wheel."""


class Game(IntEnum):
    """Games that shipped with a decoder wheel."""

    POOL_OF_RADIANCE = 0
    CURSE_OF_THE_AZURE_BONDS = 1
    HILLSFAR = 2

    @property
    def display_name(self) -> str:
        return _GAME_NAMES[self]


class Alphabet(IntEnum):
    """Glyph rings: Espuar (elvish) outside, Dethek (dwarvish) inside."""

    ESPUAR = 0
    DETHEK = 1

    @property
    def display_name(self) -> str:
        return _ALPHABET_NAMES[self]


_GAME_NAMES = {
    Game.POOL_OF_RADIANCE: "Pool of Radiance",
    Game.CURSE_OF_THE_AZURE_BONDS: "Curse of the Azure Bonds",
    Game.HILLSFAR: "Hillsfar",
}

_ALPHABET_NAMES = {
    Alphabet.ESPUAR: "Espuar",
    Alphabet.DETHEK: "Dethek",
}

NUM_GAMES = len(Game)


WHEEL_WORDS = (
    (   # Pool of Radiance
        "0SOMAS", "AXEIAX", "BEWARE", "COPPER", "DRAGON", "EFREET",
        "FRIEND", "GOOGLE", "HARASH", "IXYVSI", "JUNGLE", "KNIGHT",
        "LQLGMT", "MLSSXS", "NOTNOW", "OPTAWA", "POOLRD", "QUOHOG",
        "RHUDIA", "SAVIOR", "TEMPLE", "UICDRH", "VULCAN", "WYVERN",
        "XRSEHK", "YUFSTA", "ZOMBIE", "1GKKRY", "2IOLCD", "3MASAI",
        "4NINER", "5GUNGA", "6BROWN", "7GNATS", "8OASIS", "9TROUT",
    ),
    (   # Curse of the Azure Bonds
        "OMIMIC", "ATOMIE", "BEHOLD", "CLERIC", "DRUIDS", "ELVISH",
        "FUNGUS", "GIORGI", "HYDRAS", "INSIDE", "JAGUAR", "KEEPER",
        "LOOTER", "MOGION", "NIXIES", "OTYUGH", "POWERS", "QUILLS",
        "RESIST", "SLIMES", "TROLLS", "URCHIN", "VERMIN", "WRAITH",
        "XERXES", "YULASH", "ZIRCON", "1MAGIC", "2ARROW", "3DRILL",
        "4PHLAN", "5POLAR", "6FIRST", "7AZURE", "8BONDS", "9ALIAS",
    ),
    (   # Hillsfar
        "0SAMAS", "ATTACK", "BOUNTY", "CUDGEL", "DRAGON", "EFREET",
        "FOREST", "GAMBLE", "HAGGLE", "IXYVSI", "JEWELS", "KNIGHT",
        "LQLGMT", "MYSTIC", "NECROS", "OPTAWA", "PRINCE", "QUESTS",
        "RHUDIA", "STEEDS", "TEMPLE", "UNLOCK", "VORPAL", "WYVERN",
        "XRSEHK", "YUFSTA", "ZOMBIE", "1BLADE", "2AGILE", "3MASAI",
        "4MAGES", "5GUNGA", "6BROWN", "7GNATS", "8OASIS", "9TROUT",
    ),
)


def check_game(game: int) -> Game:
    """
    Convert an integer to a Game.

    Raises:
        ValueError: If game is not in [0, NUM_GAMES)
    """
    if not 0 <= game < NUM_GAMES:
        raise ValueError(f"Game {game} out of range [0, {NUM_GAMES})")
    return Game(game)


class WordTable:
    """
    Immutable per-game word lists of a decoder wheel.

    Attributes:
        words: Tuple of NUM_GAMES tuples holding WORDS_PER_GAME words each
        num_games: Number of games (G)
    """

    def __init__(self, words_by_game: Sequence[Sequence[str]]):
        """
        Initialize and validate a word table.

        Args:
            words_by_game: One sequence of words per game, in Game order

        Raises:
            WordTableError: If the table does not have NUM_GAMES games of
                WORDS_PER_GAME ASCII words of WORD_LENGTH characters
        """
        if len(words_by_game) != NUM_GAMES:
            raise WordTableError(
                f"Expected {NUM_GAMES} games, got {len(words_by_game)}"
            )

        tables = []
        for game, words in zip(Game, words_by_game):
            if len(words) != WORDS_PER_GAME:
                raise WordTableError(
                    f"{game.display_name}: expected {WORDS_PER_GAME} words, got {len(words)}"
                )
            upper_words = []
            for i, word in enumerate(words):
                # Check after uppercasing: "ß".upper() is "SS"
                upper = word.upper()
                if len(upper) != WORD_LENGTH:
                    raise WordTableError(
                        f"{game.display_name}: word {i} {word!r} is not {WORD_LENGTH} characters"
                    )
                if not upper.isascii():
                    raise WordTableError(
                        f"{game.display_name}: word {i} {word!r} is not ASCII"
                    )
                upper_words.append(upper)
            tables.append(tuple(upper_words))

        self.words = tuple(tables)
        self.num_games = len(self.words)

        self._word_to_index = [
            {w: i for i, w in enumerate(words)} for words in self.words
        ]
        self._tensor_cache: dict[str, torch.Tensor] = {}

    def get_word(self, game: int, word_index: int) -> str:
        """
        Get the word at a position of a game's wheel.

        Args:
            game: Game index (0..2)
            word_index: Word index (0..35)

        Returns:
            Six-character word

        Raises:
            ValueError: If game is out of range
            IndexError: If word_index is out of range
        """
        game = check_game(game)
        if not 0 <= word_index < WORDS_PER_GAME:
            raise IndexError(f"Word index {word_index} out of range [0, {WORDS_PER_GAME})")
        return self.words[game][word_index]

    def get_words(self, game: int) -> list[str]:
        """Get a copy of all words of a game, in index order."""
        return list(self.words[check_game(game)])

    def get_index(self, game: int, word: str) -> int:
        """
        Get the index of a word on a game's wheel.

        Args:
            game: Game index
            word: Word string (case-insensitive)

        Returns:
            Word index

        Raises:
            ValueError: If word is not on the wheel
        """
        lookup = self._word_to_index[check_game(game)]
        word_upper = word.upper()
        if word_upper not in lookup:
            raise ValueError(f"Word '{word}' not found on the {Game(game).display_name} wheel")
        return lookup[word_upper]

    def as_tensor(self, device: Optional[torch.device | str] = None) -> torch.Tensor:
        """
        Encode the table as character codes.

        The tensor is built once per device and shared between calls, so
        callers must not modify it.

        Args:
            device: Device to store the tensor on (None for the CPU)

        Returns:
            [G, WORDS_PER_GAME, WORD_LENGTH] uint8 tensor of ASCII codes
        """
        device = torch.device(device) if device is not None else torch.device("cpu")
        key = str(device)
        if key not in self._tensor_cache:
            codes = [[list(word.encode("ascii")) for word in words] for words in self.words]
            self._tensor_cache[key] = torch.tensor(codes, dtype=torch.uint8, device=device)
        return self._tensor_cache[key]


# Built once at import: a malformed table stops the program here.
DEFAULT_TABLE = WordTable(WHEEL_WORDS)
