"""
Decoder wheel for the SSI Gold Box games.

Pool of Radiance, Curse of the Azure Bonds and Hillsfar asked for a word
read off a cardboard wheel before play. Given the two glyphs shown by the
game and the spiral, this tool reads the word the way the wheel would.

Usage:
    python decoder_wheel.py decode 0 3 17 1
    python decoder_wheel.py table 2 --spiral 0
    python decoder_wheel.py interactive
    python decoder_wheel.py icons
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TextIO
import argparse
import logging
import sys

from core.decoder import decode, decode_grid
from core.selection import SelectionState
from core.word_table import NUM_GLYPHS, NUM_SPIRALS, Alphabet, Game
from utils.device import parse_device
from utils.logging_setup import configure_logging
from views.icon_view import all_icon_names, glyph_grid, icon_name
from views.word_view import WordDisplay

logger = logging.getLogger("decoder_wheel")

EXIT_OK = 0
EXIT_INVALID = 2


@dataclass
class WheelParams:
    """
    Settings for one run of the command line.

    Attributes:
        log_level: Level name passed to configure_logging
        device: Torch device override (None uses DECODER_WHEEL_DEVICE or auto-detection)
    """
    log_level: str = "WARNING"
    device: Optional[str] = None


def _cmd_decode(args: argparse.Namespace, params: WheelParams, stdin: TextIO, stdout: TextIO) -> int:
    word = decode(args.game, args.espuar, args.dethek, args.spiral)
    logger.info(
        "Decoded game=%d espuar=%d dethek=%d spiral=%d -> %s",
        args.game, args.espuar, args.dethek, args.spiral, word
    )
    stdout.write(word + "\n")
    return EXIT_OK


def _cmd_table(args: argparse.Namespace, params: WheelParams, stdin: TextIO, stdout: TextIO) -> int:
    spirals = range(NUM_SPIRALS) if args.spiral is None else [args.spiral]

    for spiral in spirals:
        grid = decode_grid(args.game, spiral, device=params.device)
        name = Game(args.game).display_name
        stdout.write(f"{name}, spiral {spiral} (rows Espuar, columns Dethek)\n")
        stdout.write("    " + " ".join(f"{d:>6}" for d in range(NUM_GLYPHS)) + "\n")
        for espuar, row in enumerate(grid):
            stdout.write(f"{espuar:>3} " + " ".join(row) + "\n")
        stdout.write("\n")
    return EXIT_OK


def _cmd_icons(args: argparse.Namespace, params: WheelParams, stdin: TextIO, stdout: TextIO) -> int:
    if args.flat:
        for name in all_icon_names():
            stdout.write(name + "\n")
        return EXIT_OK

    for spiral in range(NUM_SPIRALS):
        stdout.write(f"Spiral {spiral}: {icon_name(spiral)}\n")
    for alphabet in Alphabet:
        stdout.write(f"{alphabet.display_name}:\n")
        for row in glyph_grid():
            stdout.write("  " + " ".join(icon_name(alphabet, g) for g in row) + "\n")
    return EXIT_OK


INTERACTIVE_HELP = """\
Commands:
  game N      choose game (0 Pool of Radiance, 1 Curse of the Azure Bonds, 2 Hillsfar)
  espuar N    choose Espuar glyph (0..34)
  dethek N    choose Dethek glyph (0..34)
  spiral N    choose spiral (0..2)
  help        show this message
  quit        leave
"""


def run_interactive(stdin: TextIO, stdout: TextIO) -> int:
    """
    Read wheel choices from stdin and show the word after each one.

    Invalid lines are reported and skipped; the session ends at "quit" or
    end of input.
    """
    state = SelectionState()
    state.set_notification_target(WordDisplay(stream=stdout))

    choosers = {
        "game": state.choose_game,
        "espuar": lambda n: state.choose_symbol(Alphabet.ESPUAR, n),
        "dethek": lambda n: state.choose_symbol(Alphabet.DETHEK, n),
        "spiral": state.choose_spiral,
    }

    for line in stdin:
        parts = line.split()
        if not parts:
            continue
        command = parts[0].lower()

        if command in ("quit", "exit"):
            break
        if command == "help":
            stdout.write(INTERACTIVE_HELP)
            continue
        if command not in choosers or len(parts) != 2:
            logger.warning("Unrecognized input: %r", line.strip())
            stdout.write(f"? {line.strip()} (type 'help')\n")
            continue

        try:
            choosers[command](int(parts[1]))
        except ValueError as exc:
            logger.warning("Rejected %r: %s", line.strip(), exc)
            stdout.write(f"! {exc}\n")

    return EXIT_OK


def _cmd_interactive(args: argparse.Namespace, params: WheelParams, stdin: TextIO, stdout: TextIO) -> int:
    return run_interactive(stdin, stdout)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Read words off the SSI decoder wheel.")
    parser.add_argument(
        "--log-level",
        default=WheelParams.log_level,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    parser.add_argument(
        "--device",
        default=None,
        help="Torch device for batched decoding (overrides DECODER_WHEEL_DEVICE)"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    decode_parser = subparsers.add_parser("decode", help="Decode one wheel setting")
    decode_parser.add_argument("game", type=int, help="Game (0..2)")
    decode_parser.add_argument("espuar", type=int, help="Espuar glyph (0..34)")
    decode_parser.add_argument("dethek", type=int, help="Dethek glyph (0..34)")
    decode_parser.add_argument("spiral", type=int, help="Spiral (0..2)")
    decode_parser.set_defaults(handler=_cmd_decode)

    table_parser = subparsers.add_parser("table", help="Print the reading chart of a game")
    table_parser.add_argument("game", type=int, help="Game (0..2)")
    table_parser.add_argument("--spiral", type=int, default=None, help="Only this spiral")
    table_parser.set_defaults(handler=_cmd_table)

    interactive_parser = subparsers.add_parser("interactive", help="Choose glyphs one at a time")
    interactive_parser.set_defaults(handler=_cmd_interactive)

    icons_parser = subparsers.add_parser("icons", help="List icon resource names")
    icons_parser.add_argument("--flat", action="store_true", help="One name per line")
    icons_parser.set_defaults(handler=_cmd_icons)

    return parser


def main(
    argv: list[str] | None = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    params = WheelParams(log_level=args.log_level, device=args.device)

    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    try:
        configure_logging(params.log_level)
        if params.device is not None:
            parse_device(params.device)
        return args.handler(args, params, stdin, stdout)
    except ValueError as exc:
        logger.error("%s", exc)
        sys.stderr.write(f"error: {exc}\n")
        return EXIT_INVALID


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main(sys.argv[1:]))
