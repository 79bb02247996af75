"""
The part of FEN notation the engine can use: the piece placement and the color to move.

ex) The standard starting position has a FEN
rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1

The engine has no castling, en passant or move counters. Those trailing fields are accepted (so a full FEN
copied from elsewhere loads fine) but not interpreted.
"""

from dataclasses import dataclass
from typing import Self

from src.chess.pieces import FEN_TO_PIECE
from src.chess.square import BOARD_DIMENSIONS
from src.core.exceptions import InvalidFENError
from src.core.shared_types import Color

STARTING_POSITION = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
STARTING_FEN = f"{STARTING_POSITION} w"

COLOR_CODES: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}


def is_valid_position(position: str) -> bool:
    """Only check the part of the FEN encoding for the board position."""
    num_rows, num_cols = BOARD_DIMENSIONS
    row_fens = position.split("/")
    if len(row_fens) != num_rows:
        return False

    for row_fen in row_fens:
        col_count = 0
        for character in row_fen:
            # make sure every character is valid. Only ASCII digits count as empty squares
            if character.isascii() and character.isdigit():
                col_count += int(character)
            elif character.lower() in FEN_TO_PIECE:
                col_count += 1
            else:
                # immediately invalidate if the character is anything else
                return False

        # make sure you are creating a correctly sized board
        if col_count != num_cols:
            return False
    return True


def is_valid_color_code(color: str) -> bool:
    return color in COLOR_CODES


@dataclass
class FENState:
    """Placement string + whose turn it is"""

    position: str
    color_to_move: Color

    @classmethod
    def from_fen(cls, fen: str) -> Self:
        """Parse '<placement> [<w|b> ...]'. The color defaults to white when left out."""
        parts = fen.strip().split()
        if not parts:
            raise InvalidFENError("Cannot interpret an empty string as FEN")

        position = parts[0]
        if not is_valid_position(position):
            raise InvalidFENError(f"Cannot interpret supplied string as FEN: {fen}")

        active_color = parts[1] if len(parts) > 1 else "w"
        if not is_valid_color_code(active_color):
            raise InvalidFENError(
                f"Invalid active color {active_color!r} in FEN: {fen}. Use 'w' or 'b'."
            )
        return cls(position, COLOR_CODES[active_color])

    def to_fen(self) -> str:
        active_color = "w" if self.color_to_move == Color.WHITE else "b"
        return f"{self.position} {active_color}"

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_fen(STARTING_FEN)
