"""Defines the types of chess pieces"""

from dataclasses import dataclass, replace
from typing import Self

from src.core.shared_types import Color, PieceType

FEN_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

PIECE_TO_FEN: dict[PieceType, str] = {value: key for key, value in FEN_TO_PIECE.items()}

# Unicode glyphs, for renderers that just want to print the board
PIECE_SYMBOLS: dict[Color, dict[PieceType, str]] = {
    Color.WHITE: {
        PieceType.KING: "♔",
        PieceType.QUEEN: "♕",
        PieceType.ROOK: "♖",
        PieceType.BISHOP: "♗",
        PieceType.KNIGHT: "♘",
        PieceType.PAWN: "♙",
    },
    Color.BLACK: {
        PieceType.KING: "♚",
        PieceType.QUEEN: "♛",
        PieceType.ROOK: "♜",
        PieceType.BISHOP: "♝",
        PieceType.KNIGHT: "♞",
        PieceType.PAWN: "♟",
    },
}

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


@dataclass(frozen=True)
class Piece:
    """
    Value record of a piece.

    Frozen: moving a piece replaces the occupant of a square, it never edits the piece.
    `has_moved` is bookkeeping only, move generation does not look at it.
    """

    type: PieceType
    color: Color
    has_moved: bool = False

    @classmethod
    def from_fen(cls, character: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        color = Color.WHITE if character.isupper() else Color.BLACK
        piece_type = FEN_TO_PIECE[character.lower()]
        return cls(piece_type, color)

    def to_fen(self) -> str:
        return (
            PIECE_TO_FEN[self.type].upper()
            if self.color == Color.WHITE
            else PIECE_TO_FEN[self.type].lower()
        )

    @property
    def symbol(self) -> str:
        return PIECE_SYMBOLS[self.color][self.type]

    def mark_moved(self) -> Self:
        return replace(self, has_moved=True)
