"""Requests and Response models"""

from typing import Optional, Self

from pydantic import BaseModel, field_validator

from src.chess.game import ClickOutcome
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import InvalidRequestError
from src.core.models import GameStateModel
from src.core.shared_types import Color, PieceType


# --- REQUEST MODELS ---
class ClickRequest(BaseModel):
    """A square on the board got activated. Zero-based, row 0 is the top of the board."""

    row: int
    col: int

    @field_validator("row")
    @classmethod
    def validate_row(cls, value: int) -> int:
        if not (0 <= value < BOARD_DIMENSIONS[0]):
            raise InvalidRequestError(f"Row {value} is not on the board.")
        return value

    @field_validator("col")
    @classmethod
    def validate_col(cls, value: int) -> int:
        if not (0 <= value < BOARD_DIMENSIONS[1]):
            raise InvalidRequestError(f"Column {value} is not on the board.")
        return value

    @classmethod
    def from_algebraic(cls, square_name: str) -> Self:
        """Convenience: 'e2' instead of row=6, col=4"""

        def _is_algebraic_notation(value: str) -> bool:
            if len(value) != 2:
                return False
            return value.isascii() and value[0].isalpha() and value[1].isdigit()

        if not _is_algebraic_notation(square_name):
            raise InvalidRequestError(
                f"Cannot interpret {square_name!r} as a valid square name."
            )
        square = Square.from_algebraic(square_name)
        return cls(row=square.row, col=square.col)

    def to_square(self) -> Square:
        return Square(self.row, self.col)


class NewGameRequest(BaseModel):
    starting_fen: Optional[str] = None

    @field_validator("starting_fen")
    @classmethod
    def validate_starting_fen(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        # the position itself is checked when the game gets created, trailing fields are ignored there
        if not value.split():
            raise InvalidRequestError(
                "FEN string must contain at least the position, optionally followed "
                "by the color to move."
            )
        return value


# --- RESPONSE MODELS ---
class PieceResponse(BaseModel):
    type: PieceType
    color: Color
    has_moved: bool
    symbol: str


class SquareResponse(BaseModel):
    row: int
    col: int


class GameStateResponse(BaseModel):
    board: list[list[Optional[PieceResponse]]]
    selected: Optional[SquareResponse]
    valid_moves: list[SquareResponse]
    turn: Color
    turn_label: str
    last_outcome: Optional[ClickOutcome]

    @classmethod
    def from_model(cls, model: GameStateModel) -> Self:
        return cls(
            board=[
                [
                    PieceResponse(
                        type=PieceType(piece.type),
                        color=Color(piece.color),
                        has_moved=piece.has_moved,
                        symbol=piece.symbol,
                    )
                    if piece
                    else None
                    for piece in row
                ]
                for row in model.board
            ],
            selected=(
                SquareResponse(row=model.selected[0], col=model.selected[1])
                if model.selected
                else None
            ),
            valid_moves=[
                SquareResponse(row=row, col=col) for row, col in model.valid_moves
            ],
            turn=Color(model.turn),
            turn_label=model.turn_label,
            last_outcome=(
                ClickOutcome(model.last_outcome) if model.last_outcome else None
            ),
        )
