"""
The Game class is the entrypoint into the domain layer for the service layer.
It owns the one live board, whose turn it is and which piece is selected, and turns square clicks into state transitions.
"""

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Optional, Self

from src.chess.board import Board
from src.chess.fen import FENState
from src.chess.pieces import Piece
from src.chess.square import Square
from src.core.models import GameStateModel, PieceModel
from src.core.shared_types import Color

logger = logging.getLogger(__name__)


class ClickOutcome(StrEnum):
    SELECTED = "selected"
    MOVED = "moved"
    CLEARED = "cleared"


@dataclass(frozen=True)
class Selection:
    """The selected square and the moves that were computed for it at the moment of selecting."""

    square: Square
    valid_moves: tuple[Square, ...]


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    turn: Color = Color.WHITE
    # None means: nothing selected (idle)
    selection: Optional[Selection] = None
    last_outcome: Optional[ClickOutcome] = field(default=None)

    @classmethod
    def new_game(cls) -> Self:
        """Standard starting position, white to move, nothing selected."""
        return cls(board=Board.starting_position())

    @classmethod
    def from_fen(cls, fen: str) -> Self:
        """Start from an arbitrary position: '<placement> [<w|b>]'"""
        state = FENState.from_fen(fen)
        return cls(board=Board.from_fen(state.position), turn=state.color_to_move)

    @property
    def turn_label(self) -> str:
        return f"Turn: {self.turn.display_name}"

    @property
    def selected_square(self) -> Optional[Square]:
        return self.selection.square if self.selection else None

    @property
    def valid_moves(self) -> list[Square]:
        """Cached moves of the current selection (empty when idle)"""
        return list(self.selection.valid_moves) if self.selection else []

    def moves_for(self, square: Square) -> list[Square]:
        """Ask the board which squares the piece on `square` can go to, given whose turn it is."""
        return self.board.valid_moves(square, self.turn)

    def click(self, square: Square) -> ClickOutcome:
        """
        A square got activated by the player
        -----

        Checked in this order:
        1. Your own piece? --> select it (also when something else was selected, or to refresh the same selection)
        2. One of the cached destinations of the selected piece? --> make the move, clear the selection, switch turns
        3. Anything else --> clear the selection. The turn stays the same.
        """
        if self._is_own_piece(square):
            self._select(square)
            outcome = ClickOutcome.SELECTED
        elif self.selection is not None and square in self.selection.valid_moves:
            self._apply_move(self.selection.square, square)
            outcome = ClickOutcome.MOVED
        else:
            self._clear_selection()
            outcome = ClickOutcome.CLEARED

        self.last_outcome = outcome
        return outcome

    def to_model(self) -> GameStateModel:
        """Encode into the format the Service layer uses"""
        return GameStateModel(
            board=[
                [self._piece_to_model(piece) for piece in row]
                for row in self.board.rows()
            ],
            selected=self._square_to_tuple(self.selected_square),
            valid_moves=[(square.row, square.col) for square in self.valid_moves],
            turn=self.turn.value,
            turn_label=self.turn_label,
            last_outcome=self.last_outcome.value if self.last_outcome else None,
        )

    # -- PRIVATE HELPERS ---
    def _is_own_piece(self, square: Square) -> bool:
        piece = self.board.piece(square)
        return piece is not None and piece.color == self.turn

    def _select(self, square: Square) -> None:
        moves = tuple(self.moves_for(square))
        self.selection = Selection(square, moves)
        logger.debug(
            "%s selected %s: %d valid move(s) %s",
            self.turn.display_name,
            square.to_algebraic(),
            len(moves),
            [move.to_algebraic() for move in moves],
        )

    def _clear_selection(self) -> None:
        if self.selection is not None:
            logger.debug(
                "Selection on %s cleared", self.selection.square.to_algebraic()
            )
        self.selection = None

    def _apply_move(self, from_square: Square, to_square: Square) -> None:
        """Update the board, drop the selection and hand the turn to the opponent"""
        captured_piece = self.board.move_piece(from_square, to_square)
        logger.info(
            "%s played %s%s%s",
            self.turn.display_name,
            from_square.to_algebraic(),
            to_square.to_algebraic(),
            f" capturing {captured_piece.color} {captured_piece.type}"
            if captured_piece
            else "",
        )
        self.selection = None
        self._switch_turn()

    def _switch_turn(self) -> None:
        self.turn = self.turn.opponent

    @staticmethod
    def _piece_to_model(piece: Optional[Piece]) -> Optional[PieceModel]:
        if piece is None:
            return None
        return PieceModel(
            type=piece.type.value,
            color=piece.color.value,
            has_moved=piece.has_moved,
            symbol=piece.symbol,
        )

    @staticmethod
    def _square_to_tuple(square: Optional[Square]) -> Optional[tuple[int, int]]:
        return (square.row, square.col) if square else None
