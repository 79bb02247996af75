"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.chess.board import Board
from src.chess.pieces import Piece
from src.chess.square import Square
from src.core.shared_types import Color, PieceType

PlaceFn = Callable[..., Board]


@pytest.fixture
def board_with_pieces() -> PlaceFn:
    """Call the inner function with (piece type, color, square name) triples to get an otherwise empty board"""

    def _create_board(*placements: tuple[PieceType, Color, str]) -> Board:
        board = Board.empty()
        for piece_type, color, square_name in placements:
            square = Square.from_algebraic(square_name)
            board.place_piece(Piece(piece_type, color), square)
        return board

    return _create_board
