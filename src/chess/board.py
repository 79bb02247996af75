"""The Game board holds the `position` (the configuration of pieces on the board) and routes pieces to their movement rules"""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.chess.fen import is_valid_position
from src.chess.moves import MOVEMENT_RULES, CandidateMovesFn
from src.chess.pieces import BACK_RANK, Piece, PieceType
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import InvalidFENError
from src.core.shared_types import Color


@dataclass
class Board:
    # only occupied squares are stored. A square missing from the dict is empty.
    position: dict[Square, Piece] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> Self:
        return cls()

    @classmethod
    def starting_position(cls) -> Self:
        """
        Black on top (rows 0 and 1), white at the bottom (rows 6 and 7).
        Back rank order is the same for both colors: rook, knight, bishop, queen, king, bishop, knight, rook.
        """
        board = cls()
        last_row = BOARD_DIMENSIONS[0] - 1
        for col, piece_type in enumerate(BACK_RANK):
            board.place_piece(Piece(piece_type, Color.BLACK), Square(0, col))
            board.place_piece(Piece(PieceType.PAWN, Color.BLACK), Square(1, col))
            board.place_piece(
                Piece(PieceType.PAWN, Color.WHITE), Square(last_row - 1, col)
            )
            board.place_piece(Piece(piece_type, Color.WHITE), Square(last_row, col))
        return board

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using the first part of a FEN string (the board position).

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the top row, starting with the rook in column 0
        * black pawns cover row 1 entirely
        * rows 2 through 5 have 8 consecutive empty squares
        * row 6 are the white pawns (capital letters)
        * row 7 are the white pieces.

        Every piece loaded this way counts as not having moved yet.
        """
        if not is_valid_position(fen_str):
            raise InvalidFENError(
                f"Cannot interpret supplied string as a FEN position: {fen_str}"
            )

        board = cls()
        # FEN string is read from the top row down, which is exactly our row order
        for row, fen_one_row in enumerate(fen_str.split("/")):
            col = 0
            for character in fen_one_row:
                if character.isalpha():
                    # simple case: a letter directly denotes the piece that should be created
                    board.place_piece(Piece.from_fen(character), Square(row, col))
                    col += 1
                else:
                    # A number denotes the amount of empty squares after each other
                    col += int(character)
        return board

    def to_fen(self) -> str:
        """Rows are separated by slashes in FEN string."""
        return "/".join(self._row_to_fen(row) for row in range(BOARD_DIMENSIONS[0]))

    def _row_to_fen(self, row: int) -> str:
        """FEN string of a single row"""
        fen_characters: list[str] = []
        empty_count = 0
        for col in range(BOARD_DIMENSIONS[1]):
            piece = self.piece(Square(row, col))

            if piece is not None:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire row is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def piece(self, square: Square) -> Optional[Piece]:
        """The occupant of the square. Squares off the board are simply empty."""
        return self.position.get(square)

    def rows(self) -> list[list[Optional[Piece]]]:
        """Full 8x8 grid, top row first. What a renderer iterates over."""
        num_rows, num_cols = BOARD_DIMENSIONS
        return [
            [self.piece(Square(row, col)) for col in range(num_cols)]
            for row in range(num_rows)
        ]

    def locate_color(self, color: Color) -> list[Square]:
        return [
            square for square, piece in self.position.items() if piece.color == color
        ]

    def place_piece(self, piece: Piece, square: Square) -> None:
        """Setup helper: put a piece on a square (replacing whatever was there)"""
        self.position[square] = piece

    def remove_piece(self, square: Square) -> None:
        self.position.pop(square, None)

    def valid_moves(self, square: Square, color_to_move: Color) -> list[Square]:
        """
        Dispatch a piece to its movement rule.
        ----

        Nothing to move (empty square, square off the board, or a piece of the side that is not on turn)?
        Then there are no moves. Otherwise the movement rule of the piece type decides.
        """
        piece = self.piece(square)
        if piece is None or piece.color != color_to_move:
            return []

        movement_rule: CandidateMovesFn = MOVEMENT_RULES[piece.type]
        return movement_rule(square, piece, self)

    def move_piece(self, from_square: Square, to_square: Square) -> Optional[Piece]:
        """
        Update the position on the board.

        The piece lands on the target square flagged as moved (whatever stood there is captured) and the starting square is emptied.
        Returns the captured piece, if any. NOTE: no validation here, the caller made sure the move is allowed.
        The starting square must hold a piece (KeyError otherwise).
        """
        piece_that_moved = self.position.pop(from_square)
        captured_piece = self.piece(to_square)
        self.position[to_square] = piece_that_moved.mark_moved()
        return captured_piece
