"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define the move sets for each piece type.

All moves generated here are pseudo-legal: nothing checks whether the mover leaves their own king in check.
A move is just the destination square, the source square is known by whoever asked.
"""

from typing import Callable, Optional, Protocol

from src.chess.pieces import Piece, PieceType
from src.chess.square import Square
from src.core.shared_types import Color


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def piece(self, square: Square) -> Optional[Piece]: ...


Vector = tuple[int, int]

ROOK_DIRECTIONS: list[Vector] = [(1, 0), (-1, 0), (0, 1), (0, -1)]
BISHOP_DIRECTIONS: list[Vector] = [(1, 1), (1, -1), (-1, 1), (-1, -1)]
QUEEN_DIRECTIONS: list[Vector] = ROOK_DIRECTIONS + BISHOP_DIRECTIONS
KNIGHT_DELTAS: list[Vector] = [
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
]
KING_DELTAS: list[Vector] = QUEEN_DIRECTIONS

# white moves UP the board (towards row 0), black moves DOWN
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_HOME_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


# --- MOVEMENT RULES ---
def raycasting_move(
    square: Square, piece: Piece, board: Board, directions: list[Vector]
) -> list[Square]:
    """
    Raycasting algorithm
    -----

    ---
    We define move directions and move along them until we hit another piece or
    the edge of the board.
    Every empty square along the ray is a destination. The first occupied square is one too, but only if it
    holds an opponent's piece (capture). Either way the ray stops there.
    """
    moves: list[Square] = []
    for dr, dc in directions:
        target_square = square.offset(dr, dc)
        while target_square.is_within_bounds():
            occupant = board.piece(target_square)
            if occupant is not None:
                if occupant.color != piece.color:
                    moves.append(target_square)
                break

            moves.append(target_square)
            target_square = target_square.offset(dr, dc)
    return moves


def single_step_move(
    square: Square, piece: Piece, board: Board, deltas: list[Vector]
) -> list[Square]:
    """Raycasting is for sliding pieces. This is the equivalent for kings and knights that just jump to a fixed offset"""
    moves: list[Square] = []
    for dr, dc in deltas:
        target_square = square.offset(dr, dc)
        if not target_square.is_within_bounds():
            continue

        occupant = board.piece(target_square)
        if occupant is None or occupant.color != piece.color:
            moves.append(target_square)

    return moves


def candidate_pawn_moves(square: Square, piece: Piece, board: Board) -> list[Square]:
    """
    A pawn:
    - moves by a single square forward, onto an empty square only.
    - It can move by two when standing on its home row, if both squares in front are empty
    - takes diagonally (and only moves diagonally when taking)

    NOTE: the double step is only considered after the single step succeeded. `has_moved` plays no role.
    """
    moves: list[Square] = []
    direction = PAWN_DIRECTION[piece.color]

    one_step = square.offset(direction, 0)
    if one_step.is_within_bounds() and board.piece(one_step) is None:
        moves.append(one_step)

        two_steps = square.offset(2 * direction, 0)
        if (
            square.row == PAWN_HOME_ROW[piece.color]
            and two_steps.is_within_bounds()
            and board.piece(two_steps) is None
        ):
            moves.append(two_steps)

    for dc in [-1, 1]:
        target_square = square.offset(direction, dc)
        if not target_square.is_within_bounds():
            continue
        occupant = board.piece(target_square)
        if occupant is not None and occupant.color != piece.color:
            moves.append(target_square)
    return moves


def candidate_knight_moves(square: Square, piece: Piece, board: Board) -> list[Square]:
    """Knights always move such that |delta_row| + |delta_col| = 3. Jumps, so nothing can block them"""
    return single_step_move(square, piece, board, KNIGHT_DELTAS)


def candidate_bishop_moves(square: Square, piece: Piece, board: Board) -> list[Square]:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    return raycasting_move(square, piece, board, BISHOP_DIRECTIONS)


def candidate_rook_moves(square: Square, piece: Piece, board: Board) -> list[Square]:
    """Rooks move either horizontally or vertically"""
    return raycasting_move(square, piece, board, ROOK_DIRECTIONS)


def candidate_queen_moves(square: Square, piece: Piece, board: Board) -> list[Square]:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return raycasting_move(square, piece, board, QUEEN_DIRECTIONS)


def candidate_king_moves(square: Square, piece: Piece, board: Board) -> list[Square]:
    """
    The king can move by a single square at the time.

    No castling, and no check whether the target square is attacked.
    """
    return single_step_move(square, piece, board, KING_DELTAS)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
CandidateMovesFn = Callable[[Square, Piece, Board], list[Square]]
MOVEMENT_RULES: dict[PieceType, CandidateMovesFn] = {
    PieceType.PAWN: candidate_pawn_moves,
    PieceType.KNIGHT: candidate_knight_moves,
    PieceType.BISHOP: candidate_bishop_moves,
    PieceType.ROOK: candidate_rook_moves,
    PieceType.QUEEN: candidate_queen_moves,
    PieceType.KING: candidate_king_moves,
}
