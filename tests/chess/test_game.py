"""Unit tests for /src/chess/game.py"""

import logging

import pytest

from src.chess.game import (
    Board,
    ClickOutcome,
    Color,
    Game,
    GameStateModel,
    Piece,
    Selection,
    Square,
)
from src.core.models import PieceModel
from src.core.shared_types import PieceType

SQ = Square.from_algebraic


@pytest.fixture
def game() -> Game:
    return Game.new_game()


def play(game: Game, *square_names: str) -> list[ClickOutcome]:
    return [game.click(SQ(name)) for name in square_names]


# -- CREATION LOGIC --
def test_new_game(game: Game) -> None:
    assert game.board == Board.starting_position()
    assert game.turn == Color.WHITE
    assert game.selection is None
    assert game.selected_square is None
    assert game.valid_moves == []
    assert game.turn_label == "Turn: White"


def test_game_from_fen() -> None:
    game = Game.from_fen("4k3/8/8/8/8/8/4P3/4K3 b")
    assert game.turn == Color.BLACK
    assert game.turn_label == "Turn: Black"
    assert game.board.piece(SQ("e2")) == Piece(PieceType.PAWN, Color.WHITE)
    assert len(game.board.position) == 3


# -- SELECTING --
def test_selecting_own_piece_caches_its_moves(game: Game) -> None:
    outcome = game.click(Square(6, 4))
    assert outcome == ClickOutcome.SELECTED
    assert game.selection == Selection(Square(6, 4), (Square(5, 4), Square(4, 4)))
    assert game.selected_square == Square(6, 4)
    assert game.valid_moves == [Square(5, 4), Square(4, 4)]
    assert game.turn == Color.WHITE


def test_selecting_piece_without_moves(game: Game) -> None:
    """A piece that cannot move can still be selected, it just has nothing to highlight"""
    assert game.click(SQ("a1")) == ClickOutcome.SELECTED
    assert game.selected_square == SQ("a1")
    assert game.valid_moves == []


def test_selecting_another_own_piece_replaces_selection(game: Game) -> None:
    play(game, "e2", "g1")
    assert game.selected_square == SQ("g1")
    assert set(game.valid_moves) == {SQ("f3"), SQ("h3")}


def test_clicking_other_own_piece_while_selected() -> None:
    """With a selection active, clicking another own piece re-selects instead of clearing"""
    game = Game.from_fen("8/8/8/8/8/8/8/R6R w")
    play(game, "a1")
    assert game.click(SQ("h1")) == ClickOutcome.SELECTED
    assert game.selected_square == SQ("h1")
    assert game.turn == Color.WHITE


def test_reclicking_same_piece_refreshes_cached_moves(game: Game) -> None:
    game.click(SQ("e2"))
    game.board.place_piece(Piece(PieceType.KNIGHT, Color.BLACK), SQ("e3"))
    assert game.click(SQ("e2")) == ClickOutcome.SELECTED
    assert game.valid_moves == []


def test_opponent_piece_has_no_moves(game: Game) -> None:
    assert game.moves_for(SQ("e7")) == []
    assert game.moves_for(SQ("e2")) == [SQ("e3"), SQ("e4")]


# -- CLEARING --
def test_clicking_empty_square_without_selection(game: Game) -> None:
    """Aborted click: nothing happens, and it is still white's turn"""
    assert game.click(SQ("e4")) == ClickOutcome.CLEARED
    assert game.selection is None
    assert game.turn == Color.WHITE


def test_clicking_opponent_piece_without_selection(game: Game) -> None:
    assert game.click(SQ("e7")) == ClickOutcome.CLEARED
    assert game.selection is None
    assert game.valid_moves == []
    assert game.turn == Color.WHITE


def test_clicking_non_destination_clears_selection(game: Game) -> None:
    board_before = Board.from_fen(game.board.to_fen())
    assert play(game, "e2", "e5") == [ClickOutcome.SELECTED, ClickOutcome.CLEARED]
    assert game.selection is None
    assert game.turn == Color.WHITE
    assert game.board == board_before


def test_clicking_unreachable_opponent_piece_clears_selection(game: Game) -> None:
    assert play(game, "e2", "d7") == [ClickOutcome.SELECTED, ClickOutcome.CLEARED]
    assert game.selection is None
    assert game.board.piece(SQ("d7")) == Piece(PieceType.PAWN, Color.BLACK)


def test_clicking_off_the_board_clears_selection(game: Game) -> None:
    game.click(SQ("e2"))
    assert game.click(Square(8, 8)) == ClickOutcome.CLEARED
    assert game.selection is None


# -- MOVING --
def test_double_step_end_to_end(game: Game) -> None:
    """From the starting position: select e2 (6,4), click e4 (4,4)"""
    assert game.click(Square(6, 4)) == ClickOutcome.SELECTED
    assert game.click(Square(4, 4)) == ClickOutcome.MOVED

    assert game.turn == Color.BLACK
    assert game.turn_label == "Turn: Black"
    assert game.board.piece(Square(4, 4)) == Piece(
        PieceType.PAWN, Color.WHITE, has_moved=True
    )
    assert game.board.piece(Square(6, 4)) is None
    assert game.selection is None
    assert game.valid_moves == []


def test_capture_by_click() -> None:
    game = Game.from_fen("4k3/8/8/3p4/4P3/8/8/4K3 w")
    assert play(game, "e4", "d5") == [ClickOutcome.SELECTED, ClickOutcome.MOVED]
    assert game.board.piece(SQ("d5")) == Piece(
        PieceType.PAWN, Color.WHITE, has_moved=True
    )
    assert game.board.piece(SQ("e4")) is None
    assert len(game.board.locate_color(Color.BLACK)) == 1
    assert game.turn == Color.BLACK


def test_turn_flips_once_per_move_only(game: Game) -> None:
    outcomes = play(
        game,
        "e2", "e4",  # white moves
        "e2",  # empty now: aborted click
        "d7",  # black selects
        "d4",  # not a destination: aborted
        "d7", "d5",  # black moves
        "e4", "d5",  # white takes
    )
    assert outcomes.count(ClickOutcome.MOVED) == 3
    assert game.turn == Color.BLACK
    assert game.board.piece(SQ("d5")) == Piece(
        PieceType.PAWN, Color.WHITE, has_moved=True
    )


def test_moving_after_opponent_turn_uses_opponent_pieces(game: Game) -> None:
    """Once white moved, white's pieces are no longer selectable"""
    play(game, "g1", "f3")
    assert game.click(SQ("f3")) == ClickOutcome.CLEARED
    assert game.click(SQ("b8")) == ClickOutcome.SELECTED
    assert set(game.valid_moves) == {SQ("a6"), SQ("c6")}


def test_applied_move_is_logged(game: Game, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="src.chess.game"):
        play(game, "e2", "e4")
    assert "White played e2e4" in caplog.text


def test_capture_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    game = Game.from_fen("4k3/8/8/3p4/4P3/8/8/4K3 w")
    with caplog.at_level(logging.INFO, logger="src.chess.game"):
        play(game, "e4", "d5")
    assert "White played e4d5 capturing black pawn" in caplog.text


# -- SNAPSHOT FOR THE SERVICE --
def test_to_model_when_idle(game: Game) -> None:
    model = game.to_model()
    assert isinstance(model, GameStateModel)
    assert model.selected is None
    assert model.valid_moves == []
    assert model.turn == "white"
    assert model.turn_label == "Turn: White"
    assert model.last_outcome is None
    assert model.board[4] == [None] * 8
    king = model.board[0][4]
    assert king is not None
    assert king == PieceModel(type="king", color="black", has_moved=False, symbol="♚")


def test_to_model_with_selection(game: Game) -> None:
    game.click(Square(6, 4))
    model = game.to_model()
    assert model.selected == (6, 4)
    assert model.valid_moves == [(5, 4), (4, 4)]
    assert model.last_outcome == "selected"
