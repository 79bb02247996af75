"""Orchestration of communication from whatever front end draws the board to the business logic (and the reverse direction)."""

import logging
import threading
from typing import Optional

from src.api.models import ClickRequest, GameStateResponse, NewGameRequest
from src.chess.game import Game

logger = logging.getLogger(__name__)


class ChessService:
    """
    Holds the single live game of this process.

    The engine itself is single threaded. Every call takes the lock, so front ends that dispatch clicks from several
    threads still see the clicks applied one at a time.
    """

    def __init__(self, game: Optional[Game] = None) -> None:
        self.game = game if game is not None else Game.new_game()
        self._lock = threading.Lock()

    # -- Front end logic ---
    def new_game(self, request: NewGameRequest) -> GameStateResponse:
        """Throw away the current game and start over (optionally from a given position)."""
        new_game = (
            Game.from_fen(request.starting_fen)
            if request.starting_fen
            else Game.new_game()
        )
        with self._lock:
            self.game = new_game
            logger.info("New game started. %s", new_game.turn_label)
            return self._create_game_response()

    def activate_square(self, request: ClickRequest) -> GameStateResponse:
        """A square was clicked. Returns everything needed to redraw."""
        with self._lock:
            outcome = self.game.click(request.to_square())
            logger.debug(
                "Click on (%d, %d): %s", request.row, request.col, outcome.value
            )
            return self._create_game_response()

    def get_game_state(self) -> GameStateResponse:
        """Retrieve current game state (ex. for the initial render)."""
        with self._lock:
            return self._create_game_response()

    # -- Internal helpers --
    def _create_game_response(self) -> GameStateResponse:
        return GameStateResponse.from_model(self.game.to_model())
