"""
Boundary layer data model(s).

The Game produces a snapshot after every click, the Service converts it into a response for whatever renders the board.
(Decouples the domain objects from the information that needs to cross the boundary)
"""

from dataclasses import dataclass, field
from typing import Optional

# Type aliases to make GameStateModel easier to read
RowCol = tuple[int, int]


@dataclass(frozen=True)
class PieceModel:
    type: str
    color: str
    has_moved: bool
    symbol: str


@dataclass
class GameStateModel:
    """Transport-safe representation of everything a renderer needs to redraw after a transition."""

    board: list[list[Optional[PieceModel]]]
    selected: Optional[RowCol]
    valid_moves: list[RowCol]
    turn: str
    turn_label: str
    last_outcome: Optional[str] = field(default=None)
