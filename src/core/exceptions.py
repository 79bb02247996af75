"""
Errors raised at the boundaries of the engine.

The engine itself absorbs invalid clicks (they simply clear the selection), so these only show up
when a request or a position string cannot be interpreted at all.

NOTE: NOT derived from ValueError. Pydantic wraps ValueErrors raised in validators into a ValidationError,
anything else is re-raised as is.
"""


class GameError(Exception):
    """Base class for everything raised by this package"""


class InvalidRequestError(GameError):
    """A request sent to the service cannot be interpreted (ex. a square outside the board)"""


class InvalidFENError(GameError):
    """A position string does not follow FEN notation"""
