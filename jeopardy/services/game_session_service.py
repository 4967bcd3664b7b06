"""
Game Session Service for the Jeopardy board.

Keeps the active game sessions in process memory. Game state is not meant to
outlive the server process, so there is no database behind this store.

Public API:
    add_new_game(session)      → str
    check_game_exists(game_id) → bool
    get_game(game_id)          → GameSession
    get_all_games()            → list[GameSession]
    clear_games()              → None
"""

import logging
import threading
import uuid

logger = logging.getLogger(__name__)


class GameNotFoundError(ValueError):
    """Raised when no session exists for a game id."""
    pass


# Flask may serve requests from several threads; the lock only guards the dict
_games = {}
_lock = threading.Lock()


def add_new_game(session) -> str:
    """
    Stores a session under a new UUID and returns the id.

    The id is also written to `session.id` so callers can hand it to the client.
    """
    game_id = str(uuid.uuid4())
    session.id = game_id
    with _lock:
        _games[game_id] = session
    logger.info("Created game session %s", game_id)
    return game_id


def check_game_exists(game_id) -> bool:
    """Returns True if a session with this id is stored."""
    if not isinstance(game_id, str):
        return False
    with _lock:
        return game_id in _games


def get_game(game_id):
    """
    Returns the stored session for `game_id`.

    Raises:
        GameNotFoundError: If the id is unknown.
    """
    session = None
    if isinstance(game_id, str):
        with _lock:
            session = _games.get(game_id)
    if session is None:
        raise GameNotFoundError("No game found with the provided ID.")
    return session


def get_all_games() -> list:
    """Returns every stored session. Used by the debug /get-game-data endpoint."""
    with _lock:
        return list(_games.values())


def clear_games() -> None:
    with _lock:
        _games.clear()
