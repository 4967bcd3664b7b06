"""
Game logic module for the Jeopardy board API.

This module ties the category feed, the sampler and the clue board together
into game sessions, and exposes the operations the API routes call.

Functions:
- validate_id(game_id): Validates if a game ID exists.
- create_new_game(): Creates a new game session with a freshly sampled board.
- restart_game(game_id): Refreshes the pool and resamples the board of an existing session.
- select_clue(game_id, clue_id): Advances a clue's reveal state.
- get_game_state(game_id): Retrieves a game session.
- get_all_games_data(): Retrieves the state of all game sessions.
"""

import enum
import logging

from ..config import NUM_CATEGORIES
from ..services.category_service import fetch_category_pool
from ..services.game_session_service import add_new_game, check_game_exists, get_all_games, get_game
from .board import ClueBoard
from .sampler import sample_categories

logger = logging.getLogger(__name__)


class SessionStatus(enum.Enum):
    LOADING = "LOADING"
    READY = "READY"
    ERROR = "ERROR"


class BoardNotReadyError(Exception):
    """Raised when a clue is selected on a session that has no playable board."""
    pass


class GameSession:
    """
    One player's game: the category pool fetched for it and the board in play.

    Attributes:
        id (str): Assigned when the session is stored.
        status (SessionStatus): LOADING while a board is being built, READY once
            it can be played, ERROR if the last start failed.
        pool (dict): Categories fetched for the current board, keyed by category id.
        board (ClueBoard | None): The board in play. None unless status is READY.
        error (str | None): Why the last start failed.
    """

    def __init__(self):
        self.id = None
        self.status = SessionStatus.LOADING
        self.pool = {}
        self.board = None
        self.error = None

    def start(self, fetch=None, rand_index=None):
        """
        Fetches a fresh pool, samples the categories and builds a new board.

        Any previous board is discarded first, so a failed start never leaves a
        partially built or stale board behind.

        :param fetch: Callable returning the category pool. Defaults to fetch_category_pool.
        :param rand_index: Random index source passed to the sampler.
        :raises InsufficientPoolError: If too few categories could be fetched.
        """
        if fetch is None:
            fetch = fetch_category_pool

        self.status = SessionStatus.LOADING
        self.board = None
        self.error = None
        try:
            self.pool = fetch()
            selection = sample_categories(self.pool, NUM_CATEGORIES, rand_index)
            board = ClueBoard()
            board.initialize_board(selection)
        except Exception as e:
            self.status = SessionStatus.ERROR
            self.pool = {}
            self.error = str(e)
            logger.error("Failed to start game session %s: %s", self.id, e)
            raise

        self.board = board
        self.status = SessionStatus.READY
        logger.info("Game session %s ready with a pool of %d categories", self.id, len(self.pool))

    def select_clue(self, clue_id):
        """
        Advances a clue on the current board.

        :return: A tuple of the RevealResult (None if the clue already showed its
                 answer) and the rendered board it was applied to.
        :raises BoardNotReadyError: If there is no playable board.
        """
        # A concurrent restart may swap or clear self.board; use one snapshot
        board = self.board
        if board is None or self.status is not SessionStatus.READY:
            raise BoardNotReadyError(f"Game is not ready (status {self.status.value}).")
        result = board.select_clue(clue_id)
        return result, board.render_state()

    def to_state(self):
        """
        Retrieves the current state of the game session.

        Returns:
            dict: The game's ID, status, pool size, rendered board and last error.
        """
        board = self.board
        return {
            "gameId": self.id,
            "status": self.status.value,
            "poolSize": len(self.pool),
            "board": board.render_state() if board is not None else None,
            "error": self.error,
        }

    def __repr__(self):
        return "<GameSession %r>" % self.id


def validate_id(game_id):
    """
    Validates if a game ID exists in the session store.

    :param game_id: The ID of the game to validate.
    :return: True if the game exists, False otherwise.
    """
    return check_game_exists(game_id)


def create_new_game(rand_index=None) -> GameSession:
    """
    Creates a new game session with a freshly sampled board and stores it.

    The session is only stored once its board is built; a failed start stores nothing.

    :return: The newly created GameSession.
    :raises InsufficientPoolError: If too few categories could be fetched.
    """
    session = GameSession()
    session.start(fetch_category_pool, rand_index)
    add_new_game(session)
    return session


def restart_game(game_id: str, rand_index=None) -> GameSession:
    """
    Restarts the game specified by this id: refreshes the pool, resamples and
    replaces the board.

    :param game_id: The ID of the game session to restart.
    :return: The restarted session.
    :raises GameNotFoundError: If the game does not exist.
    :raises InsufficientPoolError: If too few categories could be fetched. The
                                   session is left in the ERROR state.
    """
    session = get_game(game_id)
    session.start(fetch_category_pool, rand_index)
    logger.info("Restarted game session %s", game_id)
    return session


def select_clue(game_id: str, clue_id):
    """
    Advances the reveal state of one clue in a game.

    :param game_id: The ID of the game session.
    :param clue_id: The ID of the selected clue.
    :return: A tuple of the RevealResult, or None if the clue already showed
             its answer, and the rendered board.
    :raises GameNotFoundError: If the game does not exist.
    :raises BoardNotReadyError: If the session has no playable board.
    :raises ClueNotFoundError: If the clue is not on the board.
    """
    session = get_game(game_id)
    return session.select_clue(clue_id)


def get_game_state(game_id: str) -> GameSession:
    """
    Retrieves the game session for the specified game ID.

    :param game_id: The ID of the game session.
    :return: The GameSession if it exists, raises GameNotFoundError otherwise.
    """
    return get_game(game_id)


def get_all_games_data() -> dict:
    """
    Retrieves the state of all game sessions.

    :return: A dictionary mapping game ids to their state.
    """
    return {session.id: session.to_state() for session in get_all_games()}
