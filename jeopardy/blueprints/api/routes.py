"""
This module, 'routes.py', defines the API endpoints the Jeopardy front-end talks to.

Detailed Endpoint Descriptions:
- POST /new-game: Starts a new game session with a freshly sampled board.
- POST /select-clue: Reveals the next state of a clue (question, then answer).
- POST /game-status: Provides the current board and status of a game session.
- POST /restart-game: Refreshes the categories and replaces the board of an existing session.
- GET /get-game-data: Retrieves data for all game sessions.

Associated Functions:
- new_game(): Creates a game session.
- select_clue_route(): Advances a clue and returns what the cell should show.
- game_status(): Fetches the current state of a game session.
- restart_game_route(): Restarts a game session.
- get_all_game_data(): Retrieves data for all game sessions.
"""

from flask import Blueprint
from ...game.board import ClueNotFoundError
from ...game.game import (
    BoardNotReadyError,
    create_new_game,
    get_all_games_data,
    get_game_state,
    restart_game,
    select_clue,
    validate_id,
)
from ...game.sampler import InsufficientPoolError
from ...services.game_session_service import GameNotFoundError
from ...services.utils import parse_and_validate_request, create_response

api_bp = Blueprint("jeopardy", __name__)


@api_bp.route("/new-game", methods=["POST"])
def new_game():
    """
    Starts a new game session. Returns the game ID and the initial board, every
    cell hidden.

    If not enough categories could be fetched to fill a board, no session is
    created and the endpoint returns 503 so the client stays on its loading screen.
    """
    try:
        game = create_new_game()
    except InsufficientPoolError as e:
        return create_response(error=str(e), status_code=503)

    return create_response(data=game.to_state(), status_code=201)


@api_bp.route("/select-clue", methods=["POST"])
def select_clue_route():
    """
    Handles a click on a board cell. The first selection shows the question,
    the second the answer; later selections change nothing.

    :return: A JSON response with whether the clue changed, the cell's new
             display (null if unchanged) and the full board.
    """
    required_fields = ["gameId", "clueId"]
    data, error = parse_and_validate_request(required_fields)
    if error:
        return create_response(error=error, status_code=400)

    # Validate the id formats (clue ids come from the cell's data attribute).
    # bool is an int subclass and would match clue 1
    clue_id = data["clueId"]
    if (
        not isinstance(data["gameId"], str)
        or not isinstance(clue_id, (str, int))
        or isinstance(clue_id, bool)
    ):
        return create_response(error="Invalid gameId or clueId format.", status_code=400)

    # Validate the game id
    game_id = data["gameId"]
    if not validate_id(game_id):
        return create_response(error="Invalid game ID.", status_code=404)

    try:
        result, board = select_clue(game_id, clue_id)
    except ClueNotFoundError as e:
        return create_response(error=str(e), status_code=404)
    except BoardNotReadyError as e:
        return create_response(error=str(e), status_code=409)

    return create_response(
        data={
            "changed": result is not None,
            "reveal": result.to_state() if result is not None else None,
            "board": board,
        }
    )


@api_bp.route("/game-status", methods=["POST"])
def game_status():
    """
    Returns the current status of a game, including the board.
    Requires gameId in the JSON payload.
    """
    required_fields = ["gameId"]
    data, error = parse_and_validate_request(required_fields)
    if error:
        return create_response(error=error, status_code=400)

    try:
        game = get_game_state(data["gameId"])
    except GameNotFoundError:
        return create_response(error="Invalid game ID.", status_code=404)

    return create_response(data=game.to_state())


@api_bp.route("/restart-game", methods=["POST"])
def restart_game_route():
    """
    Restarts the game with freshly fetched categories and a new board.
    Requires JSON payload with gameId.
    """
    required_fields = ["gameId"]
    data, error = parse_and_validate_request(required_fields)
    if error:
        return create_response(error=error, status_code=400)

    # Validate the game id
    game_id = data["gameId"]
    if not validate_id(game_id):
        return create_response(error="Invalid game ID.", status_code=404)

    try:
        game = restart_game(game_id)
    except InsufficientPoolError as e:
        return create_response(error=str(e), status_code=503)

    return create_response(data=game.to_state())


@api_bp.route("/get-game-data", methods=["GET"])
def get_all_game_data():
    """
    Returns the state of all game sessions.
    """
    games_data = get_all_games_data()

    return create_response(data={"games": games_data})
