"""
Tests for game_session_service.py.

The store is process memory, so every test starts from clear_games().
"""

import unittest

from jeopardy.services.game_session_service import (
    GameNotFoundError,
    add_new_game,
    check_game_exists,
    clear_games,
    get_all_games,
    get_game,
)


class _Session:
    id = None


class TestGameSessionService(unittest.TestCase):

    def setUp(self):
        clear_games()

    def tearDown(self):
        clear_games()

    def test_add_new_game_assigns_id(self):
        session = _Session()
        game_id = add_new_game(session)
        self.assertEqual(session.id, game_id)
        self.assertTrue(check_game_exists(game_id))
        self.assertIs(get_game(game_id), session)

    def test_ids_are_unique(self):
        first = add_new_game(_Session())
        second = add_new_game(_Session())
        self.assertNotEqual(first, second)

    def test_unknown_game(self):
        self.assertFalse(check_game_exists("missing"))
        with self.assertRaises(GameNotFoundError):
            get_game("missing")

    def test_non_string_id_is_unknown(self):
        self.assertFalse(check_game_exists(["not", "hashable"]))
        with self.assertRaises(GameNotFoundError):
            get_game(None)

    def test_game_not_found_is_value_error(self):
        with self.assertRaises(ValueError):
            get_game("missing")

    def test_get_all_games(self):
        sessions = [_Session(), _Session()]
        for session in sessions:
            add_new_game(session)
        self.assertCountEqual(get_all_games(), sessions)


if __name__ == "__main__":
    unittest.main()
