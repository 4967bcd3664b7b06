"""
Category feed client for the Jeopardy board.

Fetches categories and their clues from the remote trivia API and builds the
category pool a board is sampled from.

Public API
----------
fetch_category(category_id)          → Category        - fetch & parse one category
fetch_category_pool(category_ids)    → dict[id, Category] - fetch a range, skipping failures
"""

import logging

import requests

from ..config import CATEGORY_ID_RANGE, JEOPARDY_API_URL, NUM_QUESTIONS_PER_CAT, REQUEST_TIMEOUT
from ..models.models import Category, Clue

logger = logging.getLogger(__name__)


class CategoryFetchError(Exception):
    """Raised when a single category cannot be fetched or is unusable."""

    def __init__(self, category_id, reason: str):
        self.category_id = category_id
        self.reason = reason
        super().__init__(f"Category {category_id}: {reason}")


# ---------------------------------------------------------------------------
# HTTP session — lazy singleton, reused across all category requests.
# Tests patch _get_session() so no network traffic happens.
# ---------------------------------------------------------------------------
_session = None


def _get_session() -> requests.Session:
    """Returns the shared requests session, creating it on first call."""
    global _session
    if _session is None:
        _session = requests.Session()
        _session.headers.update({"Accept": "application/json"})
    return _session


def _is_valid_id(value) -> bool:
    # bool is an int subclass, and ids must be usable as dict keys
    return isinstance(value, (int, str)) and not isinstance(value, bool)


def _parse_category(category_id, payload: dict) -> Category:
    """
    Transforms the feed's JSON shape into a Category.

    The feed returns:
        {"id": 2, "title": "baseball", "clues_count": 5,
         "clues": [{"id": 7, "question": "...", "answer": "...", ...}, ...]}

    Only the first NUM_QUESTIONS_PER_CAT clues are kept so every board is rectangular.
    Ids must be ints or strings and the title must be a string; anything else
    rejects the whole category.
    """
    try:
        raw_clues = payload["clues"]
        clues = [Clue(raw["id"], raw["question"], raw["answer"]) for raw in raw_clues]
        category = Category(payload["id"], payload["title"], clues[:NUM_QUESTIONS_PER_CAT])
    except (KeyError, TypeError) as e:
        raise CategoryFetchError(category_id, f"unexpected response format ({e!r})")

    if not _is_valid_id(category.category_id):
        raise CategoryFetchError(category_id, f"invalid category id {category.category_id!r}")
    if not isinstance(category.title, str):
        raise CategoryFetchError(category_id, f"invalid title {category.title!r}")
    bad_clue_ids = [clue.id for clue in category.clues if not _is_valid_id(clue.id)]
    if bad_clue_ids:
        raise CategoryFetchError(category_id, f"invalid clue ids {bad_clue_ids!r}")

    if len(clues) < NUM_QUESTIONS_PER_CAT:
        raise CategoryFetchError(
            category_id,
            f"has {len(clues)} clues, {NUM_QUESTIONS_PER_CAT} are needed",
        )
    return category


def fetch_category(category_id) -> Category:
    """
    Fetches one category and its clues from the feed.

    :param category_id: The feed's id for the category.
    :return: The parsed Category with every clue hidden.
    :raises CategoryFetchError: On network errors, non-2xx responses, bad JSON
                                or a category with too few clues.
    """
    url = f"{JEOPARDY_API_URL.rstrip('/')}/category"
    try:
        response = _get_session().get(url, params={"id": category_id}, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
        payload = response.json()
    except requests.exceptions.RequestException as e:
        raise CategoryFetchError(category_id, f"request failed ({e})")
    except ValueError:
        raise CategoryFetchError(category_id, "response is not valid JSON")

    return _parse_category(category_id, payload)


def fetch_category_pool(category_ids=CATEGORY_ID_RANGE) -> dict:
    """
    Fetches every candidate category and returns those that succeeded.

    Individual failures are logged and the id is left out, so the pool can end
    up smaller than the requested range. Whether it is still big enough for a
    board is the sampler's decision.

    :param category_ids: Iterable of category ids to try.
    :return: Dict mapping category_id to Category, in fetch order.
    """
    category_ids = list(category_ids)
    pool = {}
    for category_id in category_ids:
        try:
            category = fetch_category(category_id)
        except CategoryFetchError as e:
            logger.warning("Skipping category %s: %s", category_id, e.reason)
            continue

        if category.category_id in pool:
            logger.warning("Category %s returned a duplicate id %s", category_id, category.category_id)
            continue
        pool[category.category_id] = category

    logger.info("Fetched category pool with %d of %d categories", len(pool), len(category_ids))
    return pool
