"""
Category sampling for the Jeopardy board.

Picks the categories that make up a board: a fixed number of distinct
categories drawn uniformly at random from the pool fetched for the session.
"""

import logging
import random
from typing import Callable, List, Mapping, Sequence, Union

from ..config import NUM_CATEGORIES
from ..models.models import Category

logger = logging.getLogger(__name__)


class InsufficientPoolError(Exception):
    """Raised when the pool holds fewer distinct categories than a board needs."""

    def __init__(self, available: int, required: int):
        self.available = available
        self.required = required
        super().__init__(
            f"Need {required} distinct categories to build a board, "
            f"but only {available} are available."
        )


def sample_categories(
    pool: "Union[Mapping[object, Category], Sequence[Category]]",
    count: int = NUM_CATEGORIES,
    rand_index: "Callable[[int], int] | None" = None,
) -> List[Category]:
    """
    Draws `count` distinct categories from the pool, uniformly at random.

    Uses rejection sampling by index: a random index in [0, N) is drawn and
    accepted only if it has not been chosen yet, until `count` indices are
    collected. The pool itself is never modified.

    :param pool: Categories keyed by category id, or a plain sequence of categories.
    :param count: The number of categories to draw.
    :param rand_index: Callable returning a random int in [0, n) for a given n.
                       Defaults to random.randrange; tests pass a seeded generator.
    :return: A new list of `count` categories in draw order.
    :raises InsufficientPoolError: If the pool is smaller than `count`.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    if rand_index is None:
        rand_index = random.randrange

    candidates = list(pool.values()) if isinstance(pool, Mapping) else list(pool)

    # Categories repeated in a sequence pool only count once
    distinct = len({category.category_id for category in candidates})
    if distinct < count:
        raise InsufficientPoolError(distinct, count)

    chosen_indexes = []
    chosen_ids = set()
    while len(chosen_indexes) < count:
        index = rand_index(len(candidates))
        category_id = candidates[index].category_id
        if category_id not in chosen_ids:
            chosen_indexes.append(index)
            chosen_ids.add(category_id)

    logger.debug("Sampled categories %s from a pool of %d", sorted(chosen_ids, key=str), len(candidates))
    return [candidates[index] for index in chosen_indexes]
