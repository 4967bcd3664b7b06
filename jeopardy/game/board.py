"""
The clue board for a single game.

Holds the categories in play and moves each clue through its reveal states
when the player selects it:

    HIDDEN → QUESTION → ANSWER

Transitions only ever go forward one step. Selecting a clue that already
shows its answer does nothing.
"""

import logging
from typing import List, NamedTuple, Optional

from ..config import NUM_QUESTIONS_PER_CAT
from ..models.models import Category, Clue, DisplayMode, RevealState

logger = logging.getLogger(__name__)


class ClueNotFoundError(Exception):
    """Raised when a selected clue id is not on the active board."""

    def __init__(self, clue_id):
        self.clue_id = clue_id
        super().__init__(f"No clue with id {clue_id!r} on the current board.")


class RevealResult(NamedTuple):
    """What the front-end should show after a successful selection."""

    clue_id: object
    reveal_state: RevealState
    display_text: str
    display_mode: DisplayMode
    highlight: bool

    def to_state(self):
        return {
            "clueId": self.clue_id,
            "revealState": self.reveal_state.value,
            "displayText": self.display_text,
            "displayMode": self.display_mode.value,
            "highlight": self.highlight,
        }


_NEXT_STATE = {
    RevealState.HIDDEN: RevealState.QUESTION,
    RevealState.QUESTION: RevealState.ANSWER,
}


class ClueBoard:
    def __init__(self, clues_per_category: int = NUM_QUESTIONS_PER_CAT):
        self.clues_per_category = clues_per_category
        self.categories: List[Category] = []
        self._clues_by_id = {}
        self._clues_by_text_id = {}

    def initialize_board(self, selection: List[Category]):
        """
        Replaces the whole board with `selection` and hides every clue.

        :param selection: The categories in play, in column order.
        :raises ValueError: If category ids repeat or a category does not hold exactly
                            `clues_per_category` clues.
        """
        selection = list(selection)
        category_ids = [category.category_id for category in selection]
        if len(set(category_ids)) != len(category_ids):
            raise ValueError(f"Board categories must be distinct, got ids {category_ids}")
        for category in selection:
            if len(category.clues) != self.clues_per_category:
                raise ValueError(
                    f"Category {category.category_id!r} has {len(category.clues)} clues, "
                    f"every board category needs {self.clues_per_category}"
                )

        clues_by_id = {}
        clues_by_text_id = {}
        for category in selection:
            for clue in category.clues:
                clue.reveal_state = RevealState.HIDDEN
                if clue.id in clues_by_id:
                    # Same outcome as scanning the board in column/row order
                    logger.warning("Duplicate clue id %r on board; keeping the first", clue.id)
                    continue
                clues_by_id[clue.id] = clue
                clues_by_text_id.setdefault(str(clue.id), clue)

        self.categories = selection
        self._clues_by_id = clues_by_id
        self._clues_by_text_id = clues_by_text_id
        logger.debug("Board initialized with %d categories and %d clues", len(selection), len(clues_by_id))

    def find_clue(self, clue_id) -> Clue:
        # True == 1 as a dict key, so booleans would hit clue 1
        if isinstance(clue_id, bool):
            raise ClueNotFoundError(clue_id)
        clue = self._clues_by_id.get(clue_id)
        if clue is None:
            # Ids posted by the browser arrive as strings
            clue = self._clues_by_text_id.get(str(clue_id))
        if clue is None:
            raise ClueNotFoundError(clue_id)
        return clue

    def select_clue(self, clue_id) -> Optional[RevealResult]:
        """
        Advances the selected clue by one reveal state.

        :param clue_id: Id of the clue the player selected.
        :return: The new display for the clue, or None if it was already showing its answer.
        :raises ClueNotFoundError: If no clue on the board has this id. The board is left unchanged.
        """
        clue = self.find_clue(clue_id)
        next_state = _NEXT_STATE.get(clue.reveal_state)
        if next_state is None:
            return None

        logger.debug("Clue %r: %s -> %s", clue.id, clue.reveal_state.value, next_state.value)
        clue.reveal_state = next_state
        return RevealResult(
            clue_id=clue.id,
            reveal_state=clue.reveal_state,
            display_text=clue.display_text,
            display_mode=clue.display_mode,
            highlight=clue.highlight,
        )

    def is_complete(self) -> bool:
        """True once every clue on a non-empty board shows its answer."""
        return bool(self._clues_by_id) and all(
            clue.reveal_state is RevealState.ANSWER for clue in self._clues_by_id.values()
        )

    def render_state(self):
        """
        Returns the board as the front-end draws it.

        Returns:
            dict: Upper-cased category headers and a row-major grid of cell states.
        """
        num_rows = len(self.categories[0].clues) if self.categories else 0
        return {
            "categories": [
                {"categoryId": category.category_id, "title": category.title.upper()}
                for category in self.categories
            ],
            "rows": [
                [category.clues[row].to_state() for category in self.categories]
                for row in range(num_rows)
            ],
            "complete": self.is_complete(),
        }
