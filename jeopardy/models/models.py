"""
This module defines the in-memory data models for the Jeopardy board. A board is a set of `Category` columns, each holding the same number of `Clue` rows, and every clue carries its own reveal state.

Classes:
- RevealState: Enum of the reveal states a clue moves through.
- DisplayMode: Enum describing what a board cell currently shows.
- Clue: A single question/answer pair and its reveal state.
- Category: A titled, ordered group of clues.
"""

import enum
from typing import List


class RevealState(enum.Enum):
    HIDDEN = "HIDDEN"
    QUESTION = "QUESTION"
    ANSWER = "ANSWER"


class DisplayMode(enum.Enum):
    BLANK = "BLANK"
    QUESTION = "QUESTION"
    ANSWER = "ANSWER"


# Hidden cells show a placeholder instead of any clue text
HIDDEN_TEXT = "?"

_DISPLAY_MODES = {
    RevealState.HIDDEN: DisplayMode.BLANK,
    RevealState.QUESTION: DisplayMode.QUESTION,
    RevealState.ANSWER: DisplayMode.ANSWER,
}


class Clue:
    """
    Represents one cell of the board.

    Attributes:
        id: Identifier assigned by the category feed. Immutable once created.
        question (str): The prompt shown on the first selection.
        answer (str): The answer shown on the second selection.
        reveal_state (RevealState): How far the clue has been revealed.
    """

    def __init__(self, id, question, answer, reveal_state=RevealState.HIDDEN):
        self._id = id
        self.question = str(question)
        # The feed occasionally sends numeric answers
        self.answer = str(answer)
        self.reveal_state = reveal_state

    @property
    def id(self):
        return self._id

    @property
    def display_mode(self) -> DisplayMode:
        return _DISPLAY_MODES[self.reveal_state]

    @property
    def display_text(self) -> str:
        if self.reveal_state is RevealState.QUESTION:
            return self.question
        if self.reveal_state is RevealState.ANSWER:
            return self.answer
        return HIDDEN_TEXT

    @property
    def highlight(self) -> bool:
        """Answered cells are marked so the front-end can colour them."""
        return self.reveal_state is RevealState.ANSWER

    def to_state(self):
        """
        Returns the render signal for this cell.

        Returns:
            dict: The clue id, the text to display, the display mode and the highlight flag.
        """
        return {
            "clueId": self._id,
            "displayText": self.display_text,
            "displayMode": self.display_mode.value,
            "highlight": self.highlight,
        }

    def __repr__(self):
        return "<Clue %r %s>" % (self._id, self.reveal_state.value)


class Category:
    """
    Represents a column of the board.

    Attributes:
        category_id: Identifier from the category feed, unique across a pool.
        title (str): Display name of the category.
        clues (List[Clue]): Ordered clues; position maps to the board row.
    """

    def __init__(self, category_id, title: str, clues: List[Clue]):
        self.category_id = category_id
        self.title = title
        self.clues = list(clues)

    def __repr__(self):
        return "<Category %r %r>" % (self.category_id, self.title)
