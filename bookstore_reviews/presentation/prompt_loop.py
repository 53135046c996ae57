"""
Prompt Loop - Interactive Review Entry
=======================================

Asks for rating, comment and date, submits the review, then asks whether
to go again. Runs as an explicit state machine so repeated bad input never
grows the stack.

    ASK_RATING -> ASK_COMMENT -> ASK_DATE -> SUBMIT -> ASK_REPEAT -> (ASK_RATING | TERMINATE)

KNOWN QUIRK: an unparseable date sends the user back to the rating question,
not just the date question. This matches the long-standing behaviour of the
tool and is kept on purpose.
"""

import logging
import re
from datetime import date, datetime
from enum import Enum
from typing import Callable, Optional

from ..application import ReviewUpdater
from ..domain import DEFAULT_REVIEW_ID, MAX_RATING, MIN_RATING, Review

logger = logging.getLogger(__name__)

RATING_PROMPT = f"Enter rating ({MIN_RATING}-{MAX_RATING}): "
COMMENT_PROMPT = "Enter comment: "
DATE_PROMPT = "Enter review date (YYYY-MM-DD): "
REPEAT_PROMPT = "Do you want to rate again? (yes/no): "

WELCOME_MSG = "Welcome to the review update system."
GOODBYE_MSG = "Goodbye!"
INVALID_RATING_MSG = f"Invalid rating. Rating must be a number between {MIN_RATING} and {MAX_RATING}."
INVALID_DATE_MSG = "Invalid date format. Please enter date in YYYY-MM-DD format."

RATING_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


class InputFormatError(ValueError):
    """Raised when typed text cannot be parsed into a rating or a date."""
    pass


class PromptState(Enum):
    ASK_RATING = "ask_rating"
    ASK_COMMENT = "ask_comment"
    ASK_DATE = "ask_date"
    SUBMIT = "submit"
    ASK_REPEAT = "ask_repeat"
    TERMINATE = "terminate"


class LoopOutcome(Enum):
    """Why the loop stopped."""
    FINISHED = "finished"          # user declined to rate again
    HALTED = "halted"              # the update failed; no repeat prompt
    INPUT_CLOSED = "input_closed"  # stdin reached EOF


def parse_rating(text: str) -> int:
    """Parse a rating line. Raises InputFormatError unless it is an integer in range."""
    stripped = text.strip()
    if not RATING_PATTERN.fullmatch(stripped):
        raise InputFormatError(f"Not a number: {text!r}")
    rating = int(stripped)

    if not MIN_RATING <= rating <= MAX_RATING:
        raise InputFormatError(f"Rating out of range: {rating}")
    return rating


def parse_review_date(text: str) -> date:
    """Parse a YYYY-MM-DD line into a date. Raises InputFormatError otherwise."""
    try:
        return datetime.strptime(text.strip(), "%Y-%m-%d").date()
    except ValueError:
        raise InputFormatError(f"Not a YYYY-MM-DD date: {text!r}")


class PromptLoop:
    """
    Interactive loop that owns the terminal for the session.

    USAGE:
        loop = PromptLoop(ReviewUpdater(db))
        outcome = loop.run()

    read_line and write default to input() and print(); tests pass scripted
    replacements.
    """

    def __init__(
        self,
        updater: ReviewUpdater,
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ):
        self._updater = updater
        self._read_line = read_line
        self._write = write

        self._rating: Optional[int] = None
        self._comment: Optional[str] = None
        self._review_date: Optional[date] = None

    def run(self) -> LoopOutcome:
        """Run rounds until the user declines, an update fails, or input ends."""
        self._write(WELCOME_MSG)

        state = PromptState.ASK_RATING
        outcome = LoopOutcome.FINISHED

        while state is not PromptState.TERMINATE:
            try:
                if state is PromptState.ASK_RATING:
                    state = self._ask_rating()
                elif state is PromptState.ASK_COMMENT:
                    state = self._ask_comment()
                elif state is PromptState.ASK_DATE:
                    state = self._ask_date()
                elif state is PromptState.SUBMIT:
                    state = self._submit()
                    if state is PromptState.TERMINATE:
                        outcome = LoopOutcome.HALTED
                elif state is PromptState.ASK_REPEAT:
                    state = self._ask_repeat()
            except EOFError:
                logger.info("Input closed, stopping")
                outcome = LoopOutcome.INPUT_CLOSED
                state = PromptState.TERMINATE

        return outcome

    # ── States ─────────────────────────────────────────────────────

    def _ask_rating(self) -> PromptState:
        try:
            self._rating = parse_rating(self._read_line(RATING_PROMPT))
        except InputFormatError as e:
            logger.debug(str(e))
            self._write(INVALID_RATING_MSG)
            return PromptState.ASK_RATING
        return PromptState.ASK_COMMENT

    def _ask_comment(self) -> PromptState:
        # kept verbatim; emptiness is checked when the review is validated
        self._comment = self._read_line(COMMENT_PROMPT)
        return PromptState.ASK_DATE

    def _ask_date(self) -> PromptState:
        try:
            self._review_date = parse_review_date(self._read_line(DATE_PROMPT))
        except InputFormatError as e:
            logger.debug(str(e))
            self._write(INVALID_DATE_MSG)
            # restarts the whole round, see KNOWN QUIRK above
            return PromptState.ASK_RATING
        return PromptState.SUBMIT

    def _submit(self) -> PromptState:
        review = Review(
            review_id=DEFAULT_REVIEW_ID,
            rating=self._rating,
            comment=self._comment,
            review_date=self._review_date,
        )
        self._rating = self._comment = self._review_date = None

        if self._updater.update_review(review):
            return PromptState.ASK_REPEAT
        return PromptState.TERMINATE

    def _ask_repeat(self) -> PromptState:
        answer = self._read_line(REPEAT_PROMPT)
        if answer.strip().lower() == "yes":
            return PromptState.ASK_RATING
        self._write(GOODBYE_MSG)
        return PromptState.TERMINATE
