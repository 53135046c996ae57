"""
Shared fixtures: an in-memory sqlite bookstore and a scripted terminal.
"""

import pytest

from bookstore_reviews.infrastructure.persistence import Database


class ScriptedTerminal:
    """Feeds canned answers to read_line and records everything written."""

    def __init__(self, answers):
        self._answers = list(answers)
        self.prompts = []
        self.output = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)


@pytest.fixture
def terminal():
    """Factory: terminal(["4", "Great read!", "2024-01-15", "no"])."""
    return ScriptedTerminal


@pytest.fixture
def db():
    """Connected in-memory database with the Reviews table and row 1 seeded."""
    database = Database("sqlite://")
    assert database.connect()
    database.init()
    database.execute(
        "INSERT INTO Reviews (ReviewID, Rating, Comment, ReviewDate) "
        "VALUES (1, 3, 'Initial', '2023-12-01');"
    )
    yield database
    database.close()
