"""
Tests for the Review Updater: statement building, validation gate, dispatch.
"""

import logging
from datetime import date
from unittest.mock import MagicMock

import pytest

from bookstore_reviews.application import ReviewUpdater, build_update_statement, escape_sql_string
from bookstore_reviews.domain import DEFAULT_REVIEW_ID, Review
from bookstore_reviews.infrastructure.persistence import Database, SQLExecutionError


def make_review(**overrides):
    fields = dict(
        review_id=DEFAULT_REVIEW_ID,
        rating=4,
        comment="Great read!",
        review_date=date(2024, 1, 15),
    )
    fields.update(overrides)
    return Review(**fields)


# ── Statement building ────────────────────────────────────────────

def test_statement_for_basic_review():
    sql = build_update_statement(make_review())
    assert sql == (
        "UPDATE Reviews SET Rating = 4, Comment = 'Great read!', "
        "ReviewDate = '2024-01-15' WHERE ReviewID = 1;"
    )


def test_statement_escapes_single_quote():
    sql = build_update_statement(make_review(comment="it's great"))
    assert "Comment = 'it''s great'" in sql


@pytest.mark.parametrize("comment", ["it's", "''", "'leading", "trailing'", "a'b'c", "O'Reilly's 'best'"])
def test_escape_round_trips(comment):
    escaped = escape_sql_string(comment)
    assert escaped.count("'") == 2 * comment.count("'")
    assert escaped.replace("''", "'") == comment


def test_statement_date_has_no_time_component():
    sql = build_update_statement(make_review(review_date=date(2024, 2, 9)))
    assert "ReviewDate = '2024-02-09'" in sql


# ── update_review ─────────────────────────────────────────────────

def test_invalid_review_executes_nothing(caplog):
    database = MagicMock(spec=Database)
    updater = ReviewUpdater(database)

    with caplog.at_level(logging.ERROR):
        assert updater.update_review(make_review(rating=7)) is False

    database.execute.assert_not_called()
    assert "Error updating review" in caplog.text
    # generic message only
    assert "Invalid rating" not in caplog.text


def test_valid_review_dispatches_statement(caplog):
    database = MagicMock(spec=Database)
    database.execute.return_value = 1
    updater = ReviewUpdater(database)

    with caplog.at_level(logging.INFO):
        assert updater.update_review(make_review()) is True

    database.execute.assert_called_once_with(build_update_statement(make_review()))
    assert "Review updated successfully" in caplog.text


def test_execution_failure_returns_false_without_success_log(caplog):
    database = MagicMock(spec=Database)
    database.execute.side_effect = SQLExecutionError("boom")
    updater = ReviewUpdater(database)

    with caplog.at_level(logging.INFO):
        assert updater.update_review(make_review()) is False

    assert "Review updated successfully" not in caplog.text


def test_missing_row_warns_but_succeeds(caplog):
    database = MagicMock(spec=Database)
    database.execute.return_value = 0
    updater = ReviewUpdater(database)

    with caplog.at_level(logging.WARNING):
        assert updater.update_review(make_review()) is True
    assert "No review found with ReviewID=1" in caplog.text


# ── Against a real (sqlite) table ─────────────────────────────────

def test_update_writes_all_fields(db):
    updater = ReviewUpdater(db)
    assert updater.update_review(make_review(comment="it's great"))

    stored = db.fetch_review(1)
    assert stored.rating == 4
    assert stored.comment == "it's great"
    assert stored.review_date == date(2024, 1, 15)


@pytest.mark.parametrize("comment", ["a\\", "x\\'y", "C:\\new", "x\\', Rating = 1 -- "])
def test_backslash_comments_round_trip_and_touch_one_row(db, comment):
    db.execute(
        "INSERT INTO Reviews (ReviewID, Rating, Comment, ReviewDate) "
        "VALUES (2, 5, 'Other', '2023-11-01');"
    )
    updater = ReviewUpdater(db)
    assert updater.update_review(make_review(comment=comment))

    assert db.fetch_review(1).comment == comment
    other = db.fetch_review(2)
    assert (other.rating, other.comment) == (5, "Other")


def test_repeated_updates_overwrite_same_row(db):
    updater = ReviewUpdater(db)
    assert updater.update_review(make_review(rating=2, comment="meh"))
    assert updater.update_review(make_review(rating=5, comment="loved it"))

    rows = db._connection.exec_driver_sql("SELECT COUNT(*) FROM Reviews").scalar()
    assert rows == 1
    stored = db.fetch_review(1)
    assert stored.rating == 5
    assert stored.comment == "loved it"


def test_update_fails_when_not_connected():
    database = Database("sqlite://")
    assert ReviewUpdater(database).update_review(make_review()) is False


def test_statement_is_logged_at_debug(caplog):
    database = MagicMock(spec=Database)
    database.execute.return_value = 1

    with caplog.at_level(logging.DEBUG):
        ReviewUpdater(database).update_review(make_review())

    assert f"Update statement: {build_update_statement(make_review())}" in caplog.text
