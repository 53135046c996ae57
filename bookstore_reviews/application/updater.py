"""
Review Updater - Validate and Apply a Review
=============================================

Turns a validated Review into one UPDATE statement that sets Rating,
Comment and ReviewDate together, and dispatches it through the injected
Database. Returns True only once the statement has completed.
"""

import logging

from ..domain import Review, ValidationError, validate_review
from ..infrastructure.persistence import Database, SQLExecutionError

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"


def escape_sql_string(value: str) -> str:
    """Escape a value for a single-quoted SQL literal by doubling quotes."""
    return value.replace("'", "''")


def build_update_statement(review: Review) -> str:
    """Render the UPDATE statement for an already-validated review."""
    return (
        f"UPDATE Reviews "
        f"SET Rating = {review.rating}, "
        f"Comment = '{escape_sql_string(review.comment)}', "
        f"ReviewDate = '{review.review_date.strftime(DATE_FORMAT)}' "
        f"WHERE ReviewID = {review.review_id};"
    )


class ReviewUpdater:
    """
    Applies reviews to the Reviews table.

    USAGE:
        updater = ReviewUpdater(db)
        if updater.update_review(review):
            ...  # safe to continue
    """

    def __init__(self, database: Database):
        self._database = database

    def update_review(self, review: Review) -> bool:
        """
        Validate the review and write it.

        Returns:
            True if the statement completed, False if validation or
            execution failed. Nothing is executed when validation fails.
        """
        try:
            validate_review(review)
        except ValidationError as e:
            logger.error("Error updating review")
            logger.debug(f"Validation failed: {e}")
            return False

        sql = build_update_statement(review)
        logger.debug(f"Update statement: {sql}")

        try:
            affected = self._database.execute(sql)
        except SQLExecutionError:
            # already logged by the connector
            return False

        if affected == 0:
            logger.warning(f"No review found with ReviewID={review.review_id}")

        logger.info("Review updated successfully")
        return True
