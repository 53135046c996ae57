"""
Review Model - Domain Entity and Validation
============================================

A Review is built fresh from user input on every prompt round and applied
to a single row of the Reviews table. Validation is a pure check: it raises
on the first violated constraint and returns nothing on success.
"""

from dataclasses import dataclass
from datetime import date

# Every submission targets this row.
DEFAULT_REVIEW_ID = 1

MIN_RATING = 1
MAX_RATING = 5


class ValidationError(ValueError):
    """Raised when a Review field violates its constraint."""
    pass


@dataclass
class Review:
    """Book review record applied to the Reviews table."""
    review_id: int
    rating: int
    comment: str
    review_date: date


def _is_int(value) -> bool:
    # bool is an int subclass; True must not pass as a rating of 1
    return isinstance(value, int) and not isinstance(value, bool)


def validate_review(review: Review) -> None:
    """
    Check all four fields, in order, and raise ValidationError on the first failure.

    Raises:
        ValidationError: with one of "Invalid reviewID", "Invalid rating",
            "Invalid comment" or "Invalid reviewDate".
    """
    if not _is_int(review.review_id) or review.review_id <= 0:
        raise ValidationError("Invalid reviewID")

    if not _is_int(review.rating) or not MIN_RATING <= review.rating <= MAX_RATING:
        raise ValidationError("Invalid rating")

    if not isinstance(review.comment, str) or not review.comment.strip():
        raise ValidationError("Invalid comment")

    if not isinstance(review.review_date, date):
        raise ValidationError("Invalid reviewDate")
