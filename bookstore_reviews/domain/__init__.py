# Domain Layer
# ============
# Pure review model and validation rules. No I/O, no database access.

from .review import (
    DEFAULT_REVIEW_ID,
    MAX_RATING,
    MIN_RATING,
    Review,
    ValidationError,
    validate_review,
)

__all__ = [
    "DEFAULT_REVIEW_ID",
    "MAX_RATING",
    "MIN_RATING",
    "Review",
    "ValidationError",
    "validate_review",
]
