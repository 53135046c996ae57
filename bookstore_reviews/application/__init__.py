# Application Layer
# =================
# Use cases: validate a review and apply it through the database connector.

from .updater import ReviewUpdater, build_update_statement, escape_sql_string

__all__ = ["ReviewUpdater", "build_update_statement", "escape_sql_string"]
