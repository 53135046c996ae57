"""
Database Connector - Bookstore Review Persistence
==================================================

Holds a single long-lived connection to the bookstore database and sends
raw SQL text through it. There is no pooling, no reconnection and no health
checking: if connect() fails the failure is logged and every later query
fails with SQLExecutionError.

Usage:
    db = Database(get_settings().database.url)
    db.connect()
    affected = db.execute("UPDATE Reviews SET Rating = 4 WHERE ReviewID = 1;")
    db.close()
"""

import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Optional, Union

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Connection, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool

from ...domain import Review

logger = logging.getLogger(__name__)

REVIEWS_TABLE = "Reviews"

# Quote doubling is the only escaping applied to literals, so MySQL
# sessions must treat backslashes as ordinary characters.
MYSQL_INIT_COMMAND = "SET SESSION sql_mode = CONCAT(@@sql_mode, ',NO_BACKSLASH_ESCAPES')"


class DatabaseError(Exception):
    """Base exception for database errors."""
    pass


class DatabaseConnectionError(DatabaseError):
    """Raised when an operation needs a connection that was never established."""
    pass


class SQLExecutionError(DatabaseError):
    """Raised when a statement could not be executed."""
    pass


class Database:
    """
    One engine, one connection, shared by every update in the session.

    Each statement is its own unit of work: it is committed on success and
    rolled back on failure.
    """

    def __init__(self, url: Union[str, URL]):
        self._url = make_url(url)
        connect_args = {}
        if self._url.get_backend_name() == "mysql":
            connect_args["init_command"] = MYSQL_INIT_COMMAND
        self._engine = create_engine(self._url, poolclass=NullPool, connect_args=connect_args)
        self._connection: Optional[Connection] = None

    def connect(self) -> bool:
        """Open the connection. Returns True if successful, logs and returns False otherwise."""
        try:
            self._connection = self._engine.connect()
        except SQLAlchemyError as e:
            logger.error(f"Error connecting to database: {e}")
            self._connection = None
            return False

        logger.info(f"Connected to database {self._url.render_as_string(hide_password=True)}")
        return True

    def is_connected(self) -> bool:
        return self._connection is not None and not self._connection.closed

    @contextmanager
    def _unit_of_work(self):
        """Yield the shared connection; commit on success, roll back on failure."""
        if not self.is_connected():
            raise DatabaseConnectionError("Not connected to database")
        conn = self._connection
        try:
            yield conn
            conn.commit()
        except SQLAlchemyError:
            conn.rollback()
            raise

    def execute(self, sql: str) -> int:
        """
        Execute a complete SQL statement given as text.

        The text is passed to the driver without parameter substitution, so
        literal '%' and ':' characters in it are preserved.

        Returns:
            Number of rows affected.

        Raises:
            SQLExecutionError: if not connected or the statement fails.
        """
        try:
            with self._unit_of_work() as conn:
                result = conn.exec_driver_sql(
                    sql, execution_options={"no_parameters": True}
                )
                affected = result.rowcount
        except (DatabaseConnectionError, SQLAlchemyError) as e:
            logger.error(f"Error executing SQL: {e}")
            raise SQLExecutionError(str(e)) from e

        logger.info("SQL executed successfully")
        logger.info(f"Result: {affected} row(s) affected")
        return affected

    def init(self):
        """Create the Reviews table if it does not exist yet."""
        with self._unit_of_work() as conn:
            conn.execute(text(f"""
                CREATE TABLE IF NOT EXISTS {REVIEWS_TABLE} (
                    ReviewID INTEGER PRIMARY KEY,
                    Rating INTEGER NOT NULL,
                    Comment TEXT NOT NULL,
                    ReviewDate DATE NOT NULL
                )
            """))
        logger.info(f"Table {REVIEWS_TABLE} ready")

    def fetch_review(self, review_id: int) -> Optional[Review]:
        """Get review by ID."""
        with self._unit_of_work() as conn:
            row = conn.execute(
                text(
                    f"SELECT ReviewID, Rating, Comment, ReviewDate "
                    f"FROM {REVIEWS_TABLE} WHERE ReviewID = :review_id"
                ),
                {"review_id": review_id},
            ).mappings().first()
        return self._row_to_review(row) if row else None

    def close(self):
        """Release the connection and the engine. Safe to call more than once."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None
        self._engine.dispose()

    def _row_to_review(self, row) -> Review:
        """Convert database row to Review object."""
        review_date = row["ReviewDate"]
        # sqlite hands DATE columns back as text
        if isinstance(review_date, str):
            review_date = datetime.strptime(review_date[:10], "%Y-%m-%d").date()
        elif isinstance(review_date, datetime):
            review_date = review_date.date()

        return Review(
            review_id=row["ReviewID"],
            rating=row["Rating"],
            comment=row["Comment"],
            review_date=review_date,
        )
