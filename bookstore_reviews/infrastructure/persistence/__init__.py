from .database import (
    Database,
    DatabaseConnectionError,
    DatabaseError,
    SQLExecutionError,
)

__all__ = [
    "Database",
    "DatabaseConnectionError",
    "DatabaseError",
    "SQLExecutionError",
]
