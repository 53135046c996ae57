"""
Bookstore Review Updater - Entry Point
======================================

Run this to rate the bookstore review interactively:
    python main.py

Connection settings default to root@localhost/bookstore with no password.
Override them with BOOKSTORE_DB_* variables in the environment or a .env file.
"""

from bookstore_reviews.cli import main


if __name__ == "__main__":
    main()
