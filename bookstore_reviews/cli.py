"""
Review Updater - Command Line Entry Point
==========================================

Connects to the bookstore database and runs the interactive prompt loop.
A failed connection is logged but does not stop the loop; updates then
fail and the loop halts after the first submission.
"""

import logging

from .application import ReviewUpdater
from .infrastructure.config import get_settings
from .infrastructure.persistence import Database
from .presentation import PromptLoop

logger = logging.getLogger(__name__)


def setup_logging(level: str, fmt: str):
    """Configure logging for the entire application."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=fmt)


def main():
    """Run the review update session."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    for issue in settings.validate():
        logger.warning(issue)

    db = Database(settings.database.url)
    db.connect()

    try:
        outcome = PromptLoop(ReviewUpdater(db)).run()
        logger.debug(f"Prompt loop ended: {outcome.value}")
    except KeyboardInterrupt:
        print("\nCancelled")
    finally:
        db.close()


if __name__ == "__main__":
    main()
