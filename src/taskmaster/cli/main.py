# src/taskmaster/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import level_from_name, setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    console_level = level_from_name(getattr(settings, "log_level", "INFO"))
    log_dir = settings.log_dir if settings.file_logging else None
    log_file = setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)
    if log_file is not None:
        logger.info("Logging to %s", log_file)

    state = create_initial_state(settings=settings)
    try:
        run_console_loop(state)
    finally:
        stats = state.store.stats()
        logger.info(
            "Bye. total=%d completed=%d pending=%d", stats.total, stats.completed, stats.pending
        )


if __name__ == "__main__":
    main()
