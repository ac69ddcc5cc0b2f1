from __future__ import annotations

import logging
import sys


def setup_logging(debug: bool = False) -> None:
    """Configure root logging for the app and scripts (library code never calls this)."""

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d | %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    # Keep third-party chatter out of debug sessions.
    for name in ("PIL", "urllib3", "watchdog"):
        logging.getLogger(name).setLevel(logging.WARNING)
