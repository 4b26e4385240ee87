"""
Logging setup
One stdout handler for the API process; modules log via getLogger(__name__)
"""

import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """
    Configure centralized application logging.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Access logs are noisy for a polling dashboard
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
