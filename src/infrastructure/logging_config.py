"""
Process-wide logging setup.

Modules log through logging.getLogger(__name__); configure_logging() is
called once by the composition root.
"""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # httpx logs every request URL at INFO, which would leak the Finnhub token.
    logging.getLogger("httpx").setLevel(logging.WARNING)
