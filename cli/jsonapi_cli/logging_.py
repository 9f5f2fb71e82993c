from __future__ import annotations

import logging

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Transport internals only surface with --verbose.
_QUIET_LOGGERS = ("httpx", "httpcore")


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("jsonapi_client").setLevel(level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(level)
