import logging, sys

from slotsync.settings import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"

# uvicorn installs its own handlers on these unless told otherwise
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(level: str = LOG_LEVEL):
    """
    Send everything (ours and uvicorn's) through one stdout handler on the
    root logger, so request lines and normalizer warnings share a format.
    """
    for name in SERVER_LOGGERS:
        server_log = logging.getLogger(name)
        server_log.handlers.clear()
        server_log.propagate = True

    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if logger.handlers:  # don’t double add during reload
        return
    h = logging.StreamHandler(sys.stdout)
    h.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(h)
