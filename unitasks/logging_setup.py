import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
HANDLER_NAME = "unitasks-console"


def setup_logging(level_name: str = "INFO") -> None:
    """Configure the root logger with a single console handler.

    Calling it again only adjusts the level, so the app factory can run
    more than once in a process (tests) without duplicating output.
    """
    level = getattr(logging, level_name.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)

    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handler.set_name(HANDLER_NAME)
        root.addHandler(handler)

    logging.getLogger(__name__).debug("Logging initialized at %s", logging.getLevelName(level))
