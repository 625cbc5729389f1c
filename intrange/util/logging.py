import atexit
import sys
from logging import DEBUG, INFO, WARN, ERROR, CRITICAL, Formatter, addLevelName, StreamHandler, getLogger
from logging.handlers import QueueHandler, QueueListener
from queue import Queue
from typing import Optional

import progressbar

from .config import CONFIG

DEFAULT_FORMAT = '%(asctime)s %(levelname)-5s - %(name)s:%(lineno)-4d - %(message)s'

__queue: Optional[Queue] = None
__listener: Optional[QueueListener] = None


def level(name: str) -> int:
    lower_name = name.lower()

    if lower_name == "debug":
        return DEBUG
    elif lower_name == "info":
        return INFO
    elif lower_name == "warn" or lower_name == "warning":
        return WARN
    elif lower_name == "error":
        return ERROR
    elif lower_name == "fatal" or lower_name == "critical":
        return CRITICAL

    raise ValueError(f"Unrecognized log level '{name}'")


def configure(override_level: Optional[int] = None):
    """
    Routes all log records through a queue to a single stderr handler.

    :param override_level: a level that takes precedence over logging.level from the configuration if it is lower
    """
    global __listener, __queue

    log_level = level(CONFIG.get_str("logging.level", "WARN"))

    if override_level is not None:
        log_level = min(log_level, override_level)

    root = getLogger()
    root.setLevel(log_level)

    if __listener is not None:
        return

    wrap_stderr()

    addLevelName(WARN, "WARN")
    addLevelName(CRITICAL, "FATAL")

    __queue = Queue(-1)
    root.addHandler(QueueHandler(__queue))

    Formatter.default_msec_format = '%s.%03d'

    handler = StreamHandler(sys.stderr)
    handler.setFormatter(Formatter(CONFIG.get_str("logging.format", DEFAULT_FORMAT)))

    __listener = QueueListener(__queue, handler)
    __listener.start()

    atexit.register(__listener.stop)


def is_configured() -> bool:
    return __listener is not None


def wrap_stderr() -> bool:
    """
    Lets progress bars and log lines share stderr without interleaving.

    A stderr that was already redirected (e.g. by click's test runner) is left alone, as progressbar2 would replace
    it with the process stderr.

    :return: whether stderr was wrapped
    """
    if sys.stderr is not progressbar.streams.original_stderr:
        return False

    progressbar.streams.wrap_stderr()
    return True
