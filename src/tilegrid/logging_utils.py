"""
Logging utilities for collecting engine logs in a host console.

Every module logs through `logging.getLogger(__name__)`, so all engine
records propagate through the "tilegrid" logger.
"""
from __future__ import annotations

import logging
from queue import Queue
from typing import Optional

ENGINE_LOGGER = "tilegrid"


class QueueLogHandler(logging.Handler):
    """
    A logging handler that sends (message, level) pairs to a queue.

    Used to show placement/reorder logs in an editor console without the
    engine knowing about the console.
    """

    def __init__(self, log_queue: Queue, level: int = logging.INFO):
        super().__init__(level)
        self.log_queue = log_queue
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.log_queue.put((self.format(record), record.levelname))
        except Exception:
            self.handleError(record)


def attach_queue_handler(
    log_queue: Queue,
    logger_name: Optional[str] = ENGINE_LOGGER,
    level: int = logging.INFO,
) -> QueueLogHandler:
    """
    Attach a QueueLogHandler to the specified logger.

    Args:
        log_queue: Queue to send log messages to.
        logger_name: Name of logger to attach to. None = root logger.
        level: Minimum level forwarded to the queue.

    Returns:
        The attached handler (for later removal).
    """
    logger = logging.getLogger(logger_name)
    handler = QueueLogHandler(log_queue, level)
    logger.addHandler(handler)
    if logger.getEffectiveLevel() > level:
        logger.setLevel(level)
    return handler


def detach_queue_handler(handler: QueueLogHandler, logger_name: Optional[str] = ENGINE_LOGGER) -> None:
    """
    Remove a QueueLogHandler from the specified logger.

    Args:
        handler: The handler to remove.
        logger_name: Name of logger to detach from. None = root logger.
    """
    logging.getLogger(logger_name).removeHandler(handler)
