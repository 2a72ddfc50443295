"""
Unit tests for collecting engine logs through a queue.
"""

import logging
from queue import Queue

from tilegrid.core.models import Offset
from tilegrid.logging_utils import attach_queue_handler, detach_queue_handler
from tilegrid.placement import apply, resolve


class TestQueueLogHandler:
    """Tests for attach_queue_handler()/detach_queue_handler()."""

    def test_when_attached_then_reorder_logged_to_queue(self, make_layout):
        registry, geometry = make_layout([["a", "b"]])
        log_queue = Queue()
        handler = attach_queue_handler(log_queue)
        try:
            apply(registry, "a", resolve(registry, "a", Offset(110, 0), geometry))
        finally:
            detach_queue_handler(handler)

        message, level = log_queue.get_nowait()
        assert "Moved tile 'a'" in message
        assert level == "INFO"

    def test_when_detached_then_nothing_queued(self, make_layout):
        registry, geometry = make_layout([["a", "b"]])
        log_queue = Queue()
        handler = attach_queue_handler(log_queue)
        detach_queue_handler(handler)

        apply(registry, "a", resolve(registry, "a", Offset(110, 0), geometry))

        assert log_queue.empty()

    def test_when_level_below_threshold_then_filtered(self):
        log_queue = Queue()
        handler = attach_queue_handler(log_queue, level=logging.WARNING)
        try:
            logging.getLogger("tilegrid.placement.executor").info("ignored")
            logging.getLogger("tilegrid.placement.executor").warning("kept")
        finally:
            detach_queue_handler(handler)

        assert log_queue.get_nowait() == ("kept", "WARNING")
        assert log_queue.empty()
