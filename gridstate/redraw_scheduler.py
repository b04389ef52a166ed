"""Decides whether the next frame needs drawing."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class RedrawScheduler:
    """Tracks a queued frame and the earliest scheduled redraw time."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._scheduled_frame: Optional[float] = None
        self._frame_queued = True

    def schedule(self, new_scheduled: float) -> None:
        """Ask for a redraw at ``new_scheduled``; the earliest request wins."""
        logger.debug("Redraw scheduled for %r", new_scheduled)
        with self._lock:
            if self._scheduled_frame is None or new_scheduled < self._scheduled_frame:
                self._scheduled_frame = new_scheduled

    def queue_next_frame(self) -> None:
        logger.debug("Next frame queued")
        self._frame_queued = True

    def should_draw(self) -> bool:
        """True if a frame was queued or a scheduled time has passed; consumes it."""
        if self._frame_queued:
            self._frame_queued = False
            return True
        with self._lock:
            if self._scheduled_frame is not None and self._scheduled_frame < self._clock():
                self._scheduled_frame = None
                return True
            return False


REDRAW_SCHEDULER = RedrawScheduler()