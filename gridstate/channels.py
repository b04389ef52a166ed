"""Queue senders that log every message they pass on."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _NowaitQueue(Protocol[T]):
    def put_nowait(self, item: T) -> Any: ...


@dataclass(frozen=True)
class LoggingSender(Generic[T]):
    """Wraps a queue, logging each message under the channel name before sending."""

    sender: _NowaitQueue
    channel_name: str

    def send(self, message: T) -> None:
        """Log and enqueue a message; errors from the queue propagate."""
        logger.debug("%s %r", self.channel_name, message)
        self.sender.put_nowait(message)