"""In-process counter issuer producing zero-padded client identifiers."""

from __future__ import annotations

import logging
import threading

logger = logging.getLogger(__name__)


class CounterClientIdIssuer:
    """Thread-safe counter issuing ids such as ``0001``, ``0002``, ...

    ``start`` is the last value already issued, so the first id is ``start + 1``.
    Values wider than ``width`` are returned unpadded rather than truncated.
    """

    def __init__(self, start: int = 0, width: int = 4) -> None:
        if start < 0:
            raise ValueError(f"Client id counter cannot start below zero: {start}")
        if width < 1:
            raise ValueError(f"Client id width must be at least 1: {width}")
        self._value = start
        self._width = width
        self._lock = threading.Lock()

    @property
    def last_issued(self) -> int:
        return self._value

    def next_id(self) -> str:
        with self._lock:
            self._value += 1
            value = self._value
        logger.debug("Issued client id #%d", value)
        return str(value).zfill(self._width)
