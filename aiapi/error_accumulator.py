"""Collects error bytes seen while reading a stream."""

from __future__ import annotations

import io
from typing import Any, Optional


class ErrorAccumulatorWriteError(Exception):
    """Writing to the accumulator's buffer failed."""


class ErrorAccumulator:
    """Accumulates bytes into a buffer."""

    def __init__(self, buffer: Optional[Any] = None) -> None:
        self.buffer = buffer if buffer is not None else io.BytesIO()

    def write(self, data: bytes) -> None:
        try:
            self.buffer.write(data)
        except Exception as exc:
            raise ErrorAccumulatorWriteError(f"error accumulator write error, {exc}") from exc

    def getvalue(self) -> bytes:
        """Return everything written so far."""
        return bytes(self.buffer.getvalue())