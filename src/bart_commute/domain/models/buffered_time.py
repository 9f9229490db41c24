"""Buffered time domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class BufferedTime:
    """An instant shifted by fixed buffers, with a line-per-buffer explanation."""

    date: datetime
    message: str
