"""Output sinks for human-readable store notices.

Shipping notices, delivery notices, receipts and removed-book notices are
written here as plain lines. The wording is for people, not for parsing.
"""

import sys
from typing import Protocol, TextIO


class OutputSink(Protocol):
    """Receiver of one human-readable line per store event."""

    def emit(self, line: str) -> None: ...


class ConsoleSink:
    """Writes each line to a text stream (stdout unless told otherwise)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so pytest's capsys sees the swapped stdout
        return self._stream if self._stream is not None else sys.stdout

    def emit(self, line: str) -> None:
        self.stream.write(line + "\n")
        self.stream.flush()


class MemorySink:
    """Keeps every emitted line in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def emit(self, line: str) -> None:
        self.lines.append(line)

    def clear(self) -> None:
        self.lines.clear()

    def __len__(self) -> int:
        return len(self.lines)
