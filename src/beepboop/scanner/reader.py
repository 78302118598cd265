# Copyright 2026 BeepBoop Shell Contributors
# SPDX-License-Identifier: Apache-2.0

"""Line reader for the shell scanner.

Reads a single line of raw input one character at a time into a growable
buffer. The buffer starts small and doubles its capacity whenever it fills, so
lines of any length are accepted.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO

# ###############
# Public Interface
# ###############

INITIAL_STRING_SIZE = 10


@dataclass(frozen=True)
class LineRead:
    """A line was read. ``text`` holds its content without the terminator."""

    text: str


@dataclass(frozen=True)
class EndOfInput:
    """The stream ended before any character of a new line was read."""


ReadResult = LineRead | EndOfInput


def read_input_line(
    stream: TextIO | None = None,
    *,
    initial_capacity: int = INITIAL_STRING_SIZE,
) -> ReadResult:
    """Read one line from *stream* (default: standard input).

    The line terminator is consumed but not stored. A final line without a
    terminator is still returned as :class:`LineRead`; end-of-input is then
    reported by the following call.

    Args:
        stream: Text stream to read from.
        initial_capacity: Starting capacity of the line buffer, in characters.

    Returns:
        :class:`LineRead` with the line's content, or :class:`EndOfInput` if the
        stream was exhausted before any character was read.

    Raises:
        ValueError: If *initial_capacity* is smaller than 1.
        MemoryError: If the buffer cannot grow. This is not recovered from.
    """
    source = stream if stream is not None else sys.stdin
    buffer = _LineBuffer(initial_capacity)
    while True:
        ch = source.read(1)
        if ch == "":
            if buffer.size == 0:
                return EndOfInput()
            break
        if ch == "\n":
            break
        buffer.append(ch)
    return LineRead(buffer.finalize())


def tolerate_undecodable_bytes(stream: TextIO) -> None:
    """Make *stream* pass undecodable bytes through instead of raising.

    Bytes that are not valid in the stream's encoding come through as lone
    surrogates (the ``surrogateescape`` handler), which the tokenizer rejects
    line by line. Streams that cannot be reconfigured are left alone.
    """
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")


def iter_input_lines(
    stream: TextIO | None = None,
    *,
    initial_capacity: int = INITIAL_STRING_SIZE,
) -> Iterator[str]:
    """Yield successive lines from *stream* until end-of-input."""
    while True:
        result = read_input_line(stream, initial_capacity=initial_capacity)
        if isinstance(result, EndOfInput):
            return
        yield result.text


# ################
# Implementation
# ################


class _LineBuffer:
    """Fixed-capacity character buffer that doubles when full."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"Line buffer capacity must be at least 1, got {capacity}")
        self._chars: list[str] = [""] * capacity
        self._size = 0

    @property
    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return len(self._chars)

    def append(self, ch: str) -> None:
        if self._size == len(self._chars):
            self._grow()
        self._chars[self._size] = ch
        self._size += 1

    def finalize(self) -> str:
        """Return the buffered characters as a new string."""
        return "".join(self._chars[: self._size])

    def _grow(self) -> None:
        # Existing content is kept; only the unused tail is added.
        self._chars.extend([""] * len(self._chars))
