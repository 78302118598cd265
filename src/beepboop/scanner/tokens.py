# Copyright 2026 BeepBoop Shell Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token list produced by the scanner and consumed by the interpreter."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from types import TracebackType
from typing import TextIO

# ###############
# Public Interface
# ###############


class TokenList:
    """An ordered, owned sequence of token strings for one input line.

    The list has a single owner at a time. Reading it (iteration, indexing,
    printing) never changes it; :meth:`free` drops every token exactly once and
    leaves the list empty. Used as a context manager, the list is released when
    the ``with`` block exits, whichever way it exits.
    """

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Iterable[str] = ()) -> None:
        self._tokens: list[str] = list(tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __getitem__(self, index: int) -> str:
        return self._tokens[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TokenList):
            return self._tokens == other._tokens
        if isinstance(other, (list, tuple)):
            return self._tokens == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TokenList({self._tokens!r})"

    def __enter__(self) -> TokenList:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.free()

    def is_empty(self) -> bool:
        """Return True if the list holds no tokens."""
        return not self._tokens

    def to_list(self) -> list[str]:
        """Return a copy of the tokens as a plain list."""
        return list(self._tokens)

    def free(self) -> None:
        """Release every token. Freeing an empty list does nothing."""
        self._tokens.clear()


def is_empty(tokens: TokenList | None) -> bool:
    """Return True if *tokens* holds zero tokens.

    ``None`` is accepted as the empty handle, so a caller that resets its
    handle after :func:`free_token_list` still gets a meaningful answer.
    """
    return tokens is None or tokens.is_empty()


def print_list(tokens: TokenList | None, out: TextIO | None = None) -> None:
    """Write each token on its own line to *out* (default: standard output).

    An empty list prints nothing.
    """
    if tokens is None:
        return
    stream = out if out is not None else sys.stdout
    for token in tokens:
        print(token, file=stream)


def free_token_list(tokens: TokenList | None) -> None:
    """Release every token reachable from *tokens*.

    The list is empty afterwards. Passing an empty list or ``None`` is a no-op.
    """
    if tokens is not None:
        tokens.free()
