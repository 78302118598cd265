# Copyright 2026 BeepBoop Shell Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tokenizer for shell input lines.

Splits one raw line into words and operator tokens. Words may contain
double-quoted spans and backslash escapes; operator characters end the
current word even without surrounding whitespace.
"""

from collections.abc import Iterable

from beepboop.scanner.tokens import TokenList

# ###############
# Public Interface
# ###############

PIPE = "|"
REDIRECT_IN = "<"
REDIRECT_OUT = ">"
REDIRECT_APPEND = ">>"
BACKGROUND = "&"

DEFAULT_OPERATORS: tuple[str, ...] = (PIPE, REDIRECT_IN, REDIRECT_OUT, REDIRECT_APPEND, BACKGROUND)


class ScanError(Exception):
    """Raised when a line cannot be tokenized.

    Covers unterminated double quotes, a trailing backslash with nothing
    left to escape, NUL characters, and bytes that were not valid text.

    Attributes:
        column: 1-based column where the offending construct starts.
    """

    def __init__(self, message: str, column: int) -> None:
        super().__init__(f"Column {column}: {message}")
        self.column = column


def get_token_list(line: str, operators: Iterable[str] = DEFAULT_OPERATORS) -> TokenList:
    """Tokenize a raw input line.

    Whitespace (space and tab) separates tokens. A double-quoted span keeps its
    contents verbatim, minus the quotes. A backslash keeps the next character
    literally and is itself dropped. Operators are emitted as separate tokens,
    longest match first.

    Args:
        line: The raw line, without its terminator. It is not modified.
        operators: The operator spellings to recognize.

    Returns:
        A new TokenList, empty when the line holds only whitespace.

    Raises:
        ScanError: On an unterminated double quote, a trailing backslash, a NUL
            character or an undecodable byte.            No partial list is returned in that case.
    """
    return TokenList(_Lexer(line, operators).tokenize())


# ################
# Implementation
# ################

_WHITESPACE = " \t"
_QUOTE = '"'
_ESCAPE = "\\"
_NUL = "\0"
# Lone surrogates left by the "surrogateescape" error handler.
_UNDECODABLE_FIRST = "\udc80"
_UNDECODABLE_LAST = "\udcff"


class _Lexer:
    """Internal scanner state machine."""

    def __init__(self, line: str, operators: Iterable[str]) -> None:
        self._line = line
        self._pos = 0
        # Longest spelling first so that '>>' wins over '>'.
        self._operators = sorted({op for op in operators if op}, key=len, reverse=True)
        self._operator_starts = {op[0] for op in self._operators}
        self._tokens: list[str] = []

    def tokenize(self) -> list[str]:
        """Run the scanner and return the token strings in source order."""
        self._check_characters()
        while True:
            self._skip_whitespace()
            if self._at_end():
                break
            if not self._scan_operator():
                self._scan_word()
        return self._tokens

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._pos >= len(self._line)

    def _current(self) -> str:
        """Return the character at the current position, or '' at end of input."""
        if self._pos < len(self._line):
            return self._line[self._pos]
        return ""

    def _advance(self) -> str:
        ch = self._line[self._pos]
        self._pos += 1
        return ch

    def _skip_whitespace(self) -> None:
        while not self._at_end() and self._current() in _WHITESPACE:
            self._advance()

    def _check_characters(self) -> None:
        """Reject NUL and bytes that could not be decoded when the line was read."""
        for index, ch in enumerate(self._line):
            if ch == _NUL:
                raise ScanError("NUL character in input", index + 1)
            if _UNDECODABLE_FIRST <= ch <= _UNDECODABLE_LAST:
                raise ScanError(f"Undecodable byte 0x{ord(ch) - 0xDC00:02x} in input", index + 1)

    # ------------------------------------------------------------------
    # Token scanners
    # ------------------------------------------------------------------

    def _match_operator(self) -> str | None:
        """Return the operator spelled at the current position, if any."""
        if self._current() not in self._operator_starts:
            return None
        for op in self._operators:
            if self._line.startswith(op, self._pos):
                return op
        return None

    def _scan_operator(self) -> bool:
        op = self._match_operator()
        if op is None:
            return False
        self._pos += len(op)
        self._tokens.append(op)
        return True

    def _scan_word(self) -> None:
        """Scan one word, joining unquoted text, quoted spans and escapes."""
        chars: list[str] = []
        while not self._at_end():
            ch = self._current()
            if ch in _WHITESPACE or self._match_operator() is not None:
                break
            if ch == _QUOTE:
                self._scan_quoted(chars)
            elif ch == _ESCAPE:
                self._scan_escape(chars)
            else:
                chars.append(self._advance())
        self._tokens.append("".join(chars))

    def _scan_quoted(self, chars: list[str]) -> None:
        """Append the contents of a double-quoted span to *chars*."""
        start_col = self._pos + 1
        self._advance()  # opening "
        while not self._at_end():
            ch = self._current()
            if ch == _QUOTE:
                self._advance()  # closing "
                return
            if ch == _ESCAPE:
                self._scan_escape(chars)
            else:
                chars.append(self._advance())
        raise ScanError("Unterminated double quote", start_col)

    def _scan_escape(self, chars: list[str]) -> None:
        start_col = self._pos + 1
        self._advance()  # backslash
        if self._at_end():
            raise ScanError("Trailing backslash with nothing to escape", start_col)
        chars.append(self._advance())
