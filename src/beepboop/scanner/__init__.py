# Copyright 2026 BeepBoop Shell Contributors
# SPDX-License-Identifier: Apache-2.0

"""Line reader and tokenizer for the BeepBoop shell."""

from beepboop.scanner.lexer import DEFAULT_OPERATORS, ScanError, get_token_list
from beepboop.scanner.reader import (
    INITIAL_STRING_SIZE,
    EndOfInput,
    LineRead,
    ReadResult,
    iter_input_lines,
    read_input_line,
    tolerate_undecodable_bytes,
)
from beepboop.scanner.tokens import TokenList, free_token_list, is_empty, print_list

__all__ = [
    "DEFAULT_OPERATORS",
    "EndOfInput",
    "INITIAL_STRING_SIZE",
    "LineRead",
    "ReadResult",
    "ScanError",
    "TokenList",
    "free_token_list",
    "get_token_list",
    "is_empty",
    "iter_input_lines",
    "print_list",
    "read_input_line",
    "tolerate_undecodable_bytes",
]
