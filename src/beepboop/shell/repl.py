# Copyright 2026 BeepBoop Shell Contributors
# SPDX-License-Identifier: Apache-2.0

"""Read-tokenize-interpret loop of the BeepBoop shell."""

from collections.abc import Callable
from typing import TextIO

from yachalk import chalk

from beepboop.config.settings import ShellConfig
from beepboop.scanner.lexer import ScanError, get_token_list
from beepboop.scanner.reader import EndOfInput, read_input_line, tolerate_undecodable_bytes
from beepboop.scanner.tokens import TokenList, print_list

# ###############
# Public Interface
# ###############

Interpreter = Callable[[TokenList], None]


def run_repl(
    stdin: TextIO,
    stdout: TextIO,
    stderr: TextIO,
    config: ShellConfig | None = None,
    interpreter: Interpreter | None = None,
) -> int:
    """Run the interactive loop until end-of-input.

    Each line is tokenized and, if it produced any tokens, handed to
    *interpreter*. The token list is released when the iteration ends, whether
    the interpreter returned normally or raised. A malformed line is reported
    on *stderr* and discarded; this includes lines holding bytes that are not
    valid in the input encoding.

    Args:
        stdin: Stream to read lines from.
        stdout: Stream for the prompt, the default interpreter and the farewell.
        stderr: Stream for scan diagnostics.
        config: Shell settings; defaults are used when omitted.
        interpreter: Consumer of each non-empty token list. Defaults to
            printing the tokens one per line on *stdout*.

    Returns:
        The number of malformed lines encountered.
    """
    cfg = config if config is not None else ShellConfig()
    consume = interpreter if interpreter is not None else _printer(stdout)
    malformed = 0
    tolerate_undecodable_bytes(stdin)

    while True:
        if cfg.prompt:
            stdout.write(paint(cfg.prompt, chalk.blue, cfg.color))
            stdout.flush()

        result = read_input_line(stdin, initial_capacity=cfg.initial_buffer_size)
        if isinstance(result, EndOfInput):
            if cfg.farewell:
                if cfg.prompt:
                    # Finish the dangling prompt line.
                    print(file=stdout)
                print(cfg.farewell, file=stdout)
            return malformed

        try:
            tokens = get_token_list(result.text, cfg.operators)
        except ScanError as exc:
            print(paint(f"Error: {exc}", chalk.red, cfg.color), file=stderr)
            malformed += 1
            continue

        with tokens:
            if not tokens.is_empty():
                consume(tokens)


def paint(text: str, style: Callable[[str], str], enabled: bool) -> str:
    """Apply a chalk *style* to *text* when coloring is *enabled*."""
    return style(text) if enabled else text


# ################
# Implementation
# ################


def _printer(stdout: TextIO) -> Interpreter:
    def _print(tokens: TokenList) -> None:
        print_list(tokens, stdout)

    return _print
