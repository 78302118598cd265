# Copyright 2026 BeepBoop Shell Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the BeepBoop command-line interface."""

import argparse
import sys
from pathlib import Path
from typing import TextIO

from yachalk import chalk

from beepboop.config.settings import ConfigError, ShellConfig, find_config, load_config
from beepboop.scanner.lexer import ScanError, get_token_list
from beepboop.scanner.reader import iter_input_lines, tolerate_undecodable_bytes
from beepboop.shell.repl import paint, run_repl

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the BeepBoop CLI."""
    parser = argparse.ArgumentParser(
        prog="beepboop",
        description="BeepBoop shell front end",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # repl subcommand
    repl_parser = subparsers.add_parser(
        "repl",
        help="Start the interactive shell loop",
        description="Read lines from standard input and print the tokens of each one.",
    )
    _add_common_arguments(repl_parser)

    # scan subcommand
    scan_parser = subparsers.add_parser(
        "scan",
        help="Tokenize every line of a file",
        description="Tokenize each line of a file (or standard input) and print its tokens.",
    )
    scan_parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="File to tokenize (default: standard input)",
    )
    _add_common_arguments(scan_parser)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        code = _dispatch(args)
    except MemoryError:
        print("Error: out of memory", file=sys.stderr)
        code = 2
    sys.exit(code)


# ################
# Implementation
# ################


def _add_common_arguments(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "--config",
        default=None,
        help="Path to a YAML config file (default: .beepboop.yaml in the current directory)",
    )
    subparser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    try:
        config = _load_config(args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.command == "repl":
        return _cmd_repl(config)
    if args.command == "scan":
        return _cmd_scan(args, config)
    return 0


def _load_config(args: argparse.Namespace) -> ShellConfig:
    if args.config is not None:
        config = load_config(Path(args.config))
    else:
        config = find_config(Path.cwd())
    if args.no_color:
        config = config.model_copy(update={"color": False})
    return config


def _cmd_repl(config: ShellConfig) -> int:
    """Handle the repl subcommand."""
    run_repl(sys.stdin, sys.stdout, sys.stderr, config)
    return 0


def _cmd_scan(args: argparse.Namespace, config: ShellConfig) -> int:
    """Handle the scan subcommand."""
    if args.file is None:
        tolerate_undecodable_bytes(sys.stdin)
        return _scan_stream(sys.stdin, config)

    path = Path(args.file)
    if not path.exists():
        print(f"Error: file '{path}' does not exist.", file=sys.stderr)
        return 1

    try:
        with path.open(encoding="utf-8", errors="surrogateescape") as stream:
            return _scan_stream(stream, config)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: cannot read '{path}': {exc}", file=sys.stderr)
        return 1


def _scan_stream(stream: TextIO, config: ShellConfig) -> int:
    has_errors = False
    for number, line in enumerate(iter_input_lines(stream, initial_capacity=config.initial_buffer_size), start=1):
        try:
            tokens = get_token_list(line, config.operators)
        except ScanError as exc:
            print(paint(f"Error: line {number}: {exc}", chalk.red, config.color), file=sys.stderr)
            has_errors = True
            continue
        with tokens:
            print(" ".join(f"[{token}]" for token in tokens))
    return 1 if has_errors else 0
