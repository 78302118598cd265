# Copyright 2026 BeepBoop Shell Contributors
# SPDX-License-Identifier: Apache-2.0

"""Interactive loop for the BeepBoop shell."""

from beepboop.shell.repl import Interpreter, paint, run_repl

__all__ = [
    "Interpreter",
    "paint",
    "run_repl",
]
