# Copyright 2026 BeepBoop Shell Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the token list primitives."""

import io
import sys

import pytest

from beepboop.scanner.lexer import get_token_list
from beepboop.scanner.tokens import TokenList, free_token_list, is_empty, print_list

# ###############
# Construction and Inspection
# ###############


class TestTokenList:
    def test_default_is_empty(self) -> None:
        """A list built with no tokens is empty."""
        assert TokenList().is_empty()

    def test_len_and_iteration_follow_source_order(self) -> None:
        """Length and iteration reflect the tokens in order."""
        tokens = TokenList(["ls", "|", "wc"])
        assert len(tokens) == 3
        assert list(tokens) == ["ls", "|", "wc"]

    def test_indexing(self) -> None:
        """Tokens are reachable by position."""
        tokens = TokenList(["a", "b"])
        assert tokens[0] == "a"
        assert tokens[-1] == "b"

    def test_equality_with_list_and_token_list(self) -> None:
        """A token list compares equal to lists, tuples and token lists with the same tokens."""
        tokens = TokenList(["a", "b"])
        assert tokens == ["a", "b"]
        assert tokens == ("a", "b")
        assert tokens == TokenList(["a", "b"])
        assert tokens != ["b", "a"]

    def test_construction_copies_input(self) -> None:
        """Later changes to the source iterable do not affect the list."""
        source = ["a", "b"]
        tokens = TokenList(source)
        source.append("c")
        assert tokens == ["a", "b"]

    def test_to_list_returns_copy(self) -> None:
        """to_list returns an independent copy."""
        tokens = TokenList(["a"])
        copy = tokens.to_list()
        copy.append("b")
        assert tokens == ["a"]

    def test_iteration_does_not_consume(self) -> None:
        """Iterating twice yields the same tokens."""
        tokens = TokenList(["a", "b"])
        assert list(tokens) == list(tokens)

    def test_repr(self) -> None:
        """repr shows the tokens."""
        assert repr(TokenList(["x"])) == "TokenList(['x'])"

    def test_unhashable(self) -> None:
        """Token lists are mutable and cannot be hashed."""
        with pytest.raises(TypeError):
            hash(TokenList())


# ###############
# is_empty
# ###############


def test_is_empty_none() -> None:
    """None is the empty handle."""
    assert is_empty(None)


def test_is_empty_false_for_tokens() -> None:
    """A list with tokens is not empty."""
    assert not is_empty(get_token_list("ls"))


# ###############
# print_list
# ###############


def test_print_list_one_token_per_line() -> None:
    """Each token is written on its own line, in order."""
    out = io.StringIO()
    print_list(get_token_list('echo "hi there" | wc'), out)
    assert out.getvalue() == "echo\nhi there\n|\nwc\n"


def test_print_list_empty_prints_nothing() -> None:
    """An empty list produces no output."""
    out = io.StringIO()
    print_list(TokenList(), out)
    print_list(None, out)
    assert out.getvalue() == ""


def test_print_list_defaults_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    """Without an output stream, tokens go to standard output."""
    print_list(TokenList(["a", "b"]))
    assert capsys.readouterr().out == "a\nb\n"


def test_print_list_does_not_modify(monkeypatch: pytest.MonkeyPatch) -> None:
    """Printing leaves the list intact."""
    monkeypatch.setattr(sys, "stdout", io.StringIO())
    tokens = TokenList(["a", "b"])
    print_list(tokens)
    assert tokens == ["a", "b"]


def test_print_list_rejoined_equals_normalized_line() -> None:
    """Printed tokens re-joined with spaces equal the whitespace-normalized line."""
    line = "  grep  -n\tpattern   file.txt "
    out = io.StringIO()
    print_list(get_token_list(line), out)
    assert " ".join(out.getvalue().splitlines()) == " ".join(line.split())


# ###############
# free_token_list
# ###############


def test_free_empties_list() -> None:
    """After freeing, the list is empty."""
    tokens = get_token_list("echo hello world")
    free_token_list(tokens)
    assert is_empty(tokens)


def test_free_then_reset_handle_is_empty() -> None:
    """A handle reset to None after freeing reports empty."""
    tokens: TokenList | None = get_token_list("a b")
    free_token_list(tokens)
    tokens = None
    assert is_empty(tokens)


def test_free_empty_list_is_noop() -> None:
    """Freeing an empty list or None does nothing."""
    empty = TokenList()
    free_token_list(empty)
    free_token_list(None)
    assert is_empty(empty)


def test_context_manager_releases_on_exit() -> None:
    """Leaving the with block frees the list."""
    tokens = get_token_list("a b c")
    with tokens as held:
        assert held is tokens
        assert len(held) == 3
    assert tokens.is_empty()


def test_context_manager_releases_on_error() -> None:
    """The list is freed even when the block raises."""
    tokens = get_token_list("a b c")
    with pytest.raises(RuntimeError):
        with tokens:
            raise RuntimeError("interpreter failed")
    assert tokens.is_empty()
