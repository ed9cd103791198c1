"""Tests for raw key translation."""

import pytest
import readchar

from tickbox.ui.keys import key_name


@pytest.mark.parametrize(
    "raw,name",
    [
        (readchar.key.UP, "up"),
        (readchar.key.DOWN, "down"),
        (readchar.key.ENTER, "enter"),
        ("\r", "enter"),
        ("\n", "enter"),
        (" ", "space"),
        ("\x03", "ctrl+c"),
    ],
)
def test_special_keys(raw, name):
    assert key_name(raw) == name


@pytest.mark.parametrize("raw", ["k", "j", "q", "?", "x"])
def test_plain_keys_pass_through(raw):
    assert key_name(raw) == raw
