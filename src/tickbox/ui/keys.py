"""Translate readchar key codes into key identifiers."""

import readchar

KEY_NAMES: dict[str, str] = {
    readchar.key.UP: "up",
    readchar.key.DOWN: "down",
    readchar.key.ENTER: "enter",
    "\r": "enter",
    "\n": "enter",
    " ": "space",
    "\x03": "ctrl+c",
}


def key_name(raw: str) -> str:
    """Return the identifier for a raw key; unknown keys pass through."""
    return KEY_NAMES.get(raw, raw)
