"""Data models for tickbox."""

from dataclasses import dataclass
from enum import Enum


class Action(Enum):
    """Logical actions a key press can trigger."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    TOGGLE = "toggle"
    QUIT = "quit"
    TOGGLE_HELP = "toggle_help"


# Ambiguous keys resolve to the first action in this order
ACTION_PRIORITY: tuple[Action, ...] = (
    Action.QUIT,
    Action.MOVE_UP,
    Action.MOVE_DOWN,
    Action.TOGGLE,
    Action.TOGGLE_HELP,
)


@dataclass(frozen=True)
class KeyBinding:
    """Immutable binding of physical keys to a help entry."""

    keys: tuple[str, ...]
    help_key: str
    help_desc: str

    def matches(self, key: str) -> bool:
        return key in self.keys

    @property
    def label(self) -> str:
        """Help label, e.g. 'q: quit'."""
        return f"{self.help_key}: {self.help_desc}"


@dataclass(frozen=True)
class KeyMap:
    """Key binding table, one binding per action."""

    up: KeyBinding
    down: KeyBinding
    check: KeyBinding
    quit: KeyBinding
    help: KeyBinding

    def binding(self, action: Action) -> KeyBinding:
        return {
            Action.MOVE_UP: self.up,
            Action.MOVE_DOWN: self.down,
            Action.TOGGLE: self.check,
            Action.QUIT: self.quit,
            Action.TOGGLE_HELP: self.help,
        }[action]

    def short_help(self) -> list[KeyBinding]:
        return [self.help, self.quit]

    def full_help(self) -> list[list[KeyBinding]]:
        """Bindings grouped into help table columns."""
        return [
            [self.up, self.down],
            [self.help, self.quit],
        ]


DEFAULT_KEYMAP = KeyMap(
    up=KeyBinding(keys=("k", "up"), help_key="↑/k", help_desc="move up"),
    down=KeyBinding(keys=("j", "down"), help_key="↓/j", help_desc="move down"),
    check=KeyBinding(keys=("enter", "space"), help_key="ENTER/SPACE", help_desc="check"),
    quit=KeyBinding(keys=("ctrl+c", "q"), help_key="q", help_desc="quit"),
    help=KeyBinding(keys=("?",), help_key="?", help_desc="help"),
)
