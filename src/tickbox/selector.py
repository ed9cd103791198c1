"""Selector state machine.

Transitions are pure: every step returns a new ``SelectorState`` and never
mutates the one it was given.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from tickbox.models import ACTION_PRIORITY, DEFAULT_KEYMAP, Action, KeyMap


@dataclass(frozen=True)
class SelectorState:
    """Immutable snapshot of the checklist."""

    choices: tuple[str, ...]
    cursor: int = 0
    selected: frozenset[int] = field(default_factory=frozenset)
    help_visible: bool = False
    keys: KeyMap = DEFAULT_KEYMAP

    def selected_choices(self) -> list[str]:
        """Checked choices in display order."""
        return [c for i, c in enumerate(self.choices) if i in self.selected]


def initial_state(
    choices: Sequence[str],
    keys: KeyMap = DEFAULT_KEYMAP,
    help_visible: bool = False,
) -> SelectorState:
    """Build the starting state: cursor on the first row, nothing checked."""
    return SelectorState(choices=tuple(choices), keys=keys, help_visible=help_visible)


def resolve_action(keys: KeyMap, key: str) -> Action | None:
    """Classify a raw key identifier, or None if no binding matches."""
    for action in ACTION_PRIORITY:
        if keys.binding(action).matches(key):
            return action
    return None


def apply_action(state: SelectorState, action: Action | None) -> tuple[SelectorState, bool]:
    """Apply a classified action. Returns (new_state, terminate)."""
    if action is None:
        return state, False

    if action is Action.QUIT:
        return state, True

    if action is Action.TOGGLE_HELP:
        return replace(state, help_visible=not state.help_visible), False

    # Cursor has no valid position without choices
    if not state.choices:
        return state, False

    if action is Action.MOVE_UP:
        if state.cursor > 0:
            return replace(state, cursor=state.cursor - 1), False
    elif action is Action.MOVE_DOWN:
        if state.cursor < len(state.choices) - 1:
            return replace(state, cursor=state.cursor + 1), False
    elif action is Action.TOGGLE:
        return replace(state, selected=state.selected ^ {state.cursor}), False

    return state, False


def apply(state: SelectorState, key: str) -> tuple[SelectorState, bool]:
    """Apply a raw key identifier. Returns (new_state, terminate)."""
    return apply_action(state, resolve_action(state.keys, key))


class Selector:
    """Owns a checklist session from the first key until Quit."""

    def __init__(self, state: SelectorState):
        self.state = state
        self.terminated = False

    @classmethod
    def create(cls, choices: Sequence[str], **kwargs) -> Selector:
        return cls(initial_state(choices, **kwargs))

    def feed(self, key: str) -> bool:
        """Process one key. Returns True once the session has ended."""
        if self.terminated:
            return True
        self.state, self.terminated = apply(self.state, key)
        return self.terminated
