"""Keyboard handling: blessed keystrokes -> logical key events -> commands.

The mapping from (key, modifiers) to a Command is a pure total function;
anything it does not recognize becomes Command.UNSUPPORTED.
"""

from enum import Enum
from typing import NamedTuple, Union

from blessed.keyboard import Keystroke


class Key(Enum):
    """Named (non-character) keys."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    ESCAPE = "escape"
    BACKSPACE = "backspace"
    TAB = "tab"
    BACKTAB = "backtab"
    DELETE = "delete"
    INSERT = "insert"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    FUNCTION = "function"
    UNKNOWN = "unknown"


class Modifier(Enum):
    SHIFT = "shift"
    CTRL = "ctrl"
    ALT = "alt"


class Command(Enum):
    EXPLORER_UP = "explorer_up"
    EXPLORER_DOWN = "explorer_down"
    VOLUME_DOWN = "volume_down"
    VOLUME_UP = "volume_up"
    TOGGLE_PLAY_PAUSE = "toggle_play_pause"
    STAGE_SELECTED_FOR_PLAY = "stage_selected_for_play"
    CLEAR_PLAYLIST = "clear_playlist"
    NEXT_TRACK = "next_track"
    QUIT = "quit"
    ACTIVATE_SELECTION = "activate_selection"
    PLAYLIST_UP = "playlist_up"
    PLAYLIST_DOWN = "playlist_down"
    UNSUPPORTED = "unsupported"


class KeyEvent(NamedTuple):
    """A logical key press: a named Key or a single character, plus modifiers."""

    key: Union[Key, str]
    modifiers: frozenset = frozenset()


NO_MODIFIERS: frozenset = frozenset()
SHIFT_ONLY: frozenset = frozenset({Modifier.SHIFT})

# Bindings with no modifier held
RAW_BINDINGS: dict[Union[Key, str], Command] = {
    Key.UP: Command.EXPLORER_UP,
    Key.DOWN: Command.EXPLORER_DOWN,
    Key.LEFT: Command.VOLUME_DOWN,
    Key.RIGHT: Command.VOLUME_UP,
    " ": Command.TOGGLE_PLAY_PAUSE,
    "s": Command.STAGE_SELECTED_FOR_PLAY,
    "c": Command.CLEAR_PLAYLIST,
    "n": Command.NEXT_TRACK,
    "q": Command.QUIT,
    Key.ENTER: Command.ACTIVATE_SELECTION,
}

# Bindings with exactly Shift held
SHIFT_BINDINGS: dict[Union[Key, str], Command] = {
    Key.UP: Command.PLAYLIST_UP,
    Key.DOWN: Command.PLAYLIST_DOWN,
}

# blessed key names -> (Key, modifiers). Shift+Up/Down arrive under
# different names depending on terminfo and blessed version.
_NAMED_KEYS: dict[str, tuple[Key, frozenset]] = {
    "KEY_UP": (Key.UP, NO_MODIFIERS),
    "KEY_DOWN": (Key.DOWN, NO_MODIFIERS),
    "KEY_LEFT": (Key.LEFT, NO_MODIFIERS),
    "KEY_RIGHT": (Key.RIGHT, NO_MODIFIERS),
    "KEY_ENTER": (Key.ENTER, NO_MODIFIERS),
    "KEY_ESCAPE": (Key.ESCAPE, NO_MODIFIERS),
    "KEY_BACKSPACE": (Key.BACKSPACE, NO_MODIFIERS),
    "KEY_TAB": (Key.TAB, NO_MODIFIERS),
    "KEY_BTAB": (Key.BACKTAB, NO_MODIFIERS),
    "KEY_DELETE": (Key.DELETE, NO_MODIFIERS),
    "KEY_INSERT": (Key.INSERT, NO_MODIFIERS),
    "KEY_HOME": (Key.HOME, NO_MODIFIERS),
    "KEY_END": (Key.END, NO_MODIFIERS),
    "KEY_PGUP": (Key.PAGE_UP, NO_MODIFIERS),
    "KEY_PGDOWN": (Key.PAGE_DOWN, NO_MODIFIERS),
    "KEY_SR": (Key.UP, SHIFT_ONLY),
    "KEY_SF": (Key.DOWN, SHIFT_ONLY),
    "KEY_SUP": (Key.UP, SHIFT_ONLY),
    "KEY_SDOWN": (Key.DOWN, SHIFT_ONLY),
    "KEY_SHIFT_UP": (Key.UP, SHIFT_ONLY),
    "KEY_SHIFT_DOWN": (Key.DOWN, SHIFT_ONLY),
    "KEY_SLEFT": (Key.LEFT, SHIFT_ONLY),
    "KEY_SRIGHT": (Key.RIGHT, SHIFT_ONLY),
    "KEY_CTRL_UP": (Key.UP, frozenset({Modifier.CTRL})),
    "KEY_CTRL_DOWN": (Key.DOWN, frozenset({Modifier.CTRL})),
}


def parse_key(key: Keystroke) -> KeyEvent:
    """
    Parse a blessed keystroke into a logical key event.

    Args:
        key: blessed Keystroke

    Returns:
        KeyEvent; unrecognized sequences become Key.UNKNOWN
    """
    name = key.name if key.is_sequence else None

    if name:
        if name in _NAMED_KEYS:
            named, modifiers = _NAMED_KEYS[name]
            return KeyEvent(named, modifiers)
        if name.startswith("KEY_F") and name[5:].isdigit():
            return KeyEvent(Key.FUNCTION)
        return KeyEvent(Key.UNKNOWN)

    text = str(key)
    if text in ("\r", "\n"):
        return KeyEvent(Key.ENTER)
    if text == "\x7f":
        return KeyEvent(Key.BACKSPACE)
    if text == "\t":
        return KeyEvent(Key.TAB)
    if len(text) == 1 and 0 < ord(text) < 32:
        # Ctrl+letter arrives as a control character
        return KeyEvent(chr(ord(text) + 96), frozenset({Modifier.CTRL}))
    if len(text) == 1:
        return KeyEvent(text)
    return KeyEvent(Key.UNKNOWN)


def map_key(key: Union[Key, str], modifiers: frozenset = NO_MODIFIERS) -> Command:
    """Translate a logical key plus modifier set into a Command.

    Character matching is case-sensitive: "S" is not "s".
    """
    modifiers = frozenset(modifiers)
    if not modifiers:
        return RAW_BINDINGS.get(key, Command.UNSUPPORTED)
    if modifiers == SHIFT_ONLY:
        return SHIFT_BINDINGS.get(key, Command.UNSUPPORTED)
    return Command.UNSUPPORTED


def handle_key(key: Keystroke) -> Command:
    """Map a raw keystroke straight to a Command."""
    event = parse_key(key)
    return map_key(event.key, event.modifiers)
