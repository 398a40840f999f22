"""Navigation domain - current directory and explorer cursor."""

from .state import EnterDirectory, GoUp, NavigationState, SelectFile, Selection

__all__ = [
    "NavigationState",
    "Selection",
    "GoUp",
    "EnterDirectory",
    "SelectFile",
]
