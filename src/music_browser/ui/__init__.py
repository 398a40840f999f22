"""UI layer for Music Browser.

Contains:
- blessed: terminal UI (session loop, key mapping, rendering)
"""

__all__ = []
