"""Pure helper functions for moving list cursors."""


def move_selection(
    current: int,
    delta: int,
    total_items: int,
    wrap: bool = True,
) -> int:
    """Move selection by delta with optional wrapping.

    Args:
        current: Current selection index (0-based)
        delta: Amount to move (-1 for up, +1 for down)
        total_items: Total number of items in the list
        wrap: If True, wrap around at boundaries; if False, clamp to range

    Returns:
        New selection index (0 for an empty list)

    Examples:
        >>> move_selection(current=9, delta=1, total_items=10)
        0
        >>> move_selection(current=0, delta=-1, total_items=10)
        9
        >>> move_selection(current=9, delta=1, total_items=10, wrap=False)
        9
        >>> move_selection(current=3, delta=1, total_items=0)
        0
    """
    if total_items == 0:
        return 0

    if wrap:
        return (current + delta) % total_items
    return max(0, min(current + delta, total_items - 1))
