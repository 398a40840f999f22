"""Scroll window math for list panels."""


def compute_scroll_window(
    selected_idx: int, total_options: int, visible_rows: int
) -> tuple[int, int]:
    """
    Compute the start and end indices for a scrollable window.

    Ensures the selected item is always visible within the window.

    Args:
        selected_idx: Index of currently selected option
        total_options: Total number of options
        visible_rows: Number of rows available for displaying options

    Returns:
        Tuple of (start_idx, end_idx) for the visible window
    """
    if visible_rows <= 0:
        return 0, 0

    if total_options <= visible_rows:
        return 0, total_options

    # Center the selected item in the window when possible
    half_window = visible_rows // 2
    start_idx = max(0, selected_idx - half_window)
    end_idx = min(total_options, start_idx + visible_rows)

    if end_idx - start_idx < visible_rows:
        start_idx = max(0, end_idx - visible_rows)

    return start_idx, end_idx
