"""Visible row window for a virtualized scrolling list."""

import math

from boardview.models import VirtualWindow

EMPTY_WINDOW = VirtualWindow(start_index=0, end_index=-1, top_spacer_height=0, bottom_spacer_height=0)


def _clamp(value, low, high):
    return min(max(value, low), high)


def get_virtual_window(
    total_count: int,
    scroll_top: float,
    viewport_height: float,
    row_height: float,
    overscan: int = 0,
) -> VirtualWindow:
    """Compute which rows to render and how much space to reserve around them.

    Rows outside [start_index, end_index] are replaced by spacers of
    top_spacer_height and bottom_spacer_height so the scrollbar keeps
    its geometry. Degenerate sizes are floored rather than rejected.
    """
    if total_count <= 0:
        return EMPTY_WINDOW

    row_height = max(1, row_height)
    overscan = max(0, overscan)
    viewport_height = max(row_height, viewport_height)

    raw_start = math.floor(scroll_top / row_height) - overscan
    raw_end = math.ceil((scroll_top + viewport_height) / row_height) + overscan - 1
    last = total_count - 1

    start_index = _clamp(raw_start, 0, last)
    end_index = _clamp(raw_end, start_index, last)

    return VirtualWindow(
        start_index=start_index,
        end_index=end_index,
        top_spacer_height=start_index * row_height,
        bottom_spacer_height=max(0, (total_count - end_index - 1) * row_height),
    )
