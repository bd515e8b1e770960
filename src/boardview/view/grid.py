"""Keyboard focus movement across the table grid."""

from boardview.models import GridPosition

ARROW_KEYS = ("ArrowUp", "ArrowDown", "ArrowLeft", "ArrowRight")


def is_grid_arrow_key(key: str) -> bool:
    """True if key is one of the four arrow keys."""
    return key in ARROW_KEYS


def next_grid_position(
    current: GridPosition,
    key: str,
    row_count: int,
    column_count: int,
) -> GridPosition | None:
    """Move focus one cell in the direction of key, clamped to the grid.

    Returns None when focus would not move: at a boundary, for a
    non-arrow key, or when the grid has no rows or no columns.
    """
    if row_count <= 0 or column_count <= 0:
        return None

    row = current.row
    col = current.col

    if key == "ArrowUp":
        row = max(0, current.row - 1)
    elif key == "ArrowDown":
        row = min(row_count - 1, current.row + 1)
    elif key == "ArrowLeft":
        col = max(0, current.col - 1)
    elif key == "ArrowRight":
        col = min(column_count - 1, current.col + 1)

    if row == current.row and col == current.col:
        return None
    return GridPosition(row=row, col=col)
