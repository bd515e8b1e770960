"""Column ordering."""

from dataclasses import replace

from boardview.models import Column


def reorder_columns_by_id(
    columns: tuple[Column, ...],
    moving_column_id: str,
    target_column_id: str,
) -> tuple[Column, ...]:
    """Move a column into the slot of another and renumber positions.

    Returns columns unchanged if either id is unknown or they are the same.
    """
    ids = [column.id for column in columns]
    if moving_column_id not in ids or target_column_id not in ids:
        return columns
    if moving_column_id == target_column_id:
        return columns

    moving = columns[ids.index(moving_column_id)]
    rest = [column for column in columns if column.id != moving_column_id]
    insert_at = next(i for i, column in enumerate(rest) if column.id == target_column_id)
    rest.insert(insert_at, moving)

    return tuple(replace(column, position=position) for position, column in enumerate(rest))
