"""Deterministic item ordering for board views.

Every mode is a total order: ties fall back to item position, so
repeated calls on the same input always produce the same sequence.
"""

import unicodedata
from typing import Iterable

from boardview.dates import to_epoch_ms
from boardview.models import ColumnIds, Item


def name_key(name: str) -> str:
    """Case- and accent-insensitive sort key for item names."""
    decomposed = unicodedata.normalize("NFKD", name)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def by_position(items: Iterable[Item]) -> list[Item]:
    """Stable sort by position ascending."""
    return sorted(items, key=lambda item: item.position)


def _number_of(item: Item, column_id: str | None) -> float | None:
    cell = item.cell(column_id)
    return cell.number_value if cell else None


def _date_of(item: Item, column_id: str | None) -> int | None:
    cell = item.cell(column_id)
    return to_epoch_ms(cell.date_value if cell else None)


def _sort_missing_last(items: list[Item], value_of, descending: bool) -> list[Item]:
    def key(item: Item):
        value = value_of(item)
        if value is None:
            return (1, 0)
        return (0, -value if descending else value)

    return sorted(items, key=key)


def sort_items(
    items: Iterable[Item],
    sort_by: str | None,
    column_ids: ColumnIds,
) -> tuple[Item, ...]:
    """Return items ordered by sort_by.

    manual (or None) orders by position. name_* compares names without
    regard to case. number_* and date_* read the board's first NUMBER
    or DATE column; items without a usable value go last.
    """
    ordered = by_position(items)

    if not sort_by or sort_by == "manual":
        return tuple(ordered)

    if sort_by in ("name_asc", "name_desc"):
        ordered.sort(key=lambda item: name_key(item.name), reverse=sort_by == "name_desc")
        return tuple(ordered)

    if sort_by in ("number_asc", "number_desc"):
        return tuple(
            _sort_missing_last(
                ordered,
                lambda item: _number_of(item, column_ids.number),
                descending=sort_by == "number_desc",
            )
        )

    if sort_by in ("date_asc", "date_desc"):
        return tuple(
            _sort_missing_last(
                ordered,
                lambda item: _date_of(item, column_ids.date),
                descending=sort_by == "date_desc",
            )
        )

    return tuple(ordered)
