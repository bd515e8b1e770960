"""Timeline layout: place dated items as bars on a shared time axis."""

from dataclasses import dataclass

from boardview.dates import to_epoch_ms
from boardview.models import BoardSnapshot, Column, Item, Timeline, TimelineEntry
from boardview.view.framework import get_date_columns
from boardview.view.sorting import by_position


@dataclass
class _RawEntry:
    item: Item
    order: int
    start_value: str | None
    end_value: str | None
    start: int | None
    end: int | None

    @property
    def dated(self) -> bool:
        return self.start is not None and self.end is not None


def _resolve_date_column_id(
    date_columns: list[Column],
    requested_id: str | None,
    fallback_id: str | None,
) -> str | None:
    if requested_id and any(column.id == requested_id for column in date_columns):
        return requested_id
    return fallback_id


def _raw_entry(item: Item, order: int, start_column_id: str | None, end_column_id: str | None) -> _RawEntry:
    start_cell = item.cell(start_column_id)
    end_cell = item.cell(end_column_id)
    start_value = start_cell.date_value if start_cell else None
    end_value = end_cell.date_value if end_cell else None
    start = to_epoch_ms(start_value)
    end = to_epoch_ms(end_value)

    # One-sided ranges collapse to a single point.
    if start is not None and end is None:
        end, end_value = start, start_value
    elif start is None and end is not None:
        start, start_value = end, end_value

    # Inverted ranges are swapped rather than rejected.
    if start is not None and end is not None and end < start:
        start, end = end, start
        start_value, end_value = end_value, start_value

    return _RawEntry(item, order, start_value, end_value, start, end)


def _entry(raw: _RawEntry, offset: float | None = None, span: float | None = None) -> TimelineEntry:
    return TimelineEntry(
        item=raw.item,
        start_date_value=raw.start_value,
        end_date_value=raw.end_value,
        start_offset_percent=offset,
        span_percent=span,
    )


def build_timeline_entries(
    board: BoardSnapshot,
    start_date_column_id: str | None = None,
    end_date_column_id: str | None = None,
) -> Timeline:
    """Lay out every item of the board on a timeline.

    The start column falls back to the first DATE column by position,
    the end column to the resolved start column. Entries are ordered by
    start time, undated items last, ties in board order. Offsets
    and spans are percentages of the span between the earliest start
    and the latest end.
    """
    date_columns = get_date_columns(board)
    default_id = date_columns[0].id if date_columns else None
    start_id = _resolve_date_column_id(date_columns, start_date_column_id, default_id)
    end_id = _resolve_date_column_id(date_columns, end_date_column_id, start_id)

    items = [item for group in board.groups for item in by_position(group.items)]
    raw_entries = [_raw_entry(item, order, start_id, end_id) for order, item in enumerate(items)]
    raw_entries.sort(key=lambda e: (e.start is None, e.start if e.start is not None else 0, e.order))

    dated = [e for e in raw_entries if e.dated]
    if not dated:
        entries = tuple(_entry(e) for e in raw_entries)
        return Timeline(entries=entries, start_date_column_id=start_id, end_date_column_id=end_id)

    timeline_start = min(e.start for e in dated)
    timeline_end = max(e.end for e in dated)
    span = max(1, timeline_end - timeline_start)

    entries = []
    for e in raw_entries:
        if not e.dated:
            entries.append(_entry(e))
            continue
        offset = max(0.0, min(100.0, (e.start - timeline_start) / span * 100))
        width = max(0.0, min(100.0 - offset, (e.end - e.start) / span * 100))
        entries.append(_entry(e, offset, width))

    return Timeline(entries=tuple(entries), start_date_column_id=start_id, end_date_column_id=end_id)
