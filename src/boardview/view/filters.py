"""Per-column-type filter predicates for board views."""

from typing import Iterable

from boardview.dates import to_epoch_ms
from boardview.models import (
    CHECKBOX,
    DATE,
    NUMBER,
    PERSON,
    STATUS,
    TAGS,
    URL,
    Column,
    ColumnIds,
    Item,
    ViewConfig,
)


def get_column_by_type(columns: Iterable[Column], column_type: str) -> Column | None:
    """First column of column_type in declared order, or None."""
    for column in columns:
        if column.type == column_type:
            return column
    return None


def _column_id(columns: Iterable[Column], column_type: str) -> str | None:
    column = get_column_by_type(columns, column_type)
    return column.id if column else None


def resolve_column_ids(columns: tuple[Column, ...]) -> ColumnIds:
    """Pick the one column per type that filters and sorts read from."""
    return ColumnIds(
        status=_column_id(columns, STATUS),
        person=_column_id(columns, PERSON),
        date=_column_id(columns, DATE),
        number=_column_id(columns, NUMBER),
        tags=_column_id(columns, TAGS),
        checkbox=_column_id(columns, CHECKBOX),
        url=_column_id(columns, URL),
    )


def _date_in_range(item: Item, config: ViewConfig, column_id: str | None) -> bool:
    # A bound that is set but unparseable still requires the item to be dated.
    date_from = to_epoch_ms(config.date_from) if config.date_from else None
    date_to = to_epoch_ms(config.date_to) if config.date_to else None

    cell = item.cell(column_id)
    current = to_epoch_ms(cell.date_value if cell else None)
    if current is None:
        return False
    if date_from is not None and current < date_from:
        return False
    if date_to is not None and current > date_to:
        return False
    return True


def matches_config(item: Item, config: ViewConfig, column_ids: ColumnIds) -> bool:
    """True if item satisfies every filter set in config.

    A filter on a type the board has no column for fails every item.
    """
    if config.status_value:
        cell = item.cell(column_ids.status)
        if (cell.status_value if cell else None) != config.status_value:
            return False

    if config.person_id:
        cell = item.cell(column_ids.person)
        if (cell.person_id if cell else None) != config.person_id:
            return False

    if config.date_from or config.date_to:
        if not _date_in_range(item, config, column_ids.date):
            return False

    if config.number_min is not None or config.number_max is not None:
        cell = item.cell(column_ids.number)
        number = cell.number_value if cell else None
        if number is None:
            return False
        if config.number_min is not None and number < config.number_min:
            return False
        if config.number_max is not None and number > config.number_max:
            return False

    if config.tag_value:
        needle = config.tag_value.strip().lower()
        cell = item.cell(column_ids.tags)
        tags = (cell.tags_value if cell else None) or ()
        if not any(needle in tag.lower() for tag in tags):
            return False

    if config.checkbox_value is not None:
        cell = item.cell(column_ids.checkbox)
        if (cell.checkbox_value if cell else None) != config.checkbox_value:
            return False

    if config.url_query:
        needle = config.url_query.strip().lower()
        cell = item.cell(column_ids.url)
        url = (cell.url_value if cell else None) or ""
        if needle not in url.lower():
            return False

    return True
