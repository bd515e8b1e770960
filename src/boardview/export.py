"""CSV export of board snapshots."""

import re

from boardview.dates import format_date_value
from boardview.models import (
    CHECKBOX,
    DATE,
    NUMBER,
    PERSON,
    STATUS,
    TAGS,
    TEXT,
    BoardSnapshot,
    Column,
    CsvExport,
    Item,
    Member,
)

CSV_BOM = "\ufeff"

_NEEDS_QUOTES = re.compile(r'[",\r\n]')


def slugify(text: str) -> str:
    """Convert text to a file-name-friendly slug."""
    slug = text.strip().lower()
    slug = re.sub(r"[^a-z0-9]+", "-", slug)
    slug = slug.strip("-")
    return slug or "board-export"


def csv_file_name(board_name: str) -> str:
    return f"{slugify(board_name)}.csv"


def _format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _member_label(member: Member | None) -> str:
    if member is None:
        return ""
    return member.name or member.email


def cell_display_value(item: Item, column: Column, members_by_id: dict[str, Member]) -> str:
    """Text shown for item's value in column, by column type."""
    value = item.cell(column.id)
    if value is None:
        return ""

    if column.type == TEXT:
        return value.text_value or ""
    if column.type == STATUS:
        return value.status_value or ""
    if column.type == PERSON:
        if not value.person_id:
            return ""
        return _member_label(members_by_id.get(value.person_id)) or value.person_id
    if column.type == DATE:
        return format_date_value(value.date_value) if value.date_value else ""
    if column.type == NUMBER:
        return "" if value.number_value is None else _format_number(value.number_value)
    if column.type == TAGS:
        return ", ".join(value.tags_value) if value.tags_value else ""
    if column.type == CHECKBOX:
        if value.checkbox_value is None:
            return ""
        return "Checked" if value.checkbox_value else "Unchecked"
    return value.url_value or ""


def build_board_rows(snapshot: BoardSnapshot) -> list[list[str]]:
    """Header row followed by one row per item, in group order."""
    members_by_id = {member.user_id: member for member in snapshot.members}
    rows = [["Group", "Item", *(column.name for column in snapshot.columns)]]
    for group in snapshot.groups:
        for item in group.items:
            row = [group.name, item.name]
            row.extend(cell_display_value(item, column, members_by_id) for column in snapshot.columns)
            rows.append(row)
    return rows


def escape_csv_cell(value: str) -> str:
    """Quote value if it holds a quote, comma or line break."""
    if not _NEEDS_QUOTES.search(value):
        return value
    return '"' + value.replace('"', '""') + '"'


def build_board_csv(snapshot: BoardSnapshot) -> str:
    """Render the snapshot as CSV text.

    Rows are separated by a bare newline with none after the last row.
    """
    rows = build_board_rows(snapshot)
    return "\n".join(",".join(escape_csv_cell(cell) for cell in row) for row in rows)


def export_board(snapshot: BoardSnapshot) -> CsvExport:
    """CSV text plus the file name and row count for a download."""
    return CsvExport(
        file_name=csv_file_name(snapshot.board_name),
        text=build_board_csv(snapshot),
        row_count=sum(len(group.items) for group in snapshot.groups),
        columns=[column.name for column in snapshot.columns],
    )
