"""Data models for boardview snapshots."""

from __future__ import annotations

from dataclasses import dataclass, field

TEXT = "TEXT"
STATUS = "STATUS"
PERSON = "PERSON"
DATE = "DATE"
NUMBER = "NUMBER"
TAGS = "TAGS"
CHECKBOX = "CHECKBOX"
URL = "URL"

COLUMN_TYPES = (TEXT, STATUS, PERSON, DATE, NUMBER, TAGS, CHECKBOX, URL)
VIEW_TYPES = ("TABLE", "KANBAN", "CALENDAR", "TIMELINE")
MEMBER_ROLES = ("OWNER", "ADMIN", "MEMBER", "VIEWER")
SORT_OPTIONS = (
    "manual",
    "name_asc",
    "name_desc",
    "date_asc",
    "date_desc",
    "number_asc",
    "number_desc",
)


@dataclass(frozen=True)
class StatusOption:
    """One selectable label of a STATUS column."""

    label: str
    color: str


@dataclass(frozen=True)
class StatusSettings:
    """Settings of a STATUS column: its ordered options."""

    options: tuple[StatusOption, ...] = ()


@dataclass(frozen=True)
class Column:
    """A typed board column.

    ``settings`` is a StatusSettings for STATUS columns and None otherwise.
    """

    id: str
    name: str
    type: str
    position: int = 0
    settings: StatusSettings | None = None


@dataclass(frozen=True)
class CellValue:
    """The value of one item in one column.

    Only the field matching the owning column's type is meaningful.
    """

    id: str
    item_id: str
    column_id: str
    text_value: str | None = None
    status_value: str | None = None
    person_id: str | None = None
    date_value: str | None = None
    number_value: float | None = None
    tags_value: tuple[str, ...] | None = None
    checkbox_value: bool | None = None
    url_value: str | None = None


@dataclass(frozen=True)
class Item:
    """A row on the board."""

    id: str
    group_id: str
    name: str
    position: int = 0
    last_edited_by_id: str | None = None
    values: tuple[CellValue, ...] = ()

    def cell(self, column_id: str | None) -> CellValue | None:
        """Return this item's value for column_id, or None."""
        if not column_id:
            return None
        for value in self.values:
            if value.column_id == column_id:
                return value
        return None


@dataclass(frozen=True)
class Group:
    """A named, ordered section of items."""

    id: str
    name: str
    position: int = 0
    is_collapsed: bool = False
    items: tuple[Item, ...] = ()


@dataclass(frozen=True)
class Member:
    """A workspace member who can be assigned in PERSON columns."""

    user_id: str
    email: str
    name: str | None = None
    role: str = "MEMBER"


@dataclass(frozen=True)
class ViewConfig:
    """Filter and sort settings of a saved view. Every field is optional."""

    status_value: str | None = None
    person_id: str | None = None
    date_from: str | None = None
    date_to: str | None = None
    timeline_start_column_id: str | None = None
    timeline_end_column_id: str | None = None
    number_min: float | None = None
    number_max: float | None = None
    tag_value: str | None = None
    checkbox_value: bool | None = None
    url_query: str | None = None
    sort_by: str | None = None


@dataclass(frozen=True)
class BoardView:
    """A saved view attached to a board."""

    id: str
    name: str
    type: str = "TABLE"
    position: int = 0
    config: ViewConfig | None = None


@dataclass(frozen=True)
class BoardSnapshot:
    """The full board state at a point in time."""

    workspace_id: str
    board_id: str
    board_name: str
    views: tuple[BoardView, ...] = ()
    columns: tuple[Column, ...] = ()
    groups: tuple[Group, ...] = ()
    members: tuple[Member, ...] = ()


@dataclass(frozen=True)
class PageInfo:
    """Metadata describing one offset/limit page of items."""

    item_offset: int
    item_limit: int
    returned_items: int
    total_items: int
    has_more: bool


@dataclass(frozen=True)
class Page:
    """A paginated snapshot and its page metadata."""

    snapshot: BoardSnapshot
    page_info: PageInfo


@dataclass(frozen=True)
class PaginationState:
    """Client-side bookkeeping for loading the next page."""

    next_offset: int
    item_limit: int
    loaded_items: int
    total_items: int
    has_more: bool


@dataclass(frozen=True)
class KanbanLane:
    """A kanban column of items sharing a status."""

    id: str
    label: str
    color: str
    items: tuple[Item, ...] = ()


@dataclass(frozen=True)
class TimelineEntry:
    """An item placed on the timeline.

    Percentages are None when the item (or the whole board) has no dates.
    """

    item: Item
    start_date_value: str | None
    end_date_value: str | None
    start_offset_percent: float | None
    span_percent: float | None


@dataclass(frozen=True)
class Timeline:
    """Timeline entries plus the date columns they were read from."""

    entries: tuple[TimelineEntry, ...] = ()
    start_date_column_id: str | None = None
    end_date_column_id: str | None = None


@dataclass(frozen=True)
class ColumnIds:
    """The first column id of each filterable type, or None."""

    status: str | None = None
    person: str | None = None
    date: str | None = None
    number: str | None = None
    tags: str | None = None
    checkbox: str | None = None
    url: str | None = None


@dataclass(frozen=True)
class GridPosition:
    """A focused cell in the table grid."""

    row: int
    col: int


@dataclass(frozen=True)
class VirtualWindow:
    """Visible row range plus spacer heights for off-screen rows.

    ``end_index < start_index`` means nothing is visible.
    """

    start_index: int
    end_index: int
    top_spacer_height: float
    bottom_spacer_height: float


@dataclass
class CsvExport:
    """A rendered CSV document and the file name to save it under."""

    file_name: str
    text: str
    row_count: int = 0
    columns: list[str] = field(default_factory=list)
