"""Kanban lanes bucketed by status."""

from boardview.models import STATUS, BoardSnapshot, Item, KanbanLane
from boardview.palette import UNASSIGNED_COLOR
from boardview.view.filters import get_column_by_type
from boardview.view.search import get_status_options
from boardview.view.sorting import by_position

UNASSIGNED_ID = "UNASSIGNED"
UNASSIGNED_LABEL = "Unassigned"


def build_kanban_lanes(board: BoardSnapshot) -> list[KanbanLane]:
    """One lane per status option of the first STATUS column, plus Unassigned.

    Items with no status, or a status matching no option, land in the
    trailing Unassigned lane. Returns [] if the board has no STATUS column.
    """
    status_column = get_column_by_type(board.columns, STATUS)
    if status_column is None:
        return []

    raw = status_column.settings.options if status_column.settings else None
    options = []
    for option in get_status_options(raw):
        if all(option.label != kept.label for kept in options):
            options.append(option)

    by_label: dict[str, list[Item]] = {option.label: [] for option in options}
    unassigned: list[Item] = []

    for group in board.groups:
        for item in group.items:
            cell = item.cell(status_column.id)
            status = cell.status_value if cell else None
            if not status or status not in by_label:
                unassigned.append(item)
            else:
                by_label[status].append(item)

    lanes = [
        KanbanLane(
            id=option.label,
            label=option.label,
            color=option.color,
            items=tuple(by_position(by_label[option.label])),
        )
        for option in options
    ]
    lanes.append(
        KanbanLane(
            id=UNASSIGNED_ID,
            label=UNASSIGNED_LABEL,
            color=UNASSIGNED_COLOR,
            items=tuple(by_position(unassigned)),
        )
    )
    return lanes
