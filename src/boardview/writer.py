"""Serialize typed models back to the camelCase wire format."""

import json

from boardview.models import (
    BoardSnapshot,
    BoardView,
    CellValue,
    Column,
    Group,
    Item,
    KanbanLane,
    Member,
    Page,
    PageInfo,
    PaginationState,
    Timeline,
    ViewConfig,
)


def view_config_to_dict(config: ViewConfig | None) -> dict | None:
    """Only the fields that are set are written."""
    if config is None:
        return None
    fields = {
        "statusValue": config.status_value,
        "personId": config.person_id,
        "dateFrom": config.date_from,
        "dateTo": config.date_to,
        "timelineStartColumnId": config.timeline_start_column_id,
        "timelineEndColumnId": config.timeline_end_column_id,
        "numberMin": config.number_min,
        "numberMax": config.number_max,
        "tagValue": config.tag_value,
        "checkboxValue": config.checkbox_value,
        "urlQuery": config.url_query,
        "sortBy": config.sort_by,
    }
    return {key: value for key, value in fields.items() if value is not None}


def column_to_dict(column: Column) -> dict:
    settings = None
    if column.settings is not None:
        settings = {"options": [{"label": o.label, "color": o.color} for o in column.settings.options]}
    return {
        "id": column.id,
        "name": column.name,
        "type": column.type,
        "position": column.position,
        "settings": settings,
    }


def cell_value_to_dict(value: CellValue) -> dict:
    return {
        "id": value.id,
        "itemId": value.item_id,
        "columnId": value.column_id,
        "textValue": value.text_value,
        "statusValue": value.status_value,
        "personId": value.person_id,
        "dateValue": value.date_value,
        "numberValue": value.number_value,
        "tagsValue": list(value.tags_value) if value.tags_value is not None else None,
        "checkboxValue": value.checkbox_value,
        "urlValue": value.url_value,
    }


def item_to_dict(item: Item) -> dict:
    return {
        "id": item.id,
        "groupId": item.group_id,
        "name": item.name,
        "position": item.position,
        "lastEditedById": item.last_edited_by_id,
        "values": [cell_value_to_dict(v) for v in item.values],
    }


def group_to_dict(group: Group) -> dict:
    return {
        "id": group.id,
        "name": group.name,
        "position": group.position,
        "isCollapsed": group.is_collapsed,
        "items": [item_to_dict(i) for i in group.items],
    }


def view_to_dict(view: BoardView) -> dict:
    return {
        "id": view.id,
        "name": view.name,
        "type": view.type,
        "position": view.position,
        "config": view_config_to_dict(view.config),
    }


def member_to_dict(member: Member) -> dict:
    return {"userId": member.user_id, "email": member.email, "name": member.name, "role": member.role}


def snapshot_to_dict(snapshot: BoardSnapshot) -> dict:
    """Convert a snapshot to a JSON-ready dict."""
    return {
        "workspaceId": snapshot.workspace_id,
        "boardId": snapshot.board_id,
        "boardName": snapshot.board_name,
        "views": [view_to_dict(v) for v in snapshot.views],
        "columns": [column_to_dict(c) for c in snapshot.columns],
        "groups": [group_to_dict(g) for g in snapshot.groups],
        "members": [member_to_dict(m) for m in snapshot.members],
    }


def page_info_to_dict(page_info: PageInfo | None) -> dict | None:
    if page_info is None:
        return None
    return {
        "itemOffset": page_info.item_offset,
        "itemLimit": page_info.item_limit,
        "returnedItems": page_info.returned_items,
        "totalItems": page_info.total_items,
        "hasMore": page_info.has_more,
    }


def envelope_to_dict(snapshot: BoardSnapshot, page_info: PageInfo | None) -> dict:
    """The {snapshot, pageInfo} response envelope."""
    return {"snapshot": snapshot_to_dict(snapshot), "pageInfo": page_info_to_dict(page_info)}


def page_to_dict(page: Page) -> dict:
    return envelope_to_dict(page.snapshot, page.page_info)


def pagination_state_to_dict(state: PaginationState | None) -> dict | None:
    if state is None:
        return None
    return {
        "nextOffset": state.next_offset,
        "itemLimit": state.item_limit,
        "loadedItems": state.loaded_items,
        "totalItems": state.total_items,
        "hasMore": state.has_more,
    }


def lane_to_dict(lane: KanbanLane) -> dict:
    return {
        "id": lane.id,
        "label": lane.label,
        "color": lane.color,
        "items": [item_to_dict(i) for i in lane.items],
    }


def timeline_to_dict(timeline: Timeline) -> dict:
    return {
        "startDateColumnId": timeline.start_date_column_id,
        "endDateColumnId": timeline.end_date_column_id,
        "entries": [
            {
                "item": item_to_dict(e.item),
                "startDateValue": e.start_date_value,
                "endDateValue": e.end_date_value,
                "startOffsetPercent": e.start_offset_percent,
                "spanPercent": e.span_percent,
            }
            for e in timeline.entries
        ],
    }


def dumps(data: dict | list) -> str:
    """Compact JSON, the way payload sizes are measured."""
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
