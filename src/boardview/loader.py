"""Load board snapshots from untyped JSON/YAML data into typed models."""

import json
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from boardview.models import (
    COLUMN_TYPES,
    MEMBER_ROLES,
    SORT_OPTIONS,
    STATUS,
    VIEW_TYPES,
    BoardSnapshot,
    BoardView,
    CellValue,
    Column,
    Group,
    Item,
    Member,
    PageInfo,
    StatusOption,
    StatusSettings,
    ViewConfig,
)

logger = logging.getLogger(__name__)


class SnapshotError(ValueError):
    """Raised when input data cannot be read as a board snapshot."""


def _require(data: dict, key: str, path: str) -> Any:
    if key not in data or data[key] is None:
        raise SnapshotError(f"{path}: missing '{key}'")
    return data[key]


def _as_dict(value: Any, path: str) -> dict:
    if not isinstance(value, dict):
        raise SnapshotError(f"{path}: expected an object")
    return value


def _as_list(value: Any, path: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise SnapshotError(f"{path}: expected a list")
    return value


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def _optional_number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _optional_bool(value: Any) -> bool | None:
    return value if isinstance(value, bool) else None


def _position(data: dict, path: str) -> int | float:
    value = data.get("position")
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SnapshotError(f"{path}: position must be a number, got {value!r}")
    return value


def _tags(value: Any) -> tuple[str, ...] | None:
    """Keep trimmed, non-empty string entries. Non-lists become None."""
    if not isinstance(value, list):
        return None
    return tuple(entry.strip() for entry in value if isinstance(entry, str) and entry.strip())


def parse_status_settings(value: Any) -> StatusSettings | None:
    """Read STATUS column settings. Anything that is not an object is None."""
    if not isinstance(value, dict):
        return None
    options = []
    seen = set()
    for raw in value.get("options") or []:
        if not isinstance(raw, dict) or not raw.get("label"):
            continue
        label = str(raw["label"])
        # Labels key the kanban lanes; the first option wins.
        if label in seen:
            continue
        seen.add(label)
        options.append(StatusOption(label=label, color=str(raw.get("color") or "slate")))
    return StatusSettings(options=tuple(options))


def parse_view_config(value: Any) -> ViewConfig | None:
    """Read a saved view config leniently. Non-objects become None."""
    if not isinstance(value, dict):
        return None
    sort_by = value.get("sortBy")
    if sort_by not in SORT_OPTIONS:
        sort_by = None
    return ViewConfig(
        status_value=_optional_str(value.get("statusValue")),
        person_id=_optional_str(value.get("personId")),
        date_from=_optional_str(value.get("dateFrom")),
        date_to=_optional_str(value.get("dateTo")),
        timeline_start_column_id=_optional_str(value.get("timelineStartColumnId")),
        timeline_end_column_id=_optional_str(value.get("timelineEndColumnId")),
        number_min=_optional_number(value.get("numberMin")),
        number_max=_optional_number(value.get("numberMax")),
        tag_value=_optional_str(value.get("tagValue")),
        checkbox_value=_optional_bool(value.get("checkboxValue")),
        url_query=_optional_str(value.get("urlQuery")),
        sort_by=sort_by,
    )


def parse_column(data: Any, path: str) -> Column:
    data = _as_dict(data, path)
    column_type = _require(data, "type", path)
    if column_type not in COLUMN_TYPES:
        raise SnapshotError(f"{path}: unknown column type '{column_type}'")
    settings = parse_status_settings(data.get("settings")) if column_type == STATUS else None
    return Column(
        id=str(_require(data, "id", path)),
        name=str(data.get("name") or ""),
        type=column_type,
        position=_position(data, path),
        settings=settings,
    )


def parse_cell_value(data: Any, path: str, item_id: str) -> CellValue:
    data = _as_dict(data, path)
    return CellValue(
        id=str(data.get("id") or f"{item_id}_{data.get('columnId')}"),
        item_id=str(data.get("itemId") or item_id),
        column_id=str(_require(data, "columnId", path)),
        text_value=_optional_str(data.get("textValue")),
        status_value=_optional_str(data.get("statusValue")),
        person_id=_optional_str(data.get("personId")),
        date_value=_optional_str(data.get("dateValue")),
        number_value=_optional_number(data.get("numberValue")),
        tags_value=_tags(data.get("tagsValue")),
        checkbox_value=_optional_bool(data.get("checkboxValue")),
        url_value=_optional_str(data.get("urlValue")),
    )


def parse_item(data: Any, path: str, group_id: str) -> Item:
    data = _as_dict(data, path)
    item_id = str(_require(data, "id", path))
    values = tuple(
        parse_cell_value(raw, f"{path}.values[{i}]", item_id)
        for i, raw in enumerate(_as_list(data.get("values"), f"{path}.values"))
    )
    return Item(
        id=item_id,
        group_id=str(data.get("groupId") or group_id),
        name=str(data.get("name") or ""),
        position=_position(data, path),
        last_edited_by_id=_optional_str(data.get("lastEditedById")),
        values=values,
    )


def parse_group(data: Any, path: str) -> Group:
    data = _as_dict(data, path)
    group_id = str(_require(data, "id", path))
    items = tuple(
        parse_item(raw, f"{path}.items[{i}]", group_id)
        for i, raw in enumerate(_as_list(data.get("items"), f"{path}.items"))
    )
    return Group(
        id=group_id,
        name=str(data.get("name") or ""),
        position=_position(data, path),
        is_collapsed=_optional_bool(data.get("isCollapsed")) or False,
        items=items,
    )


def parse_view(data: Any, path: str) -> BoardView:
    data = _as_dict(data, path)
    view_type = data.get("type") or "TABLE"
    if view_type not in VIEW_TYPES:
        raise SnapshotError(f"{path}: unknown view type '{view_type}'")
    return BoardView(
        id=str(_require(data, "id", path)),
        name=str(data.get("name") or ""),
        type=view_type,
        position=_position(data, path),
        config=parse_view_config(data.get("config")),
    )


def parse_member(data: Any, path: str) -> Member:
    data = _as_dict(data, path)
    role = data.get("role") or "MEMBER"
    if role not in MEMBER_ROLES:
        raise SnapshotError(f"{path}: unknown member role '{role}'")
    return Member(
        user_id=str(_require(data, "userId", path)),
        email=str(data.get("email") or ""),
        name=_optional_str(data.get("name")),
        role=role,
    )


def parse_snapshot(data: Any) -> BoardSnapshot:
    """Convert a decoded snapshot payload into a BoardSnapshot.

    Raises SnapshotError naming the offending path when the structure is
    wrong. Loosely typed blobs (settings, config, tags) are coerced.
    """
    data = _as_dict(data, "snapshot")

    def _each(key, parse):
        return tuple(parse(raw, f"{key}[{i}]") for i, raw in enumerate(_as_list(data.get(key), key)))

    return BoardSnapshot(
        workspace_id=str(data.get("workspaceId") or ""),
        board_id=str(_require(data, "boardId", "snapshot")),
        board_name=str(data.get("boardName") or ""),
        views=_each("views", parse_view),
        columns=_each("columns", parse_column),
        groups=_each("groups", parse_group),
        members=_each("members", parse_member),
    )


def parse_page_info(data: Any) -> PageInfo | None:
    """Read pageInfo from a response envelope. None stays None."""
    if data is None:
        return None
    data = _as_dict(data, "pageInfo")
    keys = ("itemOffset", "itemLimit", "returnedItems", "totalItems")
    raw = [_require(data, key, "pageInfo") for key in keys]
    try:
        offset, limit, returned, total = (int(value) for value in raw)
    except (TypeError, ValueError) as e:
        raise SnapshotError(f"pageInfo: {e}") from e
    return PageInfo(
        item_offset=offset,
        item_limit=limit,
        returned_items=returned,
        total_items=total,
        has_more=bool(data.get("hasMore")),
    )


def read_document(path: str) -> Any:
    """Read a JSON or YAML document from path, or stdin for "-".

    JSON is recognised by a .json suffix or a leading { or [ and parsed
    with the json module, since YAML 1.1 reads exponents like 1e-7 as
    strings. Everything else goes through yaml.safe_load.
    """
    if path == "-":
        text = sys.stdin.read()
    else:
        text = Path(path).read_text(encoding="utf-8-sig")
    if path.lower().endswith(".json") or text.lstrip().startswith(("{", "[")):
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise SnapshotError(f"{path}: not valid JSON: {e}") from e
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SnapshotError(f"{path}: not valid YAML: {e}") from e


def load_snapshot(path: str) -> BoardSnapshot:
    """Load a snapshot file. Envelopes ({snapshot, pageInfo}) are unwrapped."""
    data = read_document(path)
    if isinstance(data, dict) and "snapshot" in data and "pageInfo" in data:
        data = data["snapshot"]
    snapshot = parse_snapshot(data)
    logger.debug(
        "loaded board %s from %s: %d columns, %d groups",
        snapshot.board_id,
        path,
        len(snapshot.columns),
        len(snapshot.groups),
    )
    return snapshot


def load_view_config(path: str) -> ViewConfig:
    """Load a view config file. An empty file is an empty config."""
    data = read_document(path)
    if data is None:
        return ViewConfig()
    if not isinstance(data, dict):
        raise SnapshotError(f"{path}: expected an object")
    return parse_view_config(data)
