"""Client-side page loading: request paths, response shapes and merging."""

from dataclasses import replace
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from boardview.loader import parse_page_info, parse_snapshot
from boardview.models import BoardSnapshot, Group, Item, PaginationState
from boardview.view.sorting import by_position


def build_paged_bootstrap_path(base_path: str, item_offset: int, item_limit: int) -> str:
    """Add (or replace) itemOffset and itemLimit in base_path's query string."""
    parts = urlsplit(base_path)
    query = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k not in ("itemOffset", "itemLimit")]
    query.append(("itemOffset", str(item_offset)))
    query.append(("itemLimit", str(item_limit)))
    return urlunsplit(parts._replace(query=urlencode(query)))


def normalize_bootstrap_response(payload: Any) -> tuple[BoardSnapshot, PaginationState | None]:
    """Accept either a bare snapshot or a {snapshot, pageInfo} envelope.

    For an envelope with page info, the returned state points at the
    first item after the page just received.
    """
    if isinstance(payload, dict) and "snapshot" in payload and "pageInfo" in payload:
        snapshot = parse_snapshot(payload["snapshot"])
        page_info = parse_page_info(payload["pageInfo"])
        if page_info is None:
            return snapshot, None

        loaded = page_info.item_offset + page_info.returned_items
        return snapshot, PaginationState(
            next_offset=loaded,
            item_limit=page_info.item_limit,
            loaded_items=loaded,
            total_items=page_info.total_items,
            has_more=page_info.has_more,
        )

    return parse_snapshot(payload), None


def _merge_group(existing: Group, incoming: Group) -> Group:
    items: dict[str, Item] = {item.id: item for item in existing.items}
    for item in incoming.items:
        # The latest page wins for items seen twice.
        items[item.id] = item
    return replace(
        existing,
        name=incoming.name,
        position=incoming.position,
        items=tuple(by_position(items.values())),
    )


def merge_paged_snapshot(current: BoardSnapshot, incoming: BoardSnapshot) -> BoardSnapshot:
    """Fold a newly fetched page into the snapshot loaded so far.

    Board metadata (name, views, columns, members) comes from incoming.
    Groups and items are merged by id; incoming items replace current
    ones with the same id. Items and groups end up ordered by position.
    """
    merged: dict[str, Group] = {group.id: group for group in current.groups}

    for group in incoming.groups:
        existing = merged.get(group.id)
        if existing is None:
            merged[group.id] = replace(group, items=tuple(by_position(group.items)))
        else:
            merged[group.id] = _merge_group(existing, group)

    return replace(
        current,
        board_name=incoming.board_name,
        views=incoming.views,
        columns=incoming.columns,
        members=incoming.members,
        groups=tuple(sorted(merged.values(), key=lambda g: g.position)),
    )
