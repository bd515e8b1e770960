"""Per-page response headers and page-served events for paginated responses.

Events go to an observer passed in by the caller; there is no global
telemetry client.
"""

import logging
import time
from typing import Any, Callable

from boardview.loader import parse_page_info
from boardview.models import PageInfo
from boardview.writer import dumps

logger = logging.getLogger(__name__)

Observer = Callable[[str, dict[str, Any]], None]

DEFAULT_EVENT_NAME = "board_pagination_served"


def payload_bytes(payload: dict) -> int:
    """UTF-8 size of the compact JSON encoding of payload."""
    return len(dumps(payload).encode("utf-8"))


def build_pagination_headers(page_info: PageInfo, size: int, duration_ms: int) -> dict[str, str]:
    """Response headers describing a served page."""
    return {
        "x-page-offset": str(page_info.item_offset),
        "x-page-limit": str(page_info.item_limit),
        "x-page-returned": str(page_info.returned_items),
        "x-page-total": str(page_info.total_items),
        "x-page-has-more": "true" if page_info.has_more else "false",
        "x-payload-bytes": str(size),
        "x-duration-ms": str(duration_ms),
        "server-timing": f"pagination;dur={duration_ms}",
    }


def sample_pagination(
    payload: dict,
    route: str,
    started_at_ms: int,
    observer: Observer | None = None,
    event_name: str = DEFAULT_EVENT_NAME,
    context: dict[str, Any] | None = None,
    now_ms: int | None = None,
) -> dict[str, str]:
    """Measure a {snapshot, pageInfo} payload and report it.

    Returns the headers to attach, or {} when pageInfo is null. The
    observer, if given, receives (event_name, properties); an observer
    that raises is logged and otherwise ignored.
    """
    page_info = parse_page_info(payload.get("pageInfo"))
    if page_info is None:
        return {}

    if now_ms is None:
        now_ms = int(time.time() * 1000)
    duration_ms = max(0, now_ms - started_at_ms)
    size = payload_bytes(payload)
    headers = build_pagination_headers(page_info, size, duration_ms)

    logger.debug(
        "%s served items %d-%d of %d (%d bytes, %d ms)",
        route,
        page_info.item_offset,
        page_info.item_offset + page_info.returned_items,
        page_info.total_items,
        size,
        duration_ms,
    )

    if observer is not None:
        properties = {
            "route": route,
            "itemOffset": page_info.item_offset,
            "itemLimit": page_info.item_limit,
            "returnedItems": page_info.returned_items,
            "totalItems": page_info.total_items,
            "hasMore": page_info.has_more,
            "payloadBytes": size,
            "durationMs": duration_ms,
            **(context or {}),
        }
        try:
            observer(event_name, properties)
        except Exception as e:
            logger.warning("pagination observer failed for %s: %s", route, e)

    return headers
