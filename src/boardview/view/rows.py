"""Row helpers for the table view."""

from boardview.models import Group, Item


def flatten_visible_rows(groups: tuple[Group, ...]) -> list[Item]:
    """Items of every expanded group, in group order."""
    rows: list[Item] = []
    for group in groups:
        if group.is_collapsed:
            continue
        rows.extend(group.items)
    return rows


def has_no_search_results(groups: tuple[Group, ...], search: str) -> bool:
    """True when a non-blank search left no groups to show."""
    return bool(search.strip()) and not groups
