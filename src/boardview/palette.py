"""Status color palette and default status options."""

from boardview.models import StatusOption

COLORS: dict[str, str] = {
    "slate": "#64748b",
    "gray": "#6b7280",
    "red": "#ef4444",
    "orange": "#f97316",
    "amber": "#f59e0b",
    "yellow": "#eab308",
    "lime": "#84cc16",
    "green": "#22c55e",
    "emerald": "#10b981",
    "teal": "#14b8a6",
    "sky": "#0ea5e9",
    "blue": "#3b82f6",
    "indigo": "#6366f1",
    "violet": "#8b5cf6",
    "purple": "#a855f7",
    "pink": "#ec4899",
    "rose": "#f43f5e",
}

DEFAULT_STATUS_OPTIONS: tuple[StatusOption, ...] = (
    StatusOption("Not Started", "slate"),
    StatusOption("Working", "amber"),
    StatusOption("Blocked", "rose"),
    StatusOption("Done", "emerald"),
)

UNASSIGNED_COLOR = "slate"


def hex_for_color(name: str) -> str:
    """Hex value for a named status color.

    Hex strings pass through; unknown names fall back to slate.
    """
    if name.startswith("#"):
        return name
    return COLORS.get(name.lower(), COLORS[UNASSIGNED_COLOR])
