"""StatsBar widget — displays the four office stats as icon + bar + value columns.

Each stat renders as:  ``<icon> <name> ████░░░░ <value>``

After a decision the last change is shown next to the value in green/red so
the player can see what their swipe did.
"""

from __future__ import annotations

from rich.columns import Columns
from rich.text import Text
from textual.widget import Widget

from game.state import STAT_IDS

STAT_LABELS: dict[str, tuple[str, str]] = {
    "motivation": ("🔥", "Motivation"),
    "performance": ("📈", "Performance"),
    "colleagues": ("👥", "Colleagues"),
    "boss": ("👔", "Boss"),
}

_BAR_WIDTH = 8
_NAME_MAX = 11


class StatsBar(Widget):
    DEFAULT_CSS = """
    StatsBar {
        height: auto;
        min-height: 3;
        max-height: 6;
        padding: 1 2;
        border-bottom: solid $primary-darken-2;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._stats: dict[str, int] = {}
        self._changes: dict[str, int] = {}

    def set_stats(self, stats: dict[str, int], changes: dict[str, int] | None = None) -> None:
        """Update the stat values and last changes, then refresh the widget."""
        self._stats = {stat_id: stats[stat_id] for stat_id in STAT_IDS if stat_id in stats}
        self._changes = dict(changes or {})
        self.refresh()

    def render(self) -> Columns | Text:
        if not self._stats:
            return Text("No stats loaded", style="dim")

        items = [
            self._render_stat(stat_id, val, self._changes.get(stat_id, 0))
            for stat_id, val in self._stats.items()
        ]
        return Columns(items, equal=True, expand=True, padding=(0, 2))

    @staticmethod
    def _render_stat(stat_id: str, val: int, change: int = 0) -> Text:
        icon, name = STAT_LABELS.get(stat_id, ("?", stat_id))
        name_display = name[:_NAME_MAX].ljust(_NAME_MAX)

        filled = max(0, min(_BAR_WIDTH, round(val / 100 * _BAR_WIDTH)))

        text = Text(no_wrap=True)
        text.append(f"{icon} ", style="bold")
        text.append(f"{name_display} ", style="bold")
        text.append("█" * filled, style=_val_color(val))
        text.append("░" * (_BAR_WIDTH - filled), style="bright_black")
        text.append(f" {val:>3d}", style=_val_color(val))

        if change:
            sign = "+" if change > 0 else ""
            text.append(f"({sign}{change})", style="green" if change > 0 else "red")

        return text


def _val_color(val: int) -> str:
    if val <= 15 or val >= 85:
        return "bold red"
    if val <= 25 or val >= 75:
        return "yellow"
    return "green"
