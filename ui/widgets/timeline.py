"""Timeline widget — compact status bar at the bottom of the game screen.

Shows (left to right):
  Day N  ·  cards left in the pool  ·  followups waiting  ·  cards played
"""

from __future__ import annotations

from rich.text import Text
from textual.widget import Widget


class Timeline(Widget):
    DEFAULT_CSS = """
    Timeline {
        width: 1fr;
        height: 3;
        content-align: left middle;
        padding: 0 1;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._day: int = 1
        self._pool_status: str = ""
        self._pending: int = 0
        self._played: int = 0

    def set_data(self, day: int, pool_status: str, pending: int, played: int) -> None:
        self._day = day
        self._pool_status = pool_status
        self._pending = pending
        self._played = played
        self.refresh()

    def render(self) -> Text:
        text = Text()
        text.append(f"Day {self._day}", style="bold")
        text.append("  ·  ", style="dim")
        text.append(f"Deck {self._pool_status}", style="dim")
        if self._pending:
            text.append("  ·  ", style="dim")
            text.append(f"{self._pending} pending", style="yellow")
        text.append("  ·  ", style="dim")
        text.append(f"{self._played} played", style="dim italic")
        return text
