"""About panel — press I from the game or the game-over screen.

The engine sits in ``INFO_OVERLAY`` while this screen is open and returns to
whatever phase it was in when the panel closes.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Static

ABOUT_TEXT = """\
Every day brings a new decision. Swipe right (→ / D) to say yes,
left (← / A) to say no. Info cards continue with any key.

Keep four things in balance:
  🔥 Motivation   📈 Performance   👥 Colleagues   👔 Boss

Let any of them hit zero, or let any of them run all the way
to the top, and your time at the office is over.

Survive long enough with everything in good shape and
something better might come along."""


class AboutScreen(ModalScreen):
    BINDINGS = [
        Binding("escape", "close", "Close"),
        Binding("i", "close", "Close"),
        Binding("enter", "close", "Close", show=False),
        Binding("space", "close", "Close", show=False),
    ]

    DEFAULT_CSS = """
    AboutScreen {
        align: center middle;
    }
    #about-container {
        width: 70;
        height: auto;
        border: heavy $accent;
        background: $surface;
        padding: 1 2;
    }
    #about-title {
        text-align: center;
        text-style: bold;
        color: $accent;
        margin-bottom: 1;
    }
    #about-footer {
        text-align: center;
        color: $text-muted;
        margin-top: 1;
    }
    """

    def compose(self) -> ComposeResult:
        with Vertical(id="about-container"):
            yield Static("◆  OFFICE POLITICS  ◆", id="about-title")
            yield Static(ABOUT_TEXT, id="about-text")
            yield Static("[Esc] Close", id="about-footer")

    def action_close(self) -> None:
        self.app.engine.close_overlay()
        self.dismiss()
