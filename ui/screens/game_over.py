"""Game-over screen — shown over the board once the engine reaches GAME_OVER.

Shows the reason, the final stats and the number of days survived.  R starts
a new game from the restart baseline; the screen dismisses with ``True`` so
the game screen can redraw.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Center, Vertical
from textual.screen import ModalScreen
from textual.widgets import Static


class GameOverScreen(ModalScreen[bool]):
    BINDINGS = [
        Binding("r", "restart", "Restart"),
        Binding("i", "show_about", "About"),
        Binding("q", "quit_game", "Quit"),
    ]

    DEFAULT_CSS = """
    GameOverScreen {
        align: center middle;
    }
    #over-box {
        width: 70;
        height: auto;
        padding: 2 4;
        border: double $accent;
        background: $surface;
    }
    #over-header {
        text-align: center;
        text-style: bold;
        color: $accent;
        margin-bottom: 1;
    }
    #over-reason {
        text-align: center;
        text-style: italic;
        margin: 1 0;
    }
    #over-stats {
        margin: 1 0;
        text-align: center;
    }
    #over-prompt {
        text-align: center;
        margin-top: 2;
    }
    """

    def compose(self) -> ComposeResult:
        engine = self.app.engine
        status = engine.status
        resources = engine.resources

        header = "★  YOU WIN  ★" if status.is_victory else "═══  GAME OVER  ═══"
        stats_text = "  ".join(f"{name}: {val}" for name, val in resources.stats().items())

        with Center():
            with Vertical(id="over-box"):
                yield Static(header, id="over-header")
                yield Static(status.reason, id="over-reason")
                yield Static(f"Final stats: {stats_text}", id="over-stats")
                yield Static(
                    f"Days at the office: {resources.day}  ·  Decisions: {len(engine.played_card_ids)}",
                    id="over-history",
                )
                yield Static("[R] Play Again    [Q] Quit", id="over-prompt")

    def action_restart(self) -> None:
        if self.app.engine.restart():
            self.dismiss(True)

    def action_show_about(self) -> None:
        from ui.screens.about import AboutScreen

        if self.app.engine.open_overlay():
            self.app.push_screen(AboutScreen())

    def action_quit_game(self) -> None:
        self.app.exit()
