from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import Screen

from game.engine import Decision, GamePhase
from ui.widgets.card_view import CardView
from ui.widgets.stats_bar import StatsBar
from ui.widgets.timeline import Timeline


class GameScreen(Screen):
    BINDINGS = [
        Binding("left", "swipe('no')", "No", show=False),
        Binding("a", "swipe('no')", "No", show=False),
        Binding("right", "swipe('yes')", "Yes", show=False),
        Binding("d", "swipe('yes')", "Yes", show=False),
        Binding("enter", "swipe('acknowledge')", "Continue", show=False),
        Binding("space", "swipe('acknowledge')", "Continue", show=False),
        Binding("i", "show_about", "About [I]", show=True),
        Binding("q", "quit_game", "Quit", show=True),
    ]

    DEFAULT_CSS = """
    GameScreen {
        layout: vertical;
    }
    #game-body {
        height: 1fr;
        align: center middle;
    }
    #bottom-bar {
        height: 3;
        border-top: solid $primary;
        layout: horizontal;
        padding: 0 1;
    }
    """

    def compose(self) -> ComposeResult:
        yield StatsBar(id="stats-bar")
        with Vertical(id="game-body"):
            yield CardView(id="card-view")
        with Horizontal(id="bottom-bar"):
            yield Timeline(id="timeline")

    def on_mount(self) -> None:
        self._update_all_widgets()

    # ── Action Handling ─────────────────────────────────────────────────

    def action_swipe(self, direction: str) -> None:
        engine = self.app.engine
        decision = Decision(direction)
        if not engine.submit(decision):
            return

        card_view = self.query_one("#card-view", CardView)
        card_view.set_highlight(direction)
        # The decision lands once the dismissal delay has passed
        self.set_timer(self.app.settings.decision_delay, self._resolve_decision)

    def _resolve_decision(self) -> None:
        engine = self.app.engine
        engine.resolve_pending()
        self._update_all_widgets()

        if engine.phase is GamePhase.GAME_OVER:
            from ui.screens.game_over import GameOverScreen

            self.app.push_screen(GameOverScreen(), self._on_game_over_closed)

    def _on_game_over_closed(self, restarted: bool | None) -> None:
        if restarted:
            self._update_all_widgets()

    # ── Widget Updates ──────────────────────────────────────────────────

    def _update_all_widgets(self) -> None:
        engine = self.app.engine
        snapshot = engine.snapshot()
        resources = snapshot["resources"]

        self.query_one("#card-view", CardView).set_card(engine.current_card)
        self.query_one("#stats-bar", StatsBar).set_stats(resources, snapshot["changes"])
        self.query_one("#timeline", Timeline).set_data(
            day=resources["day"],
            pool_status=engine.pool.status,
            pending=len(engine.pool.pending),
            played=len(engine.played_card_ids),
        )

    # ── Navigation ──────────────────────────────────────────────────────

    def action_show_about(self) -> None:
        from ui.screens.about import AboutScreen

        if self.app.engine.open_overlay():
            self.app.push_screen(AboutScreen())

    def action_quit_game(self) -> None:
        self.app.exit()
