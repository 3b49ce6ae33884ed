"""Office Politics — Textual application entry point.

``OfficePoliticsApp`` owns the ``GameEngine`` built from the loaded catalog and
pushes the ``GameScreen`` on startup.  Screens reach the engine through
``self.app.engine``; the app is the single place that holds shared state.
"""

from __future__ import annotations

from textual.app import App

from cards.loader import load_catalog
from game.config import Settings
from game.engine import GameEngine


class OfficePoliticsApp(App):
    """Root Textual application for Office Politics."""

    TITLE = "Office Politics"

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.settings = settings or Settings.from_env()
        self.engine = GameEngine(
            load_catalog(self.settings.deck_path),
            seed=self.settings.seed,
        )

    def on_mount(self) -> None:
        from ui.screens.game import GameScreen

        self.push_screen(GameScreen())
