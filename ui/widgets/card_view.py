"""CardView widget — the card the player is deciding on.

Choice cards show the no/yes options under the card text, each followed by the
stats it would move.  Magnitude is hinted with one to three dots, never the
exact delta:  ``[boss: •••]``

Info cards show a single continue prompt.  The welcome card gets its own
border so a fresh game is easy to spot.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text
from textual.widget import Widget

from cards.loader import WELCOME_CARD_ID
from cards.models import Card, Effects
from game.state import STAT_IDS

_MAX_DOTS = 3


class CardView(Widget):
    DEFAULT_CSS = """
    CardView {
        width: 1fr;
        max-width: 80;
        padding: 1 2;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.card: Card | None = None
        self.chosen: str | None = None

    def set_card(self, card: Card | None) -> None:
        self.card = card
        self.chosen = None
        self.refresh()

    def set_highlight(self, direction: str | None) -> None:
        """Mark the chosen side while the dismissal delay runs."""
        self.chosen = direction
        self.refresh()

    def render(self) -> RenderableType:
        if self.card is None:
            quiet = Text("\nA quiet day at the office...\n", style="dim italic")
            return Panel(Align.center(quiet), border_style="bright_black", padding=(2, 4))

        card = self.card
        if card.id == WELCOME_CARD_ID:
            border, title = "bright_yellow", "[bold yellow]DAY ONE[/]"
        elif card.is_info_only:
            border, title = "cyan", "[bold cyan]NOTICE[/]"
        else:
            border, title = "white", ""

        story = Text(f"\n{card.text}\n", style="italic", justify="center")
        card_panel = Panel(story, title=title, border_style=border, padding=(1, 3))

        if card.is_info_only:
            prompt_style = "bold reverse cyan" if self.chosen else "cyan"
            prompt = Text("\nEnter / ← / →  continue", style=prompt_style, justify="center")
            return Group(card_panel, prompt)

        options = Text("\n")
        options.append_text(self._option_line("no", "←", card.no_text, card.no_effects))
        options.append("\n")
        options.append_text(self._option_line("yes", "→", card.yes_text, card.yes_effects))
        return Group(card_panel, options)

    def _option_line(self, direction: str, arrow: str, label: str, effects: Effects) -> Text:
        picked = self.chosen == direction
        line = Text(no_wrap=False)
        line.append(f" {arrow} ", style="bold reverse magenta" if picked else "bold magenta")
        line.append(f" {label}", style="bold" if picked else "")
        for stat_id in STAT_IDS:
            delta = getattr(effects, stat_id)
            if delta:
                dots = "•" * min(_MAX_DOTS, max(1, abs(delta) // 10))
                line.append(f"  [{stat_id}: {dots}]", style="yellow")
        return line
