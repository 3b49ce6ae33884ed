#!/usr/bin/env python3
"""Office Politics — a terminal card game about surviving the office."""

import argparse
import logging
from pathlib import Path


def configure_logging(level: str, log_file: Path | None) -> None:
    if log_file is not None:
        logging.basicConfig(
            level=level,
            filename=str(log_file),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        return

    from textual.logging import TextualHandler

    logging.basicConfig(level=level, handlers=[TextualHandler()])


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Office Politics — Keep everyone happy. Don't burn out.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Controls:
  Right Arrow / D   Yes
  Left Arrow / A    No
  Enter / Space     Continue (info cards)
  I                 About
  R                 Restart (after game over)
  Q                 Quit

Examples:
  python main.py                      Play with assets/deck.json
  python main.py --deck my_deck.json  Play with another card catalog
  python main.py --seed 42            Reproducible card order
""",
    )
    parser.add_argument("--deck", type=Path, help="Path to a card catalog JSON file")
    parser.add_argument("--seed", type=int, help="Seed for card selection")
    parser.add_argument("--delay", type=float, help="Seconds between a swipe and its effect")
    parser.add_argument("--debug", action="store_true", help="Log at DEBUG level")
    args = parser.parse_args()

    from game.config import Settings

    settings = Settings.from_env()
    overrides = {
        "deck_path": args.deck,
        "seed": args.seed,
        "decision_delay": args.delay,
        "log_level": "DEBUG" if args.debug else None,
    }
    settings = settings.model_copy(
        update={key: value for key, value in overrides.items() if value is not None}
    )
    configure_logging(settings.log_level, settings.log_file)

    from ui.app import OfficePoliticsApp

    app = OfficePoliticsApp(settings=settings)
    app.run()


if __name__ == "__main__":
    main()
