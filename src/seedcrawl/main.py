"""Entry-point for launching the CLI application."""
from __future__ import annotations

from dotenv import load_dotenv

from .presentation.cli.app import main as cli_main


def main() -> None:
    """Load `.env` then run the CLI presentation layer."""
    load_dotenv()
    cli_main()


if __name__ == "__main__":
    main()
