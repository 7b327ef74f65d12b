"""Entry point for the todopanel CLI.

Usage:
    python -m todopanel.interfaces.cli.main

Or via installed entry point:
    todopanel <command>
"""

from todopanel.interfaces.cli import app


def main() -> None:
    """Run the todopanel CLI application."""
    app()


if __name__ == "__main__":
    main()
