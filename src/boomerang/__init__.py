"""Boomerang package entrypoint."""

from boomerang.cli.app import main as _cli_main


def main() -> None:
    """Run the Boomerang CLI."""
    _cli_main()
