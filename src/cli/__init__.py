"""CLI entry point for the company logo scraper."""

from __future__ import annotations

import click

from src.cli.commands import extract_logo


@click.group()
def cli() -> None:
    """Company logo and social profile scraper."""


cli.add_command(extract_logo)
