"""CLI command implementations for the company logo scraper."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click

from src.models.config import Config
from src.utils.logger import configure_logging


def _get_config() -> Config:
    """Load configuration from environment and .env file."""
    return Config()


def _print_summary(payload: dict[str, Any], saved_to: Path | None) -> None:
    """Print a human-readable summary of an extraction result."""
    status = "SUCCESS" if payload["success"] else "FAILED"
    click.echo(f"\n[{status}] {payload['message']}")

    logo = payload.get("logo")
    if logo:
        click.echo(f"  logo: {logo['url']}")
        click.echo(f"  size: {logo['size']} bytes")
        click.echo(f"  content type: {logo['contentType']}")
        if saved_to is not None:
            click.echo(f"  saved to: {saved_to}")

    profiles = payload.get("socialProfiles")
    if profiles is not None:
        found = {platform: url for platform, url in profiles.items() if url}
        click.echo(f"  social profiles ({len(found)}):")
        for platform, url in found.items():
            click.echo(f"    - {platform}: {url}")


@click.command()
@click.argument("url")
@click.option(
    "--output-format",
    default="summary",
    type=click.Choice(["summary", "json"]),
    help="Output format",
)
@click.option(
    "--save",
    "save_path",
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the logo image to this file",
)
def extract_logo(url: str, output_format: str, save_path: Path | None) -> None:
    """Find the company logo and social profiles for a website URL."""
    config = _get_config()
    configure_logging(config.log_level)

    from src.domains.discovery.services.logo_service import LogoService

    service = LogoService.from_config(config)
    result = service.extract(url)

    saved_to = None
    if result.logo is not None and save_path is not None:
        save_path.write_bytes(result.logo.data)
        saved_to = save_path

    payload = result.to_payload()
    if output_format == "json":
        click.echo(json.dumps(payload, indent=2))
    else:
        _print_summary(payload, saved_to)

    if not result.success:
        raise SystemExit(1)
