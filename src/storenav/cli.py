"""CLI interface for Storenav.

Command-line tool for generating, validating and checking storefront
navigation from exported page data.
"""

import json
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any, NoReturn, TypeVar

import click

from storenav.config import Config
from storenav.core.diagnostics import run_navigation_checks, slug_report
from storenav.core.navigation import NavigationManager
from storenav.store import PageStore, SiteData

F = TypeVar("F", bound=Callable[..., Any])


def _source_options(func: F) -> F:
    """Attach --config and --pages options shared by all commands."""
    func = click.option(
        "--pages",
        "pages_file",
        type=click.Path(path_type=Path, dir_okay=False),
        default=None,
        help="Pages JSON file (overrides config)",
    )(func)
    return click.option(
        "--config",
        "-c",
        "config_path",
        type=click.Path(exists=True, path_type=Path, dir_okay=False),
        default=None,
        help="Path to configuration file (default: auto-discover storenav.toml)",
    )(func)


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
def cli(verbose: bool) -> None:
    """Storenav - navigation for page-builder storefronts."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@_source_options
@click.option("--host", default=None, help="Host to bind to (overrides config)")
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
def serve(
    config_path: Path | None,
    pages_file: Path | None,
    host: str | None,
    port: int | None,
) -> None:
    """Start the navigation API server."""
    from storenav.server import run_server

    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        pages_file=pages_file,
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Pages file: {config.store.pages_file}")
    click.echo(f"Header items: up to {config.navigation.header.max_items}")

    run_server(config)


@cli.command()
@_source_options
@click.option(
    "--max-items",
    type=click.IntRange(min=0),
    default=None,
    help="Maximum header items (overrides config)",
)
@click.option("--indent", type=int, default=2, help="JSON indentation")
def generate(
    config_path: Path | None,
    pages_file: Path | None,
    max_items: int | None,
    indent: int,
) -> None:
    """Print the generated navigation as JSON."""
    config = _load_config(config_path).with_overrides(
        pages_file=pages_file,
        max_items=max_items,
    )
    site = _load_site(config)

    manager = NavigationManager(config.navigation)
    navigation = manager.generate_navigation(site.pages, site.policies)
    click.echo(json.dumps(navigation.to_dict(), indent=indent))


@cli.command()
@_source_options
def validate(config_path: Path | None, pages_file: Path | None) -> None:
    """Validate the generated navigation structure."""
    config = _load_config(config_path).with_overrides(pages_file=pages_file)
    site = _load_site(config)

    manager = NavigationManager(config.navigation)
    navigation = manager.generate_navigation(site.pages, site.policies)
    report = manager.validate_navigation(navigation.all_items())

    for error in report.errors:
        click.echo(click.style(f"Error: {error}", fg="red"))
    for warning in report.warnings:
        click.echo(click.style(f"Warning: {warning}", fg="yellow"))

    if not report.is_valid:
        sys.exit(1)

    click.echo(click.style("Navigation is valid", fg="green"))


@cli.command()
@_source_options
def check(config_path: Path | None, pages_file: Path | None) -> None:
    """Run publish and navigation checks against the page data."""
    config = _load_config(config_path).with_overrides(pages_file=pages_file)
    site = _load_site(config)

    manager = NavigationManager(config.navigation)
    report = run_navigation_checks(site.pages, manager, site.policies)

    for result in report.results:
        mark = click.style("✓", fg="green") if result.success else click.style("✗", fg="red")
        click.echo(f"{mark} {result.message}")

    if not report.overall:
        click.echo(click.style("\nSome checks failed", fg="red", bold=True))
        sys.exit(1)

    click.echo(click.style("\nAll checks passed", fg="green", bold=True))


@cli.command()
@_source_options
def slugs(config_path: Path | None, pages_file: Path | None) -> None:
    """Print a slug status report for all pages."""
    config = _load_config(config_path).with_overrides(pages_file=pages_file)
    site = _load_site(config)
    report = slug_report(site.pages)

    click.echo(f"Total pages: {report.total}")
    click.echo(f"Pages with slugs: {report.with_slugs}")
    click.echo(f"Pages without slugs: {len(report.without_slugs)}")
    click.echo(f"Published pages: {len(report.published)}")
    click.echo(f"Published pages with slugs: {report.published_with_slugs}")

    if report.without_slugs:
        click.echo(click.style("\nPages without slugs:", fg="red"))
        for page in report.without_slugs:
            click.echo(f'  - "{page.name}" ({page.status}) [ID: {page.id}]')

    if report.published:
        click.echo("\nPublished pages:")
        for page in report.published:
            click.echo(f'  - "{page.name}" -> "{page.slug}" ({page.status})')


def _load_config(config_path: Path | None) -> Config:
    """Load configuration or exit with error."""
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        _fail(e)


def _load_site(config: Config) -> SiteData:
    """Load page data from the configured store or exit with error."""
    try:
        return PageStore(config.store.pages_file).load()
    except (FileNotFoundError, ValueError) as e:
        _fail(e)


def _fail(error: Exception) -> NoReturn:
    click.echo(click.style(f"Error: {error}", fg="red"), err=True)
    sys.exit(1)


if __name__ == "__main__":
    cli()
