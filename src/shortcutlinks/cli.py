"""CLI entry point for shortcutlinks."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from shortcutlinks import __version__

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="shortcutlinks")
def main() -> None:
    """Shortcutlinks: expand @name:tag shortcut links in markdown pages."""
    pass


def _config_option(func):  # type: ignore[no-untyped-def]
    return click.option(
        "-c",
        "--config",
        "config_path",
        default=None,
        help="Path to config file (default: ./shortcutlinks.yaml)",
    )(func)


def _verbose_option(func):  # type: ignore[no-untyped-def]
    return click.option(
        "-v",
        "--verbose",
        is_flag=True,
        help="Enable verbose (DEBUG) logging",
    )(func)


@main.command()
@click.argument("sources", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-o",
    "--out-dir",
    required=True,
    type=click.Path(file_okay=False),
    help="Directory for the rendered HTML files",
)
@_config_option
@_verbose_option
def build(sources: tuple[str, ...], out_dir: str, config_path: str | None, verbose: bool) -> None:
    """Compile markdown files to HTML, expanding shortcut links."""
    from shortcutlinks.core.errors import ShortcutResolutionError

    container = _load_container(config_path, verbose)
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)

    failed = 0
    for source in sources:
        path = Path(source)
        text = _read_page(path)
        if text is None:
            failed += 1
            continue
        try:
            html = container.compiler.compile(text)
        except ShortcutResolutionError as e:
            failed += 1
            _report(path, e.messages)
            continue
        target = out / f"{path.stem}.html"
        target.write_text(html, encoding="utf-8")
        logger.info("Compiled %s -> %s", path, target)

    if failed:
        click.echo(f"{failed} of {len(sources)} file(s) failed to compile.", err=True)
        sys.exit(1)
    click.echo(f"Compiled {len(sources)} file(s) into {out}.")


@main.command()
@click.argument("sources", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@_config_option
@_verbose_option
def check(sources: tuple[str, ...], config_path: str | None, verbose: bool) -> None:
    """Report every broken shortcut link without writing output."""
    from shortcutlinks.transform import apply_shortcuts

    container = _load_container(config_path, verbose)

    issues = 0
    unreadable = 0
    for source in sources:
        path = Path(source)
        text = _read_page(path)
        if text is None:
            unreadable += 1
            continue
        document = container.compiler.parse(text)
        outcome = apply_shortcuts(container.registry, document)
        if not outcome.ok:
            issues += len(outcome.issues)
            _report(path, outcome.errors)

    if unreadable:
        click.echo(f"{unreadable} file(s) could not be read.", err=True)
    if issues:
        click.echo(f"{issues} broken shortcut link(s) found.", err=True)
    if issues or unreadable:
        sys.exit(1)
    click.echo("All shortcut links resolve.")


@main.command(name="list")
@_config_option
def list_shortcuts(config_path: str | None) -> None:
    """Show the active shortcut names in lookup order."""
    container = _load_container(config_path, verbose=False)

    click.echo("Shortcuts")
    click.echo("=" * 40)
    for names in container.registry.names:
        click.echo(f"  {', '.join(names)}")


def _load_container(config_path: str | None, verbose: bool):  # type: ignore[no-untyped-def]
    from shortcutlinks.config import load_config
    from shortcutlinks.container import Container

    try:
        config = load_config(config_path)
        container = Container.create_default(config)
    except Exception as e:
        click.echo(f"Error loading config: {e}", err=True)
        sys.exit(1)

    _setup_logging("DEBUG" if verbose else config.log_level)
    return container


def _read_page(path: Path) -> str | None:
    """Read a markdown page, reporting it instead of raising when unreadable."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Cannot read %s: %s", path, e)
        _report(path, [f"cannot read file: {e}"])
        return None


def _report(path: Path, messages: list[str]) -> None:
    click.echo(f"{path}:", err=True)
    for message in messages:
        click.echo(f"  - {message}", err=True)


def _setup_logging(level: str) -> None:
    """Configure logging for command runs."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )
