from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

from url_hash.canonical import canonical_url
from url_hash.config import ConfigError, HashingConfig, load_config
from url_hash.errors import InvalidUrlError
from url_hash.hashing import hash_url
from url_hash.observability import configure_logging

if TYPE_CHECKING:
    from url_hash.canonical import CanonicalizationConfig
    from url_hash.hashing import UrlHash, UrlShortHash, UrlVeryShortHash

app = typer.Typer(add_completion=False)


class HashForm(StrEnum):
    FULL = "full"
    SHORT = "short"
    VERY_SHORT = "very-short"


ConfigOption = Annotated[Path | None, typer.Option("-c", "--config", help="TOML file with a [default_ports] table.")]
UrlsArgument = Annotated[list[str], typer.Argument(help="URLs to process.")]


def _load_settings(config_path: Path | None) -> CanonicalizationConfig:
    settings = HashingConfig() if config_path is None else load_config(config_path)
    return settings.to_canonicalization_config()


def _project(value: UrlHash, form: HashForm) -> UrlHash | UrlShortHash | UrlVeryShortHash:
    if form is HashForm.SHORT:
        return value.short()
    if form is HashForm.VERY_SHORT:
        return value.very_short()
    return value


@app.command()
def canonical(urls: UrlsArgument, config: ConfigOption = None) -> None:
    """Print the canonical form of each URL."""
    logger = configure_logging()
    try:
        settings = _load_settings(config)
        for url in urls:
            typer.echo(canonical_url(url, config=settings))
    except ConfigError as exc:
        logger.error("config_invalid", path=str(config), error=str(exc))
        raise typer.Exit(code=1) from exc
    except InvalidUrlError as exc:
        logger.warning("invalid_url", error=str(exc))
        raise typer.Exit(code=1) from exc


@app.command(name="hash")
def hash_command(
    urls: UrlsArgument,
    config: ConfigOption = None,
    form: Annotated[HashForm, typer.Option("--form", help="Which width of hash to print.")] = HashForm.FULL,
    as_hex: Annotated[bool, typer.Option("--hex", help="Print raw digest bytes as hex.")] = False,
) -> None:
    """Print the hash of each URL."""
    logger = configure_logging()
    try:
        settings = _load_settings(config)
        for url in urls:
            value = _project(hash_url(url, config=settings), form)
            logger.debug("url_hashed", url=url, form=form.value)
            typer.echo(value.hex() if as_hex else str(value))
    except ConfigError as exc:
        logger.error("config_invalid", path=str(config), error=str(exc))
        raise typer.Exit(code=1) from exc
    except InvalidUrlError as exc:
        logger.warning("invalid_url", error=str(exc))
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
