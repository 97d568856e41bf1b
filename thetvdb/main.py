"""
Point d'entree CLI.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import (
    actors,
    episode,
    episodes,
    languages,
    movie,
    search,
    series,
    updated,
)
from .config import Settings
from .container import Container
from .logging_config import configure_logging, console_level

app = typer.Typer(
    name="thetvdb",
    help="Interrogation de l'API TheTVDB v3",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v DEBUG, -vv TRACE)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """thetvdb - Client de l'API TheTVDB v3."""
    if not quiet and not verbose:
        return
    settings = get_config()
    configure_logging(
        log_level=console_level(settings.log_level, verbose, quiet),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


app.command()(search)
app.command()(series)
app.command()(episodes)
app.command()(episode)
app.command()(actors)
app.command()(languages)
app.command()(updated)
app.command()(movie)


def get_config() -> Settings:
    """Recupere les parametres depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration thetvdb")
    typer.echo(f"thetvdb v{__version__}")
    typer.echo(f"API : {config.base_url}")
    typer.echo(f"Cle API : {'configuree' if config.api_enabled else 'absente'}")
    typer.echo(f"Langue : {config.language}")
    typer.echo(f"Timeout : {config.request_timeout} s")
    typer.echo(f"Marge de renouvellement du jeton : {config.token_refresh_margin_seconds} s")
    typer.echo(f"Niveau de log : {config.log_level}")


def main() -> None:
    """Point d'entree de l'application."""
    settings = container.config()
    configure_logging(
        log_level=console_level(settings.log_level),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.debug("Demarrage de thetvdb", version=__version__)

    app()


if __name__ == "__main__":
    main()
