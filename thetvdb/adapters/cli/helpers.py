"""
Utilitaires partages pour les commandes CLI.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_client : decorateur injectant un client TheTVDB ferme en fin de commande
- print_error : affichage uniforme des erreurs
"""

from contextlib import contextmanager
from functools import wraps
from typing import Optional

import typer
from loguru import logger as loguru_logger
from rich.console import Console

from thetvdb.container import Container
from thetvdb.core.errors import TVDBError

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("thetvdb")
    try:
        yield
    finally:
        loguru_logger.enable("thetvdb")


def print_error(message: object) -> None:
    console.print(f"[red]Erreur:[/red] {message}")


def with_client(func):
    """
    Decorateur qui injecte un client TheTVDB en premier argument.

    Le client est cree depuis la configuration du container et ferme a la
    fin de la commande. Les erreurs de configuration et de l'API sont
    affichees en rouge et terminent la commande avec le code 1.

    Usage:
        @with_client
        async def _my_command_async(client, ...):
            series = await client.series(81189)
    """
    @wraps(func)
    async def wrapper(*args, **kwargs):
        container = Container()
        try:
            client = container.tvdb_client()
        except ValueError as e:
            print_error(e)
            raise typer.Exit(code=1) from e

        try:
            async with client:
                return await func(client, *args, **kwargs)
        except TVDBError as e:
            loguru_logger.debug(f"Erreur API: {e!r}")
            print_error(e)
            raise typer.Exit(code=1) from e
    return wrapper


def apply_language(client, language: Optional[str]) -> None:
    """Change la langue du client si l'option --language est fournie."""
    if language:
        client.set_language_abbr(language)


def or_dash(value: object) -> str:
    """Representation d'une valeur optionnelle dans un tableau."""
    if value is None or value == "":
        return "-"
    return str(value)
