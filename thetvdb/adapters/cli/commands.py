"""
Commandes CLI d'interrogation de l'API TheTVDB.

Chaque commande est une fonction synchrone (Typer) qui delegue a une
implementation async decoree par with_client.
"""

import asyncio
from datetime import datetime, timedelta, timezone
from typing import Annotated, Optional

import typer
from rich.table import Table

from thetvdb.adapters.api.models import Episode
from thetvdb.adapters.cli.helpers import (
    apply_language,
    console,
    or_dash,
    suppress_loguru,
    with_client,
)
from thetvdb.core.params import EpisodeQueryParams, SearchBy, SearchField, UpdatedParams

LanguageOption = Annotated[
    Optional[str],
    typer.Option("--language", "-l", help="Langue des resultats (ex: fr, en)"),
]


def search(
    query: Annotated[str, typer.Argument(help="Nom, ID IMDb, ID Zap2it ou slug")],
    by: Annotated[
        SearchField,
        typer.Option("--by", "-b", help="Champ de recherche"),
    ] = SearchField.NAME,
    language: LanguageOption = None,
) -> None:
    """Recherche des series."""
    asyncio.run(_search_async(query, by, language))


@with_client
async def _search_async(client, query: str, by: SearchField, language: Optional[str]) -> None:
    apply_language(client, language)
    with suppress_loguru():
        results = await client.search(SearchBy(by, query))

        table = Table(title=f"Resultats pour '{query}'")
        table.add_column("ID", justify="right", style="cyan")
        table.add_column("Nom")
        table.add_column("Premiere diffusion")
        table.add_column("Reseau")
        table.add_column("Statut")
        for result in results:
            table.add_row(
                str(result.id),
                or_dash(result.series_name),
                or_dash(result.first_aired),
                or_dash(result.network),
                or_dash(result.status.value),
            )
        console.print(table)


def series(
    series_id: Annotated[int, typer.Argument(help="ID de la serie")],
    language: LanguageOption = None,
) -> None:
    """Affiche le detail d'une serie."""
    asyncio.run(_series_async(series_id, language))


@with_client
async def _series_async(client, series_id: int, language: Optional[str]) -> None:
    apply_language(client, language)
    with suppress_loguru():
        result = await client.series(series_id)

        console.print(f"[bold]{or_dash(result.series_name)}[/bold] [dim]({result.id})[/dim]")
        console.print(f"  Statut : {or_dash(result.status.value)}")
        console.print(f"  Reseau : {or_dash(result.network)}")
        console.print(f"  Premiere diffusion : {or_dash(result.first_aired)}")
        if result.airs_day_of_week or result.airs_time:
            airs_time = result.airs_time.strftime("%H:%M") if result.airs_time else ""
            console.print(f"  Diffusion : {or_dash(result.airs_day_of_week)} {airs_time}".rstrip())
        console.print(f"  Genres : {', '.join(result.genre) or '-'}")
        if result.site_rating is not None:
            console.print(f"  Note : {result.site_rating} ({result.site_rating_count} votes)")
        if result.slug:
            console.print(f"  Page : {result.website_url()}")
        if result.overview:
            console.print(f"\n{result.overview}")


def episodes(
    series_id: Annotated[int, typer.Argument(help="ID de la serie")],
    season: Annotated[
        Optional[int],
        typer.Option("--season", "-s", help="Limiter a une saison (ordre de diffusion)"),
    ] = None,
    language: LanguageOption = None,
) -> None:
    """Liste les episodes d'une serie."""
    asyncio.run(_episodes_async(series_id, season, language))


@with_client
async def _episodes_async(
    client, series_id: int, season: Optional[int], language: Optional[str]
) -> None:
    apply_language(client, language)
    with suppress_loguru():
        if season is None:
            found = await client.all_series_episodes(series_id)
        else:
            found = await _season_episodes(client, series_id, season)

        table = Table(title=f"Episodes de la serie {series_id}")
        table.add_column("S", justify="right")
        table.add_column("E", justify="right")
        table.add_column("ID", justify="right", style="cyan")
        table.add_column("Titre")
        table.add_column("Diffusion")
        for episode in found:
            table.add_row(
                or_dash(episode.aired_season),
                str(episode.aired_episode_number),
                str(episode.id),
                or_dash(episode.episode_name),
                or_dash(episode.first_aired),
            )
        console.print(table)
        console.print(f"[dim]{len(found)} episode(s)[/dim]")


async def _season_episodes(client, series_id: int, season: int) -> list[Episode]:
    """Parcourt toutes les pages de la requete filtree sur une saison."""
    found: list[Episode] = []
    params: Optional[EpisodeQueryParams] = EpisodeQueryParams.for_series(series_id).aired_season(
        season
    )
    while params is not None:
        page = await client.series_episodes_query(params)
        found.extend(page.episodes)
        params = page.next_page_query_params()
    return found


def episode(
    episode_id: Annotated[int, typer.Argument(help="ID de l'episode")],
    language: LanguageOption = None,
) -> None:
    """Affiche le detail d'un episode."""
    asyncio.run(_episode_async(episode_id, language))


@with_client
async def _episode_async(client, episode_id: int, language: Optional[str]) -> None:
    apply_language(client, language)
    with suppress_loguru():
        result = await client.episode(episode_id)

        console.print(f"[bold]{or_dash(result.episode_name)}[/bold] [dim]({result.id})[/dim]")
        console.print(
            f"  Serie {result.series_id}, saison {or_dash(result.aired_season)}, "
            f"episode {result.aired_episode_number}"
        )
        console.print(f"  Diffusion : {or_dash(result.first_aired)}")
        if result.directors:
            console.print(f"  Realisation : {', '.join(result.directors)}")
        if result.writers:
            console.print(f"  Scenario : {', '.join(result.writers)}")
        if result.overview:
            console.print(f"\n{result.overview}")


def actors(
    series_id: Annotated[int, typer.Argument(help="ID de la serie")],
) -> None:
    """Liste les acteurs d'une serie."""
    asyncio.run(_actors_async(series_id))


@with_client
async def _actors_async(client, series_id: int) -> None:
    with suppress_loguru():
        found = await client.series_actors(series_id)

        table = Table(title=f"Acteurs de la serie {series_id}")
        table.add_column("Nom")
        table.add_column("Role")
        for actor in sorted(found, key=lambda a: a.sort_order):
            table.add_row(actor.name, or_dash(actor.role))
        console.print(table)


def languages() -> None:
    """Liste les langues disponibles."""
    asyncio.run(_languages_async())


@with_client
async def _languages_async(client) -> None:
    with suppress_loguru():
        found = await client.languages()

        table = Table(title="Langues")
        table.add_column("ID", justify="right", style="cyan")
        table.add_column("Abr.")
        table.add_column("Nom")
        table.add_column("Nom anglais")
        for language in found:
            table.add_row(str(language.id), language.abbr, language.name, language.english_name)
        console.print(table)


def updated(
    hours: Annotated[
        int,
        typer.Option("--hours", "-H", min=1, max=24 * 7, help="Periode en heures (max 1 semaine)"),
    ] = 24,
) -> None:
    """Liste les series modifiees recemment."""
    asyncio.run(_updated_async(hours))


@with_client
async def _updated_async(client, hours: int) -> None:
    since = datetime.now(timezone.utc) - timedelta(hours=hours)
    with suppress_loguru():
        found = await client.updated(UpdatedParams(since))

        if not found:
            console.print("[yellow]Aucune serie modifiee sur la periode.[/yellow]")
            return
        for update in found:
            console.print(f"{update.id}  [dim]{update.last_updated:%Y-%m-%d %H:%M:%S}[/dim]")
        console.print(f"[dim]{len(found)} serie(s) modifiee(s)[/dim]")


def movie(
    movie_id: Annotated[int, typer.Argument(help="ID du film")],
    language: LanguageOption = None,
) -> None:
    """Affiche le detail d'un film."""
    asyncio.run(_movie_async(movie_id, language))


@with_client
async def _movie_async(client, movie_id: int, language: Optional[str]) -> None:
    apply_language(client, language)
    with suppress_loguru():
        result = await client.movie(movie_id)

        translation = (
            result.translation_for_abbr(client.language_abbr) or result.primary_translation
        )
        title = translation.name if translation else result.url
        console.print(f"[bold]{title}[/bold] [dim]({result.id})[/dim]")
        console.print(f"  Duree : {result.runtime} min")
        if result.genres:
            console.print(f"  Genres : {', '.join(genre.name for genre in result.genres)}")
        if result.people.directors:
            names = ", ".join(person.name for person in result.people.directors)
            console.print(f"  Realisation : {names}")
        if translation and translation.overview:
            console.print(f"\n{translation.overview}")
