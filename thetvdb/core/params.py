"""
Parametres des requetes envoyees a l'API TheTVDB.

Tous les parametres sont des objets valeur immutables (@dataclass(frozen=True)).
Les methodes de construction retournent une nouvelle instance, ce qui permet
de les chainer :

    params = EpisodeQueryParams.for_series(318408).aired_season(1).aired_episode(1)

Chaque objet expose query_params() qui produit le dictionnaire passe a httpx.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Union

from thetvdb.core.ids import IdLike, SeriesID, series_id_of

QueryValue = Union[str, int]


class SearchField(str, Enum):
    """Champ de recherche accepte par /search/series."""

    NAME = "name"
    IMDB_ID = "imdbId"
    ZAP2IT_ID = "zap2itId"
    SLUG = "slug"


@dataclass(frozen=True)
class SearchBy:
    """
    Critere de recherche de series.

    L'API accepte un seul critere par requete : nom (partiel), ID IMDb,
    ID Zap2it ou slug.

    Example:
        SearchBy.name("Planet Earth")
        SearchBy.imdb_id("tt5491994")
    """

    kind: SearchField
    value: str

    @classmethod
    def name(cls, value: str) -> "SearchBy":
        """Recherche par nom (partiel)."""
        return cls(SearchField.NAME, value)

    @classmethod
    def imdb_id(cls, value: str) -> "SearchBy":
        """Recherche par ID IMDb."""
        return cls(SearchField.IMDB_ID, value)

    @classmethod
    def zap2it_id(cls, value: str) -> "SearchBy":
        """Recherche par ID Zap2it."""
        return cls(SearchField.ZAP2IT_ID, value)

    @classmethod
    def slug(cls, value: str) -> "SearchBy":
        """Recherche par slug."""
        return cls(SearchField.SLUG, value)

    def query_params(self) -> dict[str, QueryValue]:
        return {self.kind.value: self.value}


def _check_page(page: int) -> None:
    if page < 1:
        raise ValueError(f"Le numero de page doit etre >= 1 (recu: {page})")


@dataclass(frozen=True)
class EpisodeParams:
    """
    Parametres de /series/{id}/episodes.

    Une page contient au plus 100 episodes.

    Attributes:
        series_id: ID de la serie
        page: Numero de page (commence a 1)
    """

    series_id: SeriesID
    page: int = 1

    def __post_init__(self) -> None:
        _check_page(self.page)

    @classmethod
    def for_series(cls, series: IdLike, page: int = 1) -> "EpisodeParams":
        """Cree les parametres depuis un ID ou un objet serie."""
        return cls(series_id_of(series), page)

    def with_page(self, page: int) -> "EpisodeParams":
        """Retourne une copie pointant sur une autre page."""
        return replace(self, page=page)

    def query_params(self) -> dict[str, QueryValue]:
        return {"page": self.page}


@dataclass(frozen=True)
class EpisodeQuery:
    """Filtres de /series/{id}/episodes/query. Les valeurs None sont omises."""

    absolute_number: Optional[int] = None
    aired_season: Optional[int] = None
    aired_episode: Optional[int] = None
    dvd_season: Optional[int] = None
    dvd_episode: Optional[int] = None
    imdb_id: Optional[str] = None

    def query_params(self) -> dict[str, QueryValue]:
        values = {
            "absoluteNumber": self.absolute_number,
            "airedSeason": self.aired_season,
            "airedEpisode": self.aired_episode,
            "dvdSeason": self.dvd_season,
            "dvdEpisode": self.dvd_episode,
            "imdbId": self.imdb_id,
        }
        return {key: value for key, value in values.items() if value is not None}


@dataclass(frozen=True)
class EpisodeQueryParams:
    """
    Parametres de /series/{id}/episodes/query.

    Combine la pagination (series_id, page) et les filtres (query).

    Example:
        EpisodeQueryParams.for_series(318408).aired_season(1).aired_episode(1)
    """

    series_id: SeriesID
    page: int = 1
    query: EpisodeQuery = field(default_factory=EpisodeQuery)

    def __post_init__(self) -> None:
        _check_page(self.page)

    @classmethod
    def for_series(cls, series: IdLike, page: int = 1) -> "EpisodeQueryParams":
        """Cree les parametres depuis un ID ou un objet serie."""
        return cls(series_id_of(series), page)

    def with_page(self, page: int) -> "EpisodeQueryParams":
        return replace(self, page=page)

    def absolute_number(self, number: int) -> "EpisodeQueryParams":
        return replace(self, query=replace(self.query, absolute_number=number))

    def aired_season(self, season: int) -> "EpisodeQueryParams":
        return replace(self, query=replace(self.query, aired_season=season))

    def aired_episode(self, episode: int) -> "EpisodeQueryParams":
        return replace(self, query=replace(self.query, aired_episode=episode))

    def dvd_season(self, season: int) -> "EpisodeQueryParams":
        return replace(self, query=replace(self.query, dvd_season=season))

    def dvd_episode(self, episode: int) -> "EpisodeQueryParams":
        return replace(self, query=replace(self.query, dvd_episode=episode))

    def imdb_id(self, imdb_id: str) -> "EpisodeQueryParams":
        return replace(self, query=replace(self.query, imdb_id=imdb_id))

    def query_params(self) -> dict[str, QueryValue]:
        return {"page": self.page, **self.query.query_params()}


# Champs acceptes par /series/{id}/filter (nom Python -> nom API).
# lastUpdated est volontairement absent : l'API v3 ne le renvoie pas sur filter.
SERIES_FILTER_FIELDS: dict[str, str] = {
    "network_id": "networkId",
    "airs_time": "airsTime",
    "site_rating": "siteRating",
    "series_name": "seriesName",
    "first_aired": "firstAired",
    "runtime": "runtime",
    "overview": "overview",
    "banner": "banner",
    "genre": "genre",
    "airs_day_of_week": "airsDayOfWeek",
    "imdb_id": "imdbId",
    "added_by": "addedBy",
    "site_rating_count": "siteRatingCount",
    "id": "id",
    "status": "status",
    "network": "network",
    "rating": "rating",
    "zap2it_id": "zap2itId",
    "added": "added",
    "slug": "slug",
    "aliases": "aliases",
    "season": "season",
    "poster": "poster",
    "fanart": "fanart",
    "language": "language",
}


@dataclass(frozen=True)
class SeriesFilterKeys:
    """
    Liste des champs a recuperer avec /series/{id}/filter.

    Les termes "cle" et "champ" sont interchangeables ici. L'ordre d'ajout
    est conserve et les doublons sont ignores.

    Example:
        keys = SeriesFilterKeys().add("series_name", "network")
        keys.keys_query  # "seriesName,network"
    """

    keys: tuple[str, ...] = ()

    @classmethod
    def all(cls) -> "SeriesFilterKeys":
        """Retourne la liste de tous les champs filtrables."""
        return cls(tuple(SERIES_FILTER_FIELDS.values()))

    def add(self, *fields: str) -> "SeriesFilterKeys":
        """
        Ajoute des champs (noms Python en snake_case).

        Raises:
            ValueError: Si un champ n'est pas filtrable
        """
        keys = list(self.keys)
        for name in fields:
            try:
                api_key = SERIES_FILTER_FIELDS[name]
            except KeyError:
                raise ValueError(f"Champ de serie non filtrable: {name!r}") from None
            if api_key not in keys:
                keys.append(api_key)
        return replace(self, keys=tuple(keys))

    @property
    def is_empty(self) -> bool:
        return not self.keys

    @property
    def keys_query(self) -> str:
        return ",".join(self.keys)

    def query_params(self) -> dict[str, QueryValue]:
        return {"keys": self.keys_query}


@dataclass(frozen=True)
class ImageQueryParams:
    """
    Parametres de /series/{id}/images/query.

    Les types, resolutions et sous-cles disponibles pour une serie sont
    donnes par /series/{id}/images/query/params.
    """

    key_type: Optional[str] = None
    resolution: Optional[str] = None
    sub_key: Optional[str] = None

    def query_params(self) -> dict[str, QueryValue]:
        values = {
            "keyType": self.key_type,
            "resolution": self.resolution,
            "subKey": self.sub_key,
        }
        return {key: value for key, value in values.items() if value is not None}


def to_timestamp(moment: datetime) -> int:
    """Convertit une date en secondes Unix (les dates naives sont en UTC)."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return int(moment.timestamp())


@dataclass(frozen=True)
class UpdatedParams:
    """
    Parametres de /updated/query.

    Si to_time est absent ou a plus d'une semaine de from_time,
    l'API limite la periode a une semaine.
    """

    from_time: datetime
    to_time: Optional[datetime] = None

    def with_to_time(self, to_time: datetime) -> "UpdatedParams":
        return replace(self, to_time=to_time)

    def query_params(self) -> dict[str, QueryValue]:
        params: dict[str, QueryValue] = {"fromTime": to_timestamp(self.from_time)}
        if self.to_time is not None:
            params["toTime"] = to_timestamp(self.to_time)
        return params
