"""
Modeles pydantic des reponses de l'API TheTVDB v3 (series, episodes, images).

Les modeles sont immutables et reproduisent le JSON de l'API : les champs
sont en snake_case cote Python et en camelCase cote API (alias generes).
Les champs inconnus sont ignores.

Les encodages particuliers (dates en chaine, 0 pour "absent"...) sont geres
par les types annotes de thetvdb.adapters.api.deserialize.
"""

from enum import Enum
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from thetvdb.adapters.api import urls
from thetvdb.adapters.api.deserialize import (
    IntBool,
    IntString,
    OptionalAirTime,
    OptionalDate,
    OptionalDateTime,
    OptionalFloat,
    OptionalString,
    OptionalTimestamp,
    Timestamp,
)
from thetvdb.core.errors import MissingSeriesSlugError
from thetvdb.core.ids import EpisodeID, LanguageID, SeriesID
from thetvdb.core.params import EpisodeParams, EpisodeQuery, EpisodeQueryParams


class TVDBModel(BaseModel):
    """Base des modeles de reponse (alias camelCase, immutable)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    def to_api_dict(self) -> dict[str, Any]:
        """Serialise le modele dans l'encodage de l'API."""
        return self.model_dump(mode="json", by_alias=True)


class SeriesStatus(str, Enum):
    """Statut de diffusion d'une serie. UNKNOWN si l'API n'en renvoie pas."""

    ENDED = "Ended"
    CONTINUING = "Continuing"
    UPCOMING = "Upcoming"
    UNKNOWN = ""


def _status_or_unknown(value: Any) -> Any:
    return "" if value is None else value


Status = Annotated[SeriesStatus, BeforeValidator(_status_or_unknown)]


class SeriesRefMixin:
    """Construction des parametres d'episodes depuis un objet serie (champ id)."""

    def episode_params(self, page: int = 1) -> EpisodeParams:
        return EpisodeParams(self.id, page)

    def episode_query_params(self, page: int = 1) -> EpisodeQueryParams:
        return EpisodeQueryParams(self.id, page)


class SearchSeries(SeriesRefMixin, TVDBModel):
    """
    Serie renvoyee par /search/series.

    Contient moins d'informations que Series, mais permet de recuperer
    la serie complete via client.series(result).
    """

    aliases: list[str] = Field(default_factory=list)
    banner: OptionalString = None
    first_aired: OptionalDate = None
    id: SeriesID
    network: OptionalString = None
    overview: Optional[str] = None
    series_name: Optional[str] = None
    slug: str = ""
    status: Status = SeriesStatus.UNKNOWN

    def banner_url(self) -> str:
        return urls.optional_image_url(self.banner)

    def website_url(self) -> str:
        return urls.series_website_url(self.slug)


class Series(SeriesRefMixin, TVDBModel):
    """Serie complete renvoyee par /series/{id}."""

    added: OptionalDateTime = None
    added_by: Optional[int] = None
    airs_day_of_week: OptionalString = None
    airs_time: OptionalAirTime = None
    aliases: list[str] = Field(default_factory=list)
    season: str = ""
    banner: OptionalString = None
    poster: OptionalString = None
    fanart: OptionalString = None
    first_aired: OptionalDate = None
    genre: list[str] = Field(default_factory=list)
    id: SeriesID
    imdb_id: Optional[str] = None
    last_updated: OptionalTimestamp = None
    network: Optional[str] = None
    network_id: OptionalString = None
    overview: OptionalString = None
    rating: OptionalString = None
    runtime: str = ""
    language: str = ""
    series_name: OptionalString = None
    site_rating: OptionalFloat = None
    site_rating_count: int = 0
    slug: str = ""
    status: Status = SeriesStatus.UNKNOWN
    zap2it_id: OptionalString = None

    def banner_url(self) -> str:
        return urls.optional_image_url(self.banner)

    def poster_url(self) -> str:
        return urls.optional_image_url(self.poster)

    def fanart_url(self) -> str:
        return urls.optional_image_url(self.fanart)

    def website_url(self) -> str:
        return urls.series_website_url(self.slug)


class FilteredSeries(TVDBModel):
    """
    Serie renvoyee par /series/{id}/filter.

    Memes champs que Series, tous optionnels : seuls les champs demandes
    (et renvoyes par l'API) sont renseignes.
    """

    added: OptionalDateTime = None
    added_by: Optional[int] = None
    airs_day_of_week: OptionalString = None
    airs_time: OptionalAirTime = None
    aliases: Optional[list[str]] = None
    season: Optional[str] = None
    banner: OptionalString = None
    poster: OptionalString = None
    fanart: OptionalString = None
    first_aired: OptionalDate = None
    genre: Optional[list[str]] = None
    id: Optional[SeriesID] = None
    imdb_id: Optional[str] = None
    last_updated: OptionalTimestamp = None
    network: Optional[str] = None
    network_id: OptionalString = None
    overview: OptionalString = None
    rating: OptionalString = None
    runtime: Optional[str] = None
    language: Optional[str] = None
    series_name: Optional[str] = None
    site_rating: OptionalFloat = None
    site_rating_count: Optional[int] = None
    slug: Optional[str] = None
    status: Optional[SeriesStatus] = None
    zap2it_id: OptionalString = None

    def banner_url(self) -> str:
        return urls.optional_image_url(self.banner)

    def poster_url(self) -> str:
        return urls.optional_image_url(self.poster)

    def fanart_url(self) -> str:
        return urls.optional_image_url(self.fanart)

    def website_url(self) -> str:
        if self.slug is None:
            raise MissingSeriesSlugError()
        return urls.series_website_url(self.slug)


class Actor(TVDBModel):
    """Acteur renvoye par /series/{id}/actors."""

    id: int
    series_id: SeriesID
    name: str = ""
    role: str = ""
    sort_order: int = 0
    image: OptionalString = None
    image_author: Optional[int] = None
    image_added: OptionalDateTime = None
    last_updated: OptionalDateTime = None

    def image_url(self) -> str:
        return urls.optional_image_url(self.image)


class EpisodeLanguage(TVDBModel):
    """Langues (abreviations) du nom et du resume d'un episode."""

    episode_name: str = ""
    overview: str = ""


class Episode(TVDBModel):
    """
    Episode renvoye par /episodes/{id} et les pages d'episodes.

    Pour un ID inconnu, /episodes/{id} renvoie un episode vide
    (id different de l'ID demande) : le client le traite comme NotFound.
    """

    id: EpisodeID
    aired_season: Optional[int] = None
    aired_season_id: Optional[int] = Field(default=None, alias="airedSeasonID")
    aired_episode_number: int = 0
    episode_name: OptionalString = None
    first_aired: OptionalDate = None
    guest_stars: list[str] = Field(default_factory=list)
    directors: list[str] = Field(default_factory=list)
    writers: list[str] = Field(default_factory=list)
    overview: OptionalString = None
    language: EpisodeLanguage = Field(default_factory=EpisodeLanguage)
    production_code: OptionalString = None
    show_url: OptionalString = None
    last_updated: OptionalTimestamp = None
    dvd_discid: OptionalString = None
    dvd_season: Optional[int] = None
    dvd_episode_number: Optional[int] = None
    dvd_chapter: Optional[int] = None
    absolute_number: Optional[int] = None
    filename: OptionalString = None
    series_id: SeriesID = SeriesID(0)
    last_updated_by: Optional[int] = None
    airs_after_season: Optional[int] = None
    airs_before_season: Optional[int] = None
    airs_before_episode: Optional[int] = None
    thumb_author: Optional[int] = None
    thumb_added: OptionalDateTime = None
    thumb_width: Optional[str] = None
    thumb_height: Optional[str] = None
    imdb_id: OptionalString = None
    content_rating: Optional[str] = None
    site_rating: OptionalFloat = None
    site_rating_count: int = 0
    is_movie: IntBool = False

    def filename_url(self) -> str:
        return urls.optional_image_url(self.filename)


class PageLinks(TVDBModel):
    """Liens de pagination des reponses paginees."""

    first: int = 1
    last: int = 1
    next: Optional[int] = None
    prev: Optional[int] = None

    @property
    def current_page(self) -> int:
        """Page courante, deduite des pages suivante et precedente."""
        if self.next is not None:
            return self.next - 1
        if self.prev is not None:
            return self.prev + 1
        return self.first


class PaginationMixin:
    """Acces aux numeros de page d'une reponse paginee (champ links)."""

    @property
    def current_page(self) -> int:
        return self.links.current_page

    @property
    def first_page(self) -> int:
        return self.links.first

    @property
    def last_page(self) -> int:
        return self.links.last

    @property
    def next_page(self) -> Optional[int]:
        return self.links.next

    @property
    def prev_page(self) -> Optional[int]:
        return self.links.prev


class EpisodePage(PaginationMixin, TVDBModel):
    """
    Page d'episodes renvoyee par /series/{id}/episodes.

    L'API ne renvoie pas l'ID de la serie : le client l'injecte dans
    series_id pour generer les parametres des pages voisines.
    """

    episodes: list[Episode] = Field(default_factory=list, alias="data")
    links: PageLinks = Field(default_factory=PageLinks)
    series_id: SeriesID = Field(default=SeriesID(0), exclude=True)

    def next_page_params(self) -> Optional[EpisodeParams]:
        """Parametres de la page suivante, None sur la derniere page."""
        if self.next_page is None:
            return None
        return EpisodeParams(self.series_id, self.next_page)

    def prev_page_params(self) -> Optional[EpisodeParams]:
        """Parametres de la page precedente, None sur la premiere page."""
        if self.prev_page is None:
            return None
        return EpisodeParams(self.series_id, self.prev_page)

    def first_page_params(self) -> EpisodeParams:
        return EpisodeParams(self.series_id, self.first_page)

    def last_page_params(self) -> EpisodeParams:
        return EpisodeParams(self.series_id, self.last_page)


class EpisodeQueryPage(PaginationMixin, TVDBModel):
    """
    Page d'episodes renvoyee par /series/{id}/episodes/query.

    Fonctionne comme EpisodePage ; les parametres generes reprennent
    la requete (query) d'origine.
    """

    episodes: list[Episode] = Field(default_factory=list, alias="data")
    links: PageLinks = Field(default_factory=PageLinks)
    series_id: SeriesID = Field(default=SeriesID(0), exclude=True)
    query: EpisodeQuery = Field(default_factory=EpisodeQuery, exclude=True)

    def _params(self, page: int) -> EpisodeQueryParams:
        return EpisodeQueryParams(self.series_id, page, self.query)

    def next_page_query_params(self) -> Optional[EpisodeQueryParams]:
        if self.next_page is None:
            return None
        return self._params(self.next_page)

    def prev_page_query_params(self) -> Optional[EpisodeQueryParams]:
        if self.prev_page is None:
            return None
        return self._params(self.prev_page)

    def first_page_query_params(self) -> EpisodeQueryParams:
        return self._params(self.first_page)

    def last_page_query_params(self) -> EpisodeQueryParams:
        return self._params(self.last_page)


class EpisodeSummary(TVDBModel):
    """Resume des episodes d'une serie (/series/{id}/episodes/summary)."""

    aired_seasons: list[str] = Field(default_factory=list)
    aired_episodes: IntString = 0
    dvd_seasons: list[str] = Field(default_factory=list)
    dvd_episodes: IntString = 0


class SeriesImages(TVDBModel):
    """Nombre d'images par type (/series/{id}/images)."""

    fanart: Optional[int] = None
    poster: Optional[int] = None
    season: Optional[int] = None
    seasonwide: Optional[int] = None
    series: Optional[int] = None


class ImageRatingsInfo(TVDBModel):
    average: float = 0.0
    count: int = 0


class Image(TVDBModel):
    """Image renvoyee par /series/{id}/images/query."""

    id: int
    key_type: str = ""
    sub_key: OptionalString = None
    file_name: str = ""
    language_id: int = 0
    language: str = ""
    resolution: OptionalString = None
    ratings_info: ImageRatingsInfo = Field(default_factory=ImageRatingsInfo)
    thumbnail: str = ""

    def file_name_url(self) -> str:
        return urls.image_url(self.file_name)

    def thumbnail_url(self) -> str:
        return urls.image_url(self.thumbnail)


class ImageQueryKey(TVDBModel):
    """
    Type d'image interrogeable pour une serie (/series/{id}/images/query/params).

    Indique les resolutions et sous-cles disponibles pour ce type.
    """

    key_type: str
    language_id: OptionalString = None
    resolution: list[str] = Field(default_factory=list)
    sub_key: list[str] = Field(default_factory=list)


class SeriesUpdate(SeriesRefMixin, TVDBModel):
    """Serie mise a jour sur une periode (/updated/query)."""

    id: SeriesID
    last_updated: Timestamp


class Language(TVDBModel):
    """
    Langue disponible sur l'API (/languages).

    Peut etre passee a client.set_language().
    """

    id: LanguageID
    abbreviation: str
    name: str
    english_name: str

    @property
    def abbr(self) -> str:
        return self.abbreviation
