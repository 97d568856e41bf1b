"""
Client asynchrone de l'API TheTVDB v3.

Gere l'authentification JWT (login automatique et renouvellement avant
expiration), la langue des reponses et la conversion des reponses JSON
en modeles types.

Reference API: https://api.thetvdb.com/swagger
"""

from datetime import datetime, timedelta, timezone
from email.utils import parsedate_to_datetime
from functools import lru_cache
from typing import TYPE_CHECKING, Any, AsyncIterator, Optional

import httpx
from loguru import logger
from pydantic import TypeAdapter, ValidationError

from thetvdb.adapters.api.models import (
    Actor,
    Episode,
    EpisodePage,
    EpisodeQueryPage,
    EpisodeSummary,
    FilteredSeries,
    Image,
    ImageQueryKey,
    Language,
    SearchSeries,
    Series,
    SeriesImages,
    SeriesUpdate,
)
from thetvdb.adapters.api.movie_models import Movie, MovieUpdates
from thetvdb.adapters.api.token import (
    DEFAULT_REFRESH_MARGIN,
    Clock,
    TokenManager,
    utc_now,
)
from thetvdb.core.errors import (
    HTTPError,
    InvalidAPIKeyError,
    InvalidDateFormatError,
    InvalidHTTPHeaderError,
    JSONError,
    MissingLastModifiedError,
    MissingSeriesFilterKeysError,
    NotFoundError,
    ServerError,
)
from thetvdb.core.ids import (
    IdLike,
    episode_id_of,
    language_id_of,
    movie_id_of,
    series_id_of,
)
from thetvdb.core.params import (
    EpisodeParams,
    EpisodeQueryParams,
    ImageQueryParams,
    SearchBy,
    SeriesFilterKeys,
    UpdatedParams,
    to_timestamp,
)

if TYPE_CHECKING:
    from thetvdb.config import Settings


DEFAULT_LANGUAGE = "en"
DEFAULT_TIMEOUT = 30.0


@lru_cache(maxsize=None)
def _adapter(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_)


class TVDBClient:
    """
    Client de l'API TheTVDB v3.

    Le jeton JWT est obtenu a la premiere requete (ou par create()) et
    renouvele automatiquement avant son expiration. Les endpoints dependant
    de la langue envoient le header Accept-Language (anglais par defaut).

    Attributes:
        BASE_URL: URL de base de l'API v3

    Example:
        async with await TVDBClient.create("API_KEY") as client:
            results = await client.search(SearchBy.name("Planet Earth"))
            series = await client.series(results[0])
    """

    BASE_URL = "https://api.thetvdb.com"

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = BASE_URL,
        language: str = DEFAULT_LANGUAGE,
        token_refresh_margin: timedelta = DEFAULT_REFRESH_MARGIN,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
        clock: Clock = utc_now,
    ) -> None:
        """
        Initialise le client sans se connecter.

        Args:
            api_key: Cle API TheTVDB
            base_url: URL de base de l'API (surchargee dans les tests)
            language: Abreviation de la langue des reponses
            token_refresh_margin: Marge de renouvellement du jeton
            timeout: Timeout des requetes en secondes
            http_client: Client httpx externe (non ferme par close())
            clock: Horloge UTC utilisee pour l'expiration du jeton
        """
        self._api_key = api_key
        self._base_url = base_url
        self._language = language
        self._timeout = timeout
        self._client = http_client
        self._owns_client = http_client is None
        self._tokens = TokenManager(self._fetch_token, token_refresh_margin, clock)

    @classmethod
    async def create(cls, api_key: str, **kwargs: Any) -> "TVDBClient":
        """
        Cree un client et effectue le login immediatement.

        Raises:
            InvalidAPIKeyError: Si la cle API est refusee
        """
        client = cls(api_key, **kwargs)
        try:
            await client.login()
        except Exception:
            await client.close()
            raise
        return client

    @classmethod
    def from_settings(cls, settings: "Settings") -> "TVDBClient":
        """
        Cree un client depuis la configuration.

        Raises:
            ValueError: Si THETVDB_API_KEY n'est pas configuree
        """
        if not settings.api_key:
            raise ValueError("Cle API TheTVDB non configuree (THETVDB_API_KEY)")
        return cls(
            settings.api_key,
            base_url=settings.base_url,
            language=settings.language,
            token_refresh_margin=timedelta(seconds=settings.token_refresh_margin_seconds),
            timeout=settings.request_timeout,
        )

    async def __aenter__(self) -> "TVDBClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Ferme le client HTTP s'il a ete cree par ce client."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    @property
    def language_abbr(self) -> str:
        """Abreviation de la langue envoyee dans Accept-Language."""
        return self._language

    def set_language(self, language: Language) -> None:
        """Change la langue des reponses a partir d'un objet Language."""
        self._language = language.abbreviation

    def set_language_abbr(self, abbr: str) -> None:
        """Change la langue des reponses a partir de son abreviation ("fr")."""
        self._language = abbr

    async def login(self) -> None:
        """
        Force un login, meme si le jeton courant est encore valide.

        Raises:
            InvalidAPIKeyError: Si la cle API est refusee
        """
        await self._tokens.refresh()

    # ---- Series ----

    async def search(self, by: SearchBy) -> list[SearchSeries]:
        """
        Recherche des series (GET /search/series).

        Args:
            by: Critere de recherche (nom, ID IMDb, ID Zap2it ou slug)

        Raises:
            NotFoundError: Si aucune serie ne correspond
        """
        response = await self._request(
            "GET", "/search/series", lang=True, params=by.query_params()
        )
        return self._data(response, list[SearchSeries])

    async def series(self, series: IdLike) -> Series:
        """
        Recupere une serie (GET /series/{id}).

        Args:
            series: ID de la serie, ou tout objet serie (SearchSeries, SeriesUpdate...)

        Raises:
            NotFoundError: Si la serie n'existe pas
        """
        series_id = series_id_of(series)
        response = await self._request("GET", f"/series/{series_id}", lang=True)
        return self._data(response, Series)

    async def series_last_modified(self, series: IdLike) -> datetime:
        """
        Date de derniere modification d'une serie (HEAD /series/{id}).

        Returns:
            Date du header Last-Modified, en UTC

        Raises:
            MissingLastModifiedError: Si le header est absent
            InvalidHTTPHeaderError: Si le header n'est pas du texte ASCII
            InvalidDateFormatError: Si la date n'est pas au format RFC 2822
        """
        series_id = series_id_of(series)
        response = await self._request("HEAD", f"/series/{series_id}")
        return _parse_last_modified(response.headers)

    async def series_actors(self, series: IdLike) -> list[Actor]:
        series_id = series_id_of(series)
        response = await self._request("GET", f"/series/{series_id}/actors")
        return self._data(response, list[Actor])

    async def series_episodes(self, params: EpisodeParams) -> EpisodePage:
        """
        Recupere une page d'episodes (GET /series/{id}/episodes).

        La page renvoyee connait l'ID de la serie et peut donc generer les
        parametres des pages voisines (next_page_params()...).
        """
        response = await self._request(
            "GET",
            f"/series/{params.series_id}/episodes",
            params=params.query_params(),
        )
        page = self._validate(EpisodePage, self._json(response))
        return page.model_copy(update={"series_id": params.series_id})

    async def series_episodes_query(self, params: EpisodeQueryParams) -> EpisodeQueryPage:
        """
        Recupere une page d'episodes filtres (GET /series/{id}/episodes/query).

        La page renvoyee conserve la requete pour generer les pages voisines.
        """
        response = await self._request(
            "GET",
            f"/series/{params.series_id}/episodes/query",
            lang=True,
            params=params.query_params(),
        )
        page = self._validate(EpisodeQueryPage, self._json(response))
        return page.model_copy(update={"series_id": params.series_id, "query": params.query})

    async def series_episodes_summary(self, series: IdLike) -> EpisodeSummary:
        series_id = series_id_of(series)
        response = await self._request("GET", f"/series/{series_id}/episodes/summary")
        return self._data(response, EpisodeSummary)

    async def series_filter(self, series: IdLike, keys: SeriesFilterKeys) -> FilteredSeries:
        """
        Recupere uniquement certains champs d'une serie (GET /series/{id}/filter).

        Raises:
            MissingSeriesFilterKeysError: Si keys est vide (aucune requete envoyee)
        """
        if keys.is_empty:
            raise MissingSeriesFilterKeysError()
        series_id = series_id_of(series)
        response = await self._request(
            "GET", f"/series/{series_id}/filter", lang=True, params=keys.query_params()
        )
        return self._data(response, FilteredSeries)

    async def series_images(self, series: IdLike) -> SeriesImages:
        series_id = series_id_of(series)
        response = await self._request("GET", f"/series/{series_id}/images", lang=True)
        return self._data(response, SeriesImages)

    async def series_images_query(
        self, series: IdLike, params: Optional[ImageQueryParams] = None
    ) -> list[Image]:
        """Recherche les images d'une serie (GET /series/{id}/images/query)."""
        series_id = series_id_of(series)
        query = (params or ImageQueryParams()).query_params()
        response = await self._request(
            "GET", f"/series/{series_id}/images/query", lang=True, params=query
        )
        return self._data(response, list[Image])

    async def series_images_query_params(self, series: IdLike) -> list[ImageQueryKey]:
        """Types d'images interrogeables (GET /series/{id}/images/query/params)."""
        series_id = series_id_of(series)
        response = await self._request(
            "GET", f"/series/{series_id}/images/query/params", lang=True
        )
        return self._data(response, list[ImageQueryKey])

    async def iter_series_episodes(self, series: IdLike) -> AsyncIterator[Episode]:
        """Parcourt tous les episodes d'une serie, page apres page."""
        params: Optional[EpisodeParams] = EpisodeParams.for_series(series)
        while params is not None:
            page = await self.series_episodes(params)
            for episode in page.episodes:
                yield episode
            params = page.next_page_params()

    async def all_series_episodes(self, series: IdLike) -> list[Episode]:
        return [episode async for episode in self.iter_series_episodes(series)]

    # ---- Episodes, langues, mises a jour ----

    async def episode(self, episode: IdLike) -> Episode:
        """
        Recupere un episode (GET /episodes/{id}).

        Raises:
            NotFoundError: Si l'episode n'existe pas. Pour un ID inconnu l'API
                renvoie un episode vide avec un autre ID.
        """
        episode_id = episode_id_of(episode)
        response = await self._request("GET", f"/episodes/{episode_id}", lang=True)
        result = self._data(response, Episode)
        if result.id != episode_id:
            logger.debug(f"Episode {episode_id} inconnu (API a renvoye l'ID {result.id})")
            raise NotFoundError(f"episode {episode_id}")
        return result

    async def languages(self) -> list[Language]:
        response = await self._request("GET", "/languages")
        return self._data(response, list[Language])

    async def language(self, language: IdLike) -> Language:
        language_id = language_id_of(language)
        response = await self._request("GET", f"/languages/{language_id}")
        return self._data(response, Language)

    async def updated(self, params: UpdatedParams) -> list[SeriesUpdate]:
        """
        Series modifiees sur une periode (GET /updated/query).

        Returns:
            Liste des series modifiees, vide si l'API renvoie data: null
        """
        response = await self._request(
            "GET", "/updated/query", lang=True, params=params.query_params()
        )
        return self._data(response, Optional[list[SeriesUpdate]]) or []

    # ---- Films ----

    async def movie(self, movie: IdLike) -> Movie:
        """
        Recupere un film (GET /movies/{id}).

        Raises:
            NotFoundError: Si le film n'existe pas
        """
        movie_id = movie_id_of(movie)
        response = await self._request("GET", f"/movies/{movie_id}", lang=True)
        return self._data(response, Movie)

    async def movie_updates(self, since: datetime) -> MovieUpdates:
        """IDs des films modifies depuis une date (GET /movieupdates)."""
        response = await self._request(
            "GET", "/movieupdates", params={"since": to_timestamp(since)}
        )
        return self._data(response, MovieUpdates)

    # ---- Internes ----

    async def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, cree s'il n'existe pas."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=httpx.Timeout(self._timeout, connect=10.0),
            )
            self._owns_client = True
        return self._client

    async def _fetch_token(self) -> str:
        """Effectue POST /login et renvoie le JWT brut."""
        logger.debug("Login TheTVDB")
        response = await self._send(
            "POST",
            "/login",
            headers={"Content-Type": "application/json"},
            json={"apikey": self._api_key},
        )
        body = self._json(response)
        token = body.get("token") if isinstance(body, dict) else None
        if not isinstance(token, str):
            raise JSONError("missing 'token' field in login response")
        return token

    async def _request(
        self,
        method: str,
        path: str,
        *,
        lang: bool = False,
        params: Optional[dict[str, Any]] = None,
    ) -> httpx.Response:
        """
        Envoie une requete authentifiee.

        Le jeton est obtenu (ou renouvele) avant l'envoi ; le verrou du jeton
        n'est pas conserve pendant la requete.
        """
        token = await self._tokens.get_token()
        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }
        if lang:
            headers["Accept-Language"] = self._language
        return await self._send(method, path, headers=headers, params=params)

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        client = await self._get_client()
        logger.debug(f"{method} {path}")
        try:
            response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise HTTPError(str(e) or type(e).__name__) from e
        _check_status(response)
        return response

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise JSONError(str(e)) from e

    def _data(self, response: httpx.Response, type_: Any) -> Any:
        """Extrait et valide le champ "data" de la reponse."""
        body = self._json(response)
        if not isinstance(body, dict) or "data" not in body:
            raise JSONError("missing 'data' field in response")
        return self._validate(type_, body["data"])

    @staticmethod
    def _validate(type_: Any, value: Any) -> Any:
        try:
            return _adapter(type_).validate_python(value)
        except ValidationError as e:
            raise JSONError(str(e)) from e


def _check_status(response: httpx.Response) -> None:
    """
    Convertit les statuts d'erreur en exceptions.

    Raises:
        InvalidAPIKeyError: 401
        NotFoundError: 404
        ServerError: 5XX
        HTTPError: Tout autre statut hors 2XX
    """
    status = response.status_code
    if status == 401:
        raise InvalidAPIKeyError()
    if status == 404:
        raise NotFoundError(response.request.url.path)
    if status >= 500:
        raise ServerError(status)
    if not response.is_success:
        raise HTTPError(f"{status} {response.reason_phrase}", status)


def _parse_last_modified(headers: httpx.Headers) -> datetime:
    raw = next(
        (value for key, value in headers.raw if key.lower() == b"last-modified"),
        None,
    )
    if raw is None:
        raise MissingLastModifiedError()
    try:
        text = raw.decode("ascii")
    except UnicodeDecodeError as e:
        raise InvalidHTTPHeaderError("Last-Modified") from e
    try:
        moment = parsedate_to_datetime(text)
    except (TypeError, ValueError) as e:
        raise InvalidDateFormatError(text) from e
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)
