"""
Modeles pydantic des films (/movies/{id}, /movieupdates).

Contrairement au reste de l'API v3, les reponses films sont en snake_case :
pas de generateur d'alias ici.
"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from thetvdb.adapters.api import urls
from thetvdb.adapters.api.deserialize import OptionalString
from thetvdb.core.ids import MovieID

# Abreviations v3 (Accept-Language) vers codes ISO 639-2 des traductions de films
MOVIE_LANGUAGE_CODES = {
    "cs": "ces",
    "da": "dan",
    "de": "deu",
    "el": "ell",
    "en": "eng",
    "es": "spa",
    "fi": "fin",
    "fr": "fra",
    "he": "heb",
    "hr": "hrv",
    "hu": "hun",
    "it": "ita",
    "ja": "jpn",
    "ko": "kor",
    "nl": "nld",
    "no": "nor",
    "pl": "pol",
    "pt": "por",
    "ru": "rus",
    "sl": "slv",
    "sv": "swe",
    "tr": "tur",
    "zh": "zho",
}


class MovieModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


class Genre(MovieModel):
    url: str = ""
    name: str = ""
    id: int = 0

    def full_url(self) -> str:
        """URL de la page du genre sur thetvdb.com."""
        return urls.genre_page_url(self.url)


class Translation(MovieModel):
    language_code: str
    name: str = ""
    overview: OptionalString = None
    is_primary: bool = False
    tagline: OptionalString = None


class ReleaseDate(MovieModel):
    """Date de sortie d'un film dans un pays. Le champ API "type" devient kind."""

    kind: str = Field(alias="type")
    date: dt.date
    country: str = ""


class Artwork(MovieModel):
    id: str
    artwork_type: str = ""
    url: str = ""
    thumb_url: str = ""
    tags: OptionalString = None
    is_primary: bool = False
    width: int = 0
    height: int = 0

    def full_url(self) -> str:
        return urls.image_url(self.url)

    def full_thumb_url(self) -> str:
        return urls.image_url(self.thumb_url)


class Trailer(MovieModel):
    url: str
    name: str = ""


class RemoteID(MovieModel):
    """Identifiant du film sur un autre site (IMDb, TMDb...)."""

    id: str
    source_id: int = 0
    source_name: str = ""
    url: str = ""


class Person(MovieModel):
    id: str
    name: str = ""
    role: OptionalString = None
    people_image: OptionalString = None
    role_image: OptionalString = None
    is_featured: bool = False
    people_id: str = ""
    imdb_id: OptionalString = None
    people_twitter: OptionalString = None
    people_facebook: OptionalString = None
    people_instagram: OptionalString = None

    def people_image_url(self) -> str:
        """
        URL de la photo de la personne.

        Raises:
            MissingImageError: Si la photo est absente
        """
        return urls.optional_image_url(self.people_image)

    def role_image_url(self) -> str:
        """
        URL de la photo du role.

        Raises:
            MissingImageError: Si la photo est absente
        """
        return urls.optional_image_url(self.role_image)


class People(MovieModel):
    actors: list[Person] = Field(default_factory=list)
    directors: list[Person] = Field(default_factory=list)
    producers: list[Person] = Field(default_factory=list)
    writers: list[Person] = Field(default_factory=list)


class Movie(MovieModel):
    """Film complet renvoye par /movies/{id}."""

    id: MovieID
    url: str = ""
    runtime: int = 0
    genres: list[Genre] = Field(default_factory=list)
    translations: list[Translation] = Field(default_factory=list)
    release_dates: list[ReleaseDate] = Field(default_factory=list)
    artworks: list[Artwork] = Field(default_factory=list)
    trailers: list[Trailer] = Field(default_factory=list)
    remoteids: list[RemoteID] = Field(default_factory=list)
    people: People = Field(default_factory=People)

    def translation(self, language_code: str) -> Optional[Translation]:
        """Retourne la traduction dans la langue donnee, ou None."""
        for translation in self.translations:
            if translation.language_code == language_code:
                return translation
        return None

    def translation_for_abbr(self, abbr: str) -> Optional[Translation]:
        """
        Retourne la traduction correspondant a une abreviation de langue v3.

        Args:
            abbr: Abreviation a deux lettres ("fr"), celle du client

        Returns:
            La traduction, ou None si la langue est inconnue ou absente
        """
        code = MOVIE_LANGUAGE_CODES.get(abbr.lower())
        return self.translation(code) if code else None

    @property
    def primary_translation(self) -> Optional[Translation]:
        for translation in self.translations:
            if translation.is_primary:
                return translation
        return self.translations[0] if self.translations else None


class MovieUpdates(MovieModel):
    """IDs des films modifies depuis une date (/movieupdates)."""

    movies: list[MovieID] = Field(default_factory=list)
