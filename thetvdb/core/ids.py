"""
Identifiants types des ressources TheTVDB.

Chaque ressource de l'API est identifiee par un entier. Les types NewType
evitent de passer un ID d'episode la ou un ID de serie est attendu.

Les fonctions *_id_of acceptent un entier brut ou tout objet de reponse
exposant un attribut `id` (resultat de recherche, serie, mise a jour...).
"""

from typing import Any, NewType, Union

SeriesID = NewType("SeriesID", int)
EpisodeID = NewType("EpisodeID", int)
LanguageID = NewType("LanguageID", int)
MovieID = NewType("MovieID", int)

# Entier brut ou objet de reponse portant un `id`
IdLike = Union[int, Any]


def _raw_id(value: IdLike) -> int:
    """
    Extrait l'entier identifiant depuis un entier ou un objet avec `id`.

    Raises:
        ValueError: Si l'objet n'a pas d'identifiant exploitable
    """
    if isinstance(value, bool):
        raise ValueError(f"Identifiant invalide: {value!r}")
    if isinstance(value, int):
        return value
    raw = getattr(value, "id", None)
    if raw is None or isinstance(raw, bool) or not isinstance(raw, int):
        raise ValueError(f"Impossible d'extraire un identifiant de {value!r}")
    return raw


def series_id_of(value: IdLike) -> SeriesID:
    """Retourne le SeriesID d'un entier, d'une serie ou d'une mise a jour."""
    return SeriesID(_raw_id(value))


def episode_id_of(value: IdLike) -> EpisodeID:
    """Retourne l'EpisodeID d'un entier ou d'un episode."""
    return EpisodeID(_raw_id(value))


def language_id_of(value: IdLike) -> LanguageID:
    """Retourne le LanguageID d'un entier ou d'une langue."""
    return LanguageID(_raw_id(value))


def movie_id_of(value: IdLike) -> MovieID:
    """Retourne le MovieID d'un entier ou d'un film."""
    return MovieID(_raw_id(value))
