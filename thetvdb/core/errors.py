"""
Exceptions levees par le client TheTVDB.

La taxonomie est fermee : toute erreur remontee a l'appelant herite de
TVDBError. Aucune de ces erreurs n'est relancee ni recuperee en interne.

Correspondance avec les reponses HTTP :
- 401 -> InvalidAPIKeyError
- 404 -> NotFoundError
- 5XX -> ServerError
- autres statuts en erreur, erreurs de transport -> HTTPError
"""

from typing import Optional


class TVDBError(Exception):
    """Exception de base pour toutes les erreurs du client."""


class InvalidAPIKeyError(TVDBError):
    """La cle API fournie n'est pas valide (401)."""

    def __init__(self) -> None:
        super().__init__("Invalid API key")


class NotFoundError(TVDBError):
    """
    La ressource demandee n'existe pas.

    Levee sur un 404, ou quand l'API renvoie une ressource vide dont
    l'identifiant ne correspond pas a celui demande.
    """

    def __init__(self, resource: Optional[str] = None) -> None:
        self.resource = resource
        message = f"Not found: {resource}" if resource else "Not found"
        super().__init__(message)


class ServerError(TVDBError):
    """
    L'API a repondu avec une erreur serveur (5XX).

    Attributes:
        status_code: Code HTTP renvoye par l'API
    """

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"API server error ({status_code})")


class InvalidHTTPHeaderError(TVDBError):
    """Un header renvoye par l'API n'est pas representable en texte."""

    def __init__(self, header: str) -> None:
        self.header = header
        super().__init__(f"Non-parsable HTTP header: {header}")


class MissingLastModifiedError(TVDBError):
    """L'API n'a pas renvoye le header Last-Modified."""

    def __init__(self) -> None:
        super().__init__("Last modified data missing")


class InvalidDateFormatError(TVDBError):
    """Une date renvoyee par l'API est dans un format inconnu."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid date format: {value!r}")


class MissingSeriesFilterKeysError(TVDBError):
    """series_filter appele avec un ensemble de cles vide."""

    def __init__(self) -> None:
        super().__init__("No series filter keys provided")


class MissingImageError(TVDBError):
    """Une URL d'image est demandee mais le chemin de l'image est inconnu."""

    def __init__(self) -> None:
        super().__init__("Image data is missing")


class MissingSeriesSlugError(TVDBError):
    """L'URL du site est demandee mais le slug de la serie est inconnu."""

    def __init__(self) -> None:
        super().__init__("Series slug is missing")


class InvalidTokenError(TVDBError):
    """Le JWT renvoye par l'API au login ne peut pas etre decode."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Could not decode authentication JWT: {reason}")


class HTTPError(TVDBError):
    """
    Erreur de transport HTTP ou statut d'erreur non prevu.

    Attributes:
        status_code: Code HTTP si une reponse a ete recue, sinon None
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(f"HTTP error: {message}")


class JSONError(TVDBError):
    """Le corps de la reponse n'est pas du JSON ou n'a pas la forme attendue."""

    def __init__(self, message: str) -> None:
        super().__init__(f"JSON error: {message}")
