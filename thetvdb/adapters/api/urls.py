"""
Construction des URLs completes a partir des chemins relatifs de l'API.

L'API renvoie des chemins relatifs pour les images ("graphical/81189-g10.jpg"),
les slugs de series et les pages de genres. Les chemins absolus
("/banners/posters/81189-10.jpg") remplacent le chemin de la base.
"""

from typing import Optional
from urllib.parse import urljoin

from thetvdb.core.errors import MissingImageError, MissingSeriesSlugError

SERIES_BASE_URL = "https://www.thetvdb.com/series/"
BANNER_BASE_URL = "https://www.thetvdb.com/banners/"
GENRE_BASE_URL = "https://www.thetvdb.com/genres/"


def image_url(path: str) -> str:
    """Retourne l'URL complete d'une image."""
    return urljoin(BANNER_BASE_URL, path)


def optional_image_url(path: Optional[str]) -> str:
    """
    Retourne l'URL complete d'une image optionnelle.

    Raises:
        MissingImageError: Si le chemin est absent
    """
    if not path:
        raise MissingImageError()
    return image_url(path)


def series_website_url(slug: Optional[str]) -> str:
    """
    Retourne l'URL de la page de la serie sur thetvdb.com.

    Raises:
        MissingSeriesSlugError: Si le slug est absent
    """
    if not slug:
        raise MissingSeriesSlugError()
    return urljoin(SERIES_BASE_URL, slug)


def genre_page_url(path: str) -> str:
    """Retourne l'URL de la page d'un genre de film."""
    return urljoin(GENRE_BASE_URL, path)
