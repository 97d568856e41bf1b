"""
Tests des modeles de reponse : URLs derivees, pagination et reserialisation.
"""

from datetime import time

import pytest
from pydantic import ValidationError

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
    PageLinks,
    SearchSeries,
    Series,
    SeriesImages,
    SeriesStatus,
    SeriesUpdate,
)
from thetvdb.adapters.api.movie_models import Artwork, Genre, Movie, MovieUpdates, Person
from thetvdb.core.errors import MissingImageError, MissingSeriesSlugError
from thetvdb.core.params import EpisodeParams, EpisodeQuery, EpisodeQueryParams
from tests.fixtures.tvdb_responses import (
    TVDB_ACTORS_RESPONSE,
    TVDB_EPISODE_RESPONSE,
    TVDB_EPISODES_QUERY_RESPONSE,
    TVDB_EPISODES_SUMMARY_RESPONSE,
    TVDB_FILTER_RESPONSE,
    TVDB_IMAGES_QUERY_PARAMS_RESPONSE,
    TVDB_IMAGES_QUERY_RESPONSE,
    TVDB_IMAGES_RESPONSE,
    TVDB_LANGUAGE_RESPONSE,
    TVDB_MOVIE_RESPONSE,
    TVDB_MOVIE_UPDATES_RESPONSE,
    TVDB_SEARCH_RESPONSE,
    TVDB_SERIES_RESPONSE,
    TVDB_UPDATED_RESPONSE,
)


@pytest.fixture
def series() -> Series:
    return Series.model_validate(TVDB_SERIES_RESPONSE["data"])


@pytest.fixture
def movie() -> Movie:
    return Movie.model_validate(TVDB_MOVIE_RESPONSE["data"])


class TestSeriesUrls:
    """URLs derivees des chemins relatifs."""

    def test_banner_url(self, series: Series) -> None:
        assert series.banner_url() == "https://www.thetvdb.com/banners/graphical/81189-g10.jpg"

    def test_absolute_poster_path_replaces_base_path(self, series: Series) -> None:
        assert series.poster_url() == "https://www.thetvdb.com/banners/posters/81189-10.jpg"

    def test_missing_fanart_raises(self, series: Series) -> None:
        with pytest.raises(MissingImageError):
            series.fanart_url()

    def test_website_url(self, series: Series) -> None:
        assert series.website_url() == "https://www.thetvdb.com/series/breaking-bad"

    def test_filtered_series_without_slug(self) -> None:
        filtered = FilteredSeries.model_validate({"seriesName": "Breaking Bad"})

        with pytest.raises(MissingSeriesSlugError):
            filtered.website_url()

    def test_search_series_without_banner(self) -> None:
        result = SearchSeries.model_validate(TVDB_SEARCH_RESPONSE["data"][1])

        with pytest.raises(MissingImageError):
            result.banner_url()

    def test_actor_image_url(self) -> None:
        actor = Actor.model_validate(TVDB_ACTORS_RESPONSE["data"][0])

        assert actor.image_url() == "https://www.thetvdb.com/banners/actors/44491.jpg"

    def test_episode_filename_url(self) -> None:
        episode = Episode.model_validate(TVDB_EPISODE_RESPONSE["data"])

        assert episode.filename_url() == (
            "https://www.thetvdb.com/banners/episodes/81189/349232.jpg"
        )


class TestSeriesFields:
    """Encodages particuliers de l'API."""

    @pytest.mark.parametrize("raw", [None, ""])
    def test_status_unknown(self, raw) -> None:
        result = SearchSeries.model_validate({"id": 1, "status": raw})

        assert result.status is SeriesStatus.UNKNOWN

    def test_status_continuing(self) -> None:
        result = SearchSeries.model_validate({"id": 1, "status": "Continuing"})

        assert result.status is SeriesStatus.CONTINUING

    def test_air_time_without_space(self) -> None:
        series = Series.model_validate({"id": 1, "airsTime": "8:30pm"})

        assert series.airs_time == time(20, 30)

    def test_unknown_fields_are_ignored(self) -> None:
        series = Series.model_validate({"id": 1, "somethingNew": [1, 2, 3]})

        assert series.id == 1

    def test_models_are_immutable(self, series: Series) -> None:
        with pytest.raises(ValidationError):
            series.series_name = "Other"

    def test_episode_summary_counts_are_integers(self) -> None:
        summary = EpisodeSummary.model_validate(TVDB_EPISODES_SUMMARY_RESPONSE["data"])

        assert summary.aired_episodes == 62


class TestEpisodeParamsFromObjects:
    """Parametres d'episodes construits depuis un objet serie."""

    def test_series_episode_params(self, series: Series) -> None:
        assert series.episode_params() == EpisodeParams(81189, 1)
        assert series.episode_params(3) == EpisodeParams(81189, 3)

    def test_search_result_episode_query_params(self) -> None:
        result = SearchSeries.model_validate(TVDB_SEARCH_RESPONSE["data"][0])

        assert result.episode_query_params(2) == EpisodeQueryParams(81189, 2)

    def test_series_update_episode_params(self) -> None:
        update = SeriesUpdate.model_validate({"id": 121361, "lastUpdated": 1705320000})

        assert update.episode_params().series_id == 121361


class TestPagination:
    """Page courante et parametres des pages voisines."""

    @pytest.mark.parametrize(
        ("links", "expected"),
        [
            ({"first": 1, "last": 5, "next": 3, "prev": 1}, 2),
            ({"first": 1, "last": 5, "next": 2, "prev": None}, 1),
            ({"first": 1, "last": 5, "next": None, "prev": 4}, 5),
            ({"first": 1, "last": 1, "next": None, "prev": None}, 1),
        ],
    )
    def test_current_page(self, links: dict, expected: int) -> None:
        assert PageLinks.model_validate(links).current_page == expected

    def test_middle_page_params(self) -> None:
        page = EpisodePage(
            links=PageLinks(first=1, last=5, next=4, prev=2), series_id=81189
        )

        assert page.current_page == 3
        assert page.next_page_params() == EpisodeParams(81189, 4)
        assert page.prev_page_params() == EpisodeParams(81189, 2)
        assert page.first_page_params() == EpisodeParams(81189, 1)
        assert page.last_page_params() == EpisodeParams(81189, 5)

    def test_no_params_beyond_bounds(self) -> None:
        page = EpisodePage(links=PageLinks(first=1, last=1), series_id=81189)

        assert page.next_page_params() is None
        assert page.prev_page_params() is None
        assert page.first_page_params() == page.last_page_params()

    def test_query_page_carries_query(self) -> None:
        query = EpisodeQuery(aired_season=2, aired_episode=5)
        page = EpisodeQueryPage(
            links=PageLinks(first=1, last=3, next=3, prev=1), series_id=81189, query=query
        )

        assert page.next_page_query_params() == EpisodeQueryParams(81189, 3, query)
        assert page.prev_page_query_params() == EpisodeQueryParams(81189, 1, query)
        assert page.last_page_query_params().query_params() == {
            "page": 3,
            "airedSeason": 2,
            "airedEpisode": 5,
        }

    def test_page_excludes_injected_fields_from_dump(self) -> None:
        page = EpisodePage(links=PageLinks(), series_id=81189)

        dumped = page.to_api_dict()

        assert set(dumped) == {"data", "links"}


class TestApiRoundTrip:
    """Un modele reserialise dans l'encodage de l'API redonne le meme modele."""

    def test_series(self, series: Series) -> None:
        dumped = series.to_api_dict()

        assert dumped["airsTime"] == "9:00 PM"
        assert dumped["added"] == "2008-01-20 00:00:00"
        assert dumped["lastUpdated"] == 1630000000
        assert Series.model_validate(dumped) == series

    def test_episode(self) -> None:
        episode = Episode.model_validate(TVDB_EPISODE_RESPONSE["data"])
        dumped = episode.to_api_dict()

        assert dumped["airedSeasonID"] == 30272
        assert dumped["isMovie"] == 0
        assert Episode.model_validate(dumped) == episode

    def test_episode_summary(self) -> None:
        summary = EpisodeSummary.model_validate(TVDB_EPISODES_SUMMARY_RESPONSE["data"])
        dumped = summary.to_api_dict()

        assert dumped["airedEpisodes"] == "62"
        assert EpisodeSummary.model_validate(dumped) == summary

    def test_movie(self, movie: Movie) -> None:
        dumped = movie.model_dump(mode="json", by_alias=True)

        assert dumped["release_dates"][0]["type"] == "global"
        assert Movie.model_validate(dumped) == movie

    @pytest.mark.parametrize(
        ("model", "raw"),
        [
            (SearchSeries, TVDB_SEARCH_RESPONSE["data"][0]),
            (SearchSeries, TVDB_SEARCH_RESPONSE["data"][1]),
            (FilteredSeries, TVDB_FILTER_RESPONSE["data"]),
            (Actor, TVDB_ACTORS_RESPONSE["data"][0]),
            (Actor, TVDB_ACTORS_RESPONSE["data"][1]),
            (SeriesImages, TVDB_IMAGES_RESPONSE["data"]),
            (Image, TVDB_IMAGES_QUERY_RESPONSE["data"][0]),
            (ImageQueryKey, TVDB_IMAGES_QUERY_PARAMS_RESPONSE["data"][0]),
            (ImageQueryKey, TVDB_IMAGES_QUERY_PARAMS_RESPONSE["data"][1]),
            (SeriesUpdate, TVDB_UPDATED_RESPONSE["data"][0]),
            (Language, TVDB_LANGUAGE_RESPONSE["data"]),
            (MovieUpdates, TVDB_MOVIE_UPDATES_RESPONSE["data"]),
            (EpisodeQueryPage, TVDB_EPISODES_QUERY_RESPONSE),
        ],
        ids=lambda value: value.__name__ if isinstance(value, type) else None,
    )
    def test_response_models(self, model, raw: dict) -> None:
        value = model.model_validate(raw)

        dumped = value.model_dump(mode="json", by_alias=True)

        assert model.model_validate(dumped) == value


class TestMovieModels:
    """Accesseurs des films."""

    def test_genre_full_url(self) -> None:
        genre = Genre(url="science-fiction", name="Science-Fiction", id=18)

        assert genre.full_url() == "https://www.thetvdb.com/genres/science-fiction"

    def test_artwork_urls(self, movie: Movie) -> None:
        artwork: Artwork = movie.artworks[0]

        assert artwork.full_url() == "https://www.thetvdb.com/banners/movies/190/posters/1.jpg"
        assert artwork.full_thumb_url().endswith("/movies/190/posters/1_t.jpg")

    def test_person_images(self, movie: Movie) -> None:
        actor: Person = movie.people.actors[0]

        assert actor.people_image_url() == "https://www.thetvdb.com/banners/person/1.jpg"
        with pytest.raises(MissingImageError):
            actor.role_image_url()

    def test_empty_strings_become_none(self, movie: Movie) -> None:
        assert movie.translations[0].tagline is None
        assert movie.translations[1].overview is None
        assert movie.people.directors[0].imdb_id is None

    def test_translations(self, movie: Movie) -> None:
        assert movie.translation("fra").name == "Matrix"
        assert movie.translation("deu") is None
        assert movie.primary_translation.name == "The Matrix"

    def test_translation_for_abbr(self, movie: Movie) -> None:
        assert movie.translation_for_abbr("fr").name == "Matrix"
        assert movie.translation_for_abbr("EN").name == "The Matrix"
        assert movie.translation_for_abbr("de") is None
        assert movie.translation_for_abbr("xx") is None
