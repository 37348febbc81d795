"""Shared fixtures: canned OMDb payloads and a fake requests session."""
from __future__ import annotations

from unittest.mock import MagicMock

import pytest


API_KEY = "test-key"


def make_response(payload=None, status_code: int = 200):
    """Build a fake requests.Response returning ``payload`` from .json()."""
    response = MagicMock()
    response.status_code = status_code
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    return response


def search_page(titles: list[tuple[str, str, str]], total: int) -> dict:
    """Search payload for (title, year, type) tuples."""
    return {
        "Search": [
            {
                "Title": title,
                "Year": year,
                "imdbID": f"tt{index:07d}",
                "Type": media_type,
                "Poster": "N/A",
            }
            for index, (title, year, media_type) in enumerate(titles)
        ],
        "totalResults": str(total),
        "Response": "True",
    }


def batman_pages(total: int) -> list[dict]:
    """Search pages of ``total`` distinct 'Batman N' movies, ten per page."""
    pages = []
    for start in range(0, total, 10):
        titles = [
            (f"Batman {n:03d}", str(1990 + n % 30), "movie")
            for n in range(start, min(start + 10, total))
        ]
        pages.append(search_page(titles, total))
    return pages


@pytest.fixture
def superman_payload() -> dict:
    """Lookup payload as OMDb returns it for tt0078346."""
    return {
        "Title": "Superman",
        "Year": "1978",
        "Rated": "PG",
        "Released": "15 Dec 1978",
        "Runtime": "143 min",
        "Genre": "Action, Adventure, Sci-Fi",
        "Director": "Richard Donner",
        "Writer": "Jerry Siegel, Joe Shuster, Mario Puzo",
        "Actors": "Christopher Reeve, Margot Kidder, Gene Hackman",
        "Plot": "An alien orphan is sent from his dying planet to Earth.",
        "Language": "English",
        "Country": "United States, United Kingdom, Switzerland, Canada",
        "Awards": "Nominated for 3 Oscars. 18 wins & 23 nominations total",
        "Poster": "https://m.media-amazon.com/images/M/superman.jpg",
        "Ratings": [
            {"Source": "Internet Movie Database", "Value": "7.4/10"},
            {"Source": "Rotten Tomatoes", "Value": "94%"},
            {"Source": "Metacritic", "Value": "82/100"},
        ],
        "Metascore": "82",
        "imdbRating": "7.4",
        "imdbVotes": "189,516",
        "imdbID": "tt0078346",
        "Type": "movie",
        "DVD": "01 May 2001",
        "BoxOffice": "$134,478,449",
        "Production": "N/A",
        "Website": "N/A",
        "Response": "True",
    }


@pytest.fixture
def series_payload() -> dict:
    """Lookup payload for a series with an open-ended year range."""
    return {
        "Title": "Gotham",
        "Year": "2014–2019",
        "Rated": "TV-14",
        "Released": "22 Sep 2014",
        "Runtime": "42 min",
        "Genre": "Action, Crime, Drama",
        "Ratings": [],
        "Metascore": "N/A",
        "imdbRating": "7.8",
        "imdbVotes": "241,088",
        "imdbID": "tt3749900",
        "Type": "series",
        "totalSeasons": "5",
        "Response": "True",
    }


@pytest.fixture
def session():
    """A MagicMock standing in for requests.Session."""
    return MagicMock()
