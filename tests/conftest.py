"""
Fixtures compartilhadas: payloads do OMDb e um client falso que registra as chamadas.

Nenhum teste acessa o serviço real.
"""

import os
import tempfile

# log de teste fora do repositório (lido na importação de logger_conf)
os.environ.setdefault("MOVIE_FINDER_LOG_FILE", os.path.join(tempfile.gettempdir(), "movie_finder_tests.log"))

import pytest

from errors import TransportError


MATRIX_A = {
    "Title": "The Matrix",
    "Year": "1999",
    "imdbID": "tt0133093",
    "Type": "movie",
    "Poster": "https://m.media-amazon.com/images/M/matrix.jpg",
}
MATRIX_B = {
    "Title": "The Matrix Reloaded",
    "Year": "2003",
    "imdbID": "tt0234215",
    "Type": "movie",
    "Poster": "N/A",
}

MATRIX_DETAIL = {
    "Title": "The Matrix",
    "Year": "1999",
    "Rated": "R",
    "Released": "31 Mar 1999",
    "Runtime": "136 min",
    "Genre": "Action, Sci-Fi",
    "Director": "Lana Wachowski, Lilly Wachowski",
    "Writer": "Lilly Wachowski, Lana Wachowski",
    "Actors": "Keanu Reeves, Laurence Fishburne, Carrie-Anne Moss",
    "Plot": "When a beautiful stranger leads computer hacker Neo to a forbidding underworld...",
    "Awards": "Won 4 Oscars. 42 wins & 51 nominations total",
    "Poster": "https://m.media-amazon.com/images/M/matrix.jpg",
    "Ratings": [
        {"Source": "Internet Movie Database", "Value": "8.7/10"},
        {"Source": "Rotten Tomatoes", "Value": "83%"},
        {"Source": "Metacritic", "Value": "73/100"},
    ],
    "imdbRating": "8.7",
    "imdbID": "tt0133093",
    "Type": "movie",
    "BoxOffice": "$172,076,928",
    "Production": "N/A",
    "Country": "United States, Australia",
    "Response": "True",
}


def search_payload(*items, total=None):
    return {
        "Search": list(items),
        "totalResults": str(total if total is not None else len(items)),
        "Response": "True",
    }


class StubClient:
    """Imita o módulo omdb_client: respostas/exceções programadas + registro das chamadas."""

    def __init__(self, search=None, details=None):
        self.search_response = search
        self.details = details or {}
        self.calls = []

    def search_movies(self, query, page=1):
        self.calls.append(("search", query, page))
        if isinstance(self.search_response, Exception):
            raise self.search_response
        if callable(self.search_response):
            return self.search_response(query, page)
        return self.search_response

    def get_movie_details(self, imdb_id):
        self.calls.append(("detail", imdb_id))
        response = self.details.get(imdb_id, TransportError("Error loading movie details"))
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def matrix_client():
    return StubClient(
        search=search_payload(MATRIX_A, MATRIX_B),
        details={"tt0133093": MATRIX_DETAIL},
    )
