# normalizer.py
import math
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from errors import RemoteError

NOT_AVAILABLE = "N/A"
RESULTS_PER_PAGE = 10  # o OMDb devolve no máximo 10 itens por página

NO_MOVIES_FOUND = "No movies found"
DETAIL_FAILED = "Failed to fetch movie details"

# número decimal no começo do texto ("8.5", "85", ".5", "7.2abc" -> 7.2)
_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+))")


# ---------- utilitários ----------
def is_available(value) -> bool:
    """False para None, texto vazio e o sentinela "N/A" do OMDb."""
    if value is None:
        return False
    text = str(value).strip()
    return bool(text) and text != NOT_AVAILABLE


def split_list(value: str) -> List[str]:
    """ "Drama, Sci-Fi" -> ["Drama", "Sci-Fi"]; vazio quando ausente."""
    if not is_available(value):
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def _leading_float(text: str) -> Optional[float]:
    match = _LEADING_NUMBER.match(text)
    if not match:
        return None
    return float(match.group(1))


def star_rating(rating_text) -> Optional[int]:
    """
    Converte uma nota textual para 0..5 estrelas.

    Aceita "8.5/10", "85/100" (quando o denominador é exatamente 100 o
    numerador é dividido por 10) ou um número solto já na escala 0..10.
    Entrada ilegível devolve None, nunca zero. Arredondamento half-up:
    "7" -> 3.5 -> 4, "5" -> 2.5 -> 3.
    """
    if not is_available(rating_text):
        return None
    text = str(rating_text)

    if "/" in text:
        parts = text.split("/")
        value = _leading_float(parts[0])
        if value is not None and parts[1].strip() == "100":
            value = value / 10
    else:
        value = _leading_float(text)

    if value is None or not math.isfinite(value):
        return None

    stars = math.floor(value / 2 + 0.5)
    return max(0, min(5, stars))


# ---------- registros ----------
@dataclass(frozen=True)
class SummaryRecord:
    imdb_id: str
    title: str
    year: str
    media_type: str
    poster: str = NOT_AVAILABLE

    @property
    def has_poster(self) -> bool:
        return is_available(self.poster)

    @classmethod
    def from_raw(cls, item: dict) -> "SummaryRecord":
        return cls(
            imdb_id=str(item.get("imdbID", "")),
            title=item.get("Title") or NOT_AVAILABLE,
            year=item.get("Year") or NOT_AVAILABLE,
            media_type=item.get("Type") or NOT_AVAILABLE,
            poster=item.get("Poster") or NOT_AVAILABLE,
        )


@dataclass(frozen=True)
class RatingEntry:
    source: str
    value: str

    @property
    def stars(self) -> Optional[int]:
        return star_rating(self.value)


@dataclass(frozen=True)
class DetailRecord:
    imdb_id: str
    title: str
    year: str
    media_type: str
    poster: str
    rated: str
    released: str
    runtime: str
    genre: str
    plot: str
    director: str
    writer: str
    actors: str
    awards: str
    box_office: str
    production: str
    country: str
    imdb_rating: str
    ratings: Tuple[RatingEntry, ...] = ()

    @property
    def has_poster(self) -> bool:
        return is_available(self.poster)

    @property
    def genres(self) -> List[str]:
        return split_list(self.genre)

    @property
    def cast(self) -> List[str]:
        return split_list(self.actors)

    def summary(self) -> SummaryRecord:
        return SummaryRecord(
            imdb_id=self.imdb_id,
            title=self.title,
            year=self.year,
            media_type=self.media_type,
            poster=self.poster,
        )


# campo do OMDb -> atributo do DetailRecord
_DETAIL_FIELDS = {
    "imdbID": "imdb_id",
    "Title": "title",
    "Year": "year",
    "Type": "media_type",
    "Poster": "poster",
    "Rated": "rated",
    "Released": "released",
    "Runtime": "runtime",
    "Genre": "genre",
    "Plot": "plot",
    "Director": "director",
    "Writer": "writer",
    "Actors": "actors",
    "Awards": "awards",
    "BoxOffice": "box_office",
    "Production": "production",
    "Country": "country",
    "imdbRating": "imdb_rating",
}


@dataclass(frozen=True)
class SearchPage:
    """Uma página de resultados, na ordem em que o serviço devolveu."""
    records: Tuple[SummaryRecord, ...]
    total_results: int
    page: int = 1

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self.total_results / RESULTS_PER_PAGE))


# ---------- normalização ----------
def _is_success(raw) -> bool:
    return isinstance(raw, dict) and raw.get("Response") == "True"


def normalize_search(raw: dict, page: int = 1) -> SearchPage:
    """
    Classifica a resposta de busca.
    Sucesso -> SearchPage com todos os itens, sem filtrar nem reordenar.
    Falha -> RemoteError com o texto do serviço (ou "No movies found").
    """
    if not _is_success(raw):
        message = raw.get("Error") if isinstance(raw, dict) else None
        raise RemoteError(message or NO_MOVIES_FOUND)

    records = tuple(
        SummaryRecord.from_raw(item) for item in (raw.get("Search") or []) if isinstance(item, dict)
    )
    try:
        total = int(raw.get("totalResults"))
    except (TypeError, ValueError):
        total = len(records)
    return SearchPage(records=records, total_results=total, page=page)


def normalize_detail(raw: dict) -> DetailRecord:
    """Sucesso -> DetailRecord; campos ausentes ficam com "N/A" (não são removidos)."""
    if not _is_success(raw):
        raise RemoteError(DETAIL_FAILED)

    fields = {attr: raw.get(key) or NOT_AVAILABLE for key, attr in _DETAIL_FIELDS.items()}
    ratings = tuple(
        RatingEntry(source=r.get("Source", ""), value=r.get("Value", NOT_AVAILABLE))
        for r in (raw.get("Ratings") or [])
        if isinstance(r, dict)
    )
    return DetailRecord(ratings=ratings, **fields)
