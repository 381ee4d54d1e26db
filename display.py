# display.py
import zlib
from typing import List, Optional, Tuple

from normalizer import DetailRecord, is_available, star_rating

# pares de cores para os cards sem poster (mesmo id -> mesma cor)
PLACEHOLDER_GRADIENTS: List[Tuple[str, str]] = [
    ("#8b5cf6", "#6366f1"),  # purple -> indigo
    ("#3b82f6", "#14b8a6"),  # blue -> teal
    ("#ef4444", "#ec4899"),  # red -> pink
    ("#facc15", "#f97316"),  # yellow -> orange
    ("#4ade80", "#3b82f6"),  # green -> blue
    ("#ec4899", "#8b5cf6"),  # pink -> purple
]

IMDB_SOURCE = "Internet Movie Database"


def placeholder_gradient(key: str) -> Tuple[str, str]:
    """Escolha determinística (crc32, não hash() que muda a cada processo)."""
    idx = zlib.crc32((key or "").encode("utf-8")) % len(PLACEHOLDER_GRADIENTS)
    return PLACEHOLDER_GRADIENTS[idx]


def placeholder_css(key: str) -> str:
    start, end = placeholder_gradient(key)
    return f"background: linear-gradient(to right, {start}, {end});"


def stars_text(rating_text, total: int = 5) -> Optional[str]:
    """ "8.5/10" -> "★★★★☆"; None quando a nota não é legível."""
    stars = star_rating(rating_text)
    if stars is None:
        return None
    return "★" * stars + "☆" * (total - stars)


def detail_rows(record: DetailRecord) -> List[Tuple[str, str]]:
    """(rótulo, valor) dos campos de rodapé, só os disponíveis."""
    rows = [
        ("Released", record.released),
        ("Box Office", record.box_office),
        ("Production", record.production),
        ("Country", record.country),
    ]
    return [(label, value) for label, value in rows if is_available(value)]


def detail_chips(record: DetailRecord) -> List[str]:
    """Ano, classificação e duração, nessa ordem, pulando os ausentes."""
    return [v for v in (record.year, record.rated, record.runtime) if is_available(v)]
