# omdb_client.py
import os
from typing import Dict

import requests
from dotenv import load_dotenv

from errors import TransportError
from logger_conf import get_logger

# Carrega .env
load_dotenv()

logger = get_logger(__name__)

# Chave de desenvolvimento; em produção use OMDB_API_KEY no ambiente/.env
DEFAULT_API_KEY = "55b491b1"

API_KEY = os.getenv("OMDB_API_KEY") or DEFAULT_API_KEY
BASE_URL = os.getenv("OMDB_BASE_URL", "https://www.omdbapi.com/")
TIMEOUT = float(os.getenv("OMDB_TIMEOUT", "10"))

SEARCH_FAILED = "Failed to fetch movies. Please try again."
DETAIL_FAILED = "Error loading movie details"


# ---------- utilitários ----------
def _redacted(params: Dict[str, object]) -> Dict[str, object]:
    """Cópia dos params sem a chave, para ir ao log."""
    return {k: ("***" if k == "apikey" else v) for k, v in params.items()}


def _get_json(params: Dict[str, object], failure_message: str) -> dict:
    """
    Uma única chamada GET. Qualquer falha de rede, corpo que não é JSON ou
    JSON que não é objeto vira TransportError(failure_message); o detalhe
    original vai só para o log.
    """
    query = dict(params)
    query["apikey"] = API_KEY
    logger.debug("OMDb request: %s %s", BASE_URL, _redacted(query))

    try:
        resp = requests.get(BASE_URL, params=query, timeout=TIMEOUT)
    except requests.exceptions.Timeout as e:
        logger.error("OMDb request timed out after %ss: %s", TIMEOUT, e)
        raise TransportError(failure_message) from e
    except requests.exceptions.RequestException as e:
        logger.error("OMDb network error: %s", e)
        raise TransportError(failure_message) from e

    # o OMDb responde 401 com JSON ({"Response": "False", "Error": ...});
    # o status só vai para o log, quem decide é o corpo
    if resp.status_code != 200:
        logger.warning("OMDb status %s: %s", resp.status_code, resp.text[:200])

    try:
        data = resp.json()
    except ValueError as e:
        logger.error("OMDb returned a non-JSON body: %s", resp.text[:200])
        raise TransportError(failure_message) from e

    if not isinstance(data, dict):
        logger.error("OMDb returned unexpected payload shape: %r", data)
        raise TransportError(failure_message)

    logger.debug("OMDb response: %s", data)
    return data


# ---------- funções principais ----------
def search_movies(query: str, page: int = 1) -> dict:
    """
    Busca por título (?s=). Devolve o JSON bruto; quem interpreta é o normalizer.
    """
    params = {"s": query}
    if page and page > 1:
        params["page"] = page
    return _get_json(params, SEARCH_FAILED)


def get_movie_details(imdb_id: str) -> dict:
    """Registro completo (?i=<id>&plot=full)."""
    return _get_json({"i": imdb_id, "plot": "full"}, DETAIL_FAILED)


# ---------- quick smoke test quando executado diretamente ----------
if __name__ == "__main__":
    if API_KEY == DEFAULT_API_KEY:
        print("Usando a chave de desenvolvimento. Configure OMDB_API_KEY no .env para a sua.")
    try:
        resp = search_movies("matrix")
    except TransportError as e:
        print("Erro:", e.user_message)
    else:
        print(f"Response={resp.get('Response')} totalResults={resp.get('totalResults')}")
        for item in (resp.get("Search") or [])[:5]:
            print(f" - {item.get('Title')} ({item.get('Year')}) [{item.get('imdbID')}]")
