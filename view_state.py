# view_state.py
"""
Controlador de estado da tela (idle / lista / detalhe).

O estado é sempre substituído inteiro (ViewSnapshot imutável); `loading` é
um flag ortogonal que fica ligado por cima do estado anterior enquanto a
requisição está em andamento.

Política de concorrência: no máximo uma requisição por vez. Uma busca,
troca de página ou abertura de detalhe que chegue com outra em andamento é
ignorada (o método devolve False e nada muda).
"""

import threading
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

import omdb_client
from errors import MovieFinderError, ValidationError
from logger_conf import get_logger
from normalizer import DetailRecord, SearchPage, normalize_detail, normalize_search

logger = get_logger(__name__)

EMPTY_QUERY = "Please enter a movie title"


# ---------------------- ESTADOS ---------------------- #

@dataclass(frozen=True)
class Idle:
    """Nenhuma busca feita ainda (diferente de "busca sem resultados")."""


@dataclass(frozen=True)
class ListResult:
    query: str
    page: SearchPage

    @property
    def records(self):
        return self.page.records


@dataclass(frozen=True)
class Detail:
    record: DetailRecord
    listing: Optional[ListResult] = None  # lista de onde o detalhe foi aberto


@dataclass(frozen=True)
class ErrorShown:
    message: str
    listing: Optional[ListResult] = None  # resultados que continuam na tela


ViewState = Union[Idle, ListResult, Detail, ErrorShown]


@dataclass(frozen=True)
class ViewSnapshot:
    state: ViewState
    loading: bool = False


Listener = Callable[[ViewSnapshot], None]


# ---------------------- CONTROLADOR ---------------------- #

class MovieFinder:
    """
    Dono de todo o estado. `client` é qualquer objeto com search_movies e
    get_movie_details (por padrão o módulo omdb_client).
    """

    def __init__(self, client=None):
        self._client = client if client is not None else omdb_client
        self._snapshot = ViewSnapshot(Idle())
        self._query = ""
        self._listeners: List[Listener] = []
        self._in_flight = threading.Lock()

    # ---------- leitura ----------
    @property
    def snapshot(self) -> ViewSnapshot:
        return self._snapshot

    @property
    def state(self) -> ViewState:
        return self._snapshot.state

    @property
    def loading(self) -> bool:
        return self._snapshot.loading

    @property
    def query(self) -> str:
        return self._query

    @property
    def visible_listing(self) -> Optional[ListResult]:
        """A lista que está (ou estaria) na tela por baixo do estado atual."""
        state = self.state
        if isinstance(state, ListResult):
            return state
        if isinstance(state, (Detail, ErrorShown)):
            return state.listing
        return None

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Registra um callback chamado a cada novo snapshot. Devolve o 'unsubscribe'."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ---------- transições ----------
    def submit_query(self, text: str) -> bool:
        if self._in_flight.locked():
            logger.info("Search ignored: a request is already in flight")
            return False

        query = (text or "").strip()
        if not query:
            err = ValidationError(EMPTY_QUERY)
            logger.debug("Rejected empty query %r", text)
            self._publish(ViewSnapshot(ErrorShown(err.user_message, self.visible_listing)))
            return True

        return self._run_search(query, page=1, under=self._without_error(self.visible_listing), remember=True)

    def change_page(self, page: int) -> bool:
        listing = self.visible_listing
        if listing is None:
            return False
        if page < 1 or page > listing.page.total_pages or page == listing.page.page:
            return False
        return self._run_search(listing.query, page=page, under=listing)

    def select_record(self, imdb_id: str) -> bool:
        listing = self.visible_listing

        def fetch():
            raw = self._client.get_movie_details(imdb_id)
            return Detail(normalize_detail(raw), listing)

        logger.info("Loading details for %s", imdb_id)
        return self._run(fetch, under=self._without_error(listing), listing_on_failure=listing)

    def go_back(self) -> bool:
        state = self.state
        if not isinstance(state, Detail):
            return False
        self._publish(ViewSnapshot(self._without_error(state.listing), self.loading))
        return True

    def dismiss_error(self) -> bool:
        state = self.state
        if not isinstance(state, ErrorShown):
            return False
        self._publish(ViewSnapshot(self._without_error(state.listing), self.loading))
        return True

    # ---------- internos ----------
    @staticmethod
    def _without_error(listing: Optional[ListResult]) -> ViewState:
        return listing if listing is not None else Idle()

    def _run_search(self, query: str, page: int, under: ViewState, remember: bool = False) -> bool:
        def fetch():
            raw = self._client.search_movies(query, page=page)
            return ListResult(query, normalize_search(raw, page=page))

        logger.info("Searching %r (page %s)", query, page)
        # falha de busca limpa a lista
        return self._run(fetch, under=under, listing_on_failure=None,
                         query=query if remember else None)

    def _run(self, fetch: Callable[[], ViewState], under: ViewState,
             listing_on_failure: Optional[ListResult], query: Optional[str] = None) -> bool:
        if not self._in_flight.acquire(blocking=False):
            logger.info("Request ignored: another one is already in flight")
            return False
        try:
            # a consulta só muda com o lock em mãos, junto com o snapshot de loading
            if query is not None:
                self._query = query
            self._publish(ViewSnapshot(under, loading=True))
            try:
                new_state = fetch()
            except MovieFinderError as e:
                logger.warning("Request failed: %s", e.user_message)
                new_state = ErrorShown(e.user_message, listing_on_failure)
            self._publish(ViewSnapshot(new_state, loading=False))
        finally:
            if self._snapshot.loading:
                # um listener levantou exceção antes do snapshot final
                self._snapshot = ViewSnapshot(self._snapshot.state, loading=False)
            self._in_flight.release()
        return True

    def _publish(self, snapshot: ViewSnapshot) -> None:
        self._snapshot = snapshot
        for listener in list(self._listeners):
            listener(snapshot)
