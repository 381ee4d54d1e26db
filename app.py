import html

import streamlit as st

from display import (
    IMDB_SOURCE,
    detail_chips,
    detail_rows,
    placeholder_css,
    stars_text,
)
from normalizer import DetailRecord, SummaryRecord, is_available
from view_state import Detail, ErrorShown, Idle, ListResult, MovieFinder

# ---------------------- CONFIG BÁSICA ---------------------- #

st.set_page_config(
    page_title="Movie Finder",
    page_icon="🎬",
    layout="wide",
)

GRID_COLUMNS = 4
POSTER_WIDTH = 220
DETAIL_POSTER_WIDTH = 300

# CSS simples para dar uma cara de app
st.markdown(
    """
    <style>
    .main-title {
        font-size: 2.6rem;
        font-weight: 700;
        text-align: center;
        margin-bottom: 0.2rem;
    }
    .main-subtitle {
        font-size: 1rem;
        color: #bbbbbb;
        text-align: center;
        margin-bottom: 1.5rem;
    }
    .placeholder-poster {
        height: 360px;
        border-radius: 12px;
        display: flex;
        align-items: center;
        justify-content: center;
        color: white;
        text-align: center;
        padding: 1rem;
        font-weight: 600;
    }
    .chip {
        display: inline-block;
        padding: 3px 10px;
        border-radius: 12px;
        background: #374151;
        color: #e5e7eb;
        margin: 0 6px 6px 0;
        font-size: 0.85rem;
    }
    .movie-meta {
        font-size: 0.9rem;
        color: #cccccc;
    }
    .small-label {
        font-size: 0.8rem;
        color: #aaaaaa;
    }
    </style>
    """,
    unsafe_allow_html=True,
)

# ---------------------- HELPERS ---------------------- #

def chips_html(values) -> str:
    return " ".join(f"<span class='chip'>{html.escape(v)}</span>" for v in values)


def render_placeholder(key: str, label: str, height: int = 360) -> None:
    st.markdown(
        f"<div class='placeholder-poster' style='{placeholder_css(key)} height:{height}px'>"
        f"🎞️<br/>{html.escape(label)}</div>",
        unsafe_allow_html=True,
    )


def run_with_spinner(message: str, action, *args) -> None:
    """Dispara a ação do controlador e redesenha a página com o novo estado."""
    with st.spinner(message):
        changed = action(*args)
    if changed:
        st.rerun()


def render_movie_card(movie: SummaryRecord, key_prefix: str) -> None:
    """Card de resultado: poster (ou placeholder), título, ano, tipo e botão de detalhes."""
    if movie.has_poster:
        st.image(movie.poster, width=POSTER_WIDTH)
    else:
        render_placeholder(movie.imdb_id, movie.title)

    st.markdown(f"**{movie.title}**")
    st.markdown(f"<span class='movie-meta'>📅 {html.escape(movie.year)}</span>", unsafe_allow_html=True)
    if is_available(movie.media_type):
        st.markdown(chips_html([movie.media_type]), unsafe_allow_html=True)

    if st.button("ℹ️ Details", key=f"{key_prefix}-det-{movie.imdb_id}"):
        run_with_spinner("Loading movie details...", finder.select_record, movie.imdb_id)


def render_listing(listing: ListResult) -> None:
    page = listing.page
    st.markdown(f"## Results for \"{listing.query}\"")

    if not page.records:
        st.info("No movies on this page.")
        return

    st.caption(f"Page {page.page} / {page.total_pages} — {page.total_results} results")

    for start in range(0, len(page.records), GRID_COLUMNS):
        cols = st.columns(GRID_COLUMNS)
        for col, movie in zip(cols, page.records[start:start + GRID_COLUMNS]):
            with col:
                render_movie_card(movie, key_prefix=f"search-p{page.page}")

    # PAGINAÇÃO: botões Anterior / Próxima
    if page.total_pages > 1:
        col_prev, col_next = st.columns([1, 1])
        if col_prev.button("⬅️ Previous", disabled=page.page <= 1):
            run_with_spinner("Searching for movies...", finder.change_page, page.page - 1)
        if col_next.button("Next ➡️", disabled=page.page >= page.total_pages):
            run_with_spinner("Searching for movies...", finder.change_page, page.page + 1)


def render_detail(movie: DetailRecord) -> None:
    col_back, col_title = st.columns([1, 11])
    if col_back.button("⬅️", key="back-to-results", help="Back to results"):
        finder.go_back()
        st.rerun()
    col_title.markdown(f"## {movie.title}")

    col_poster, col_info = st.columns([1, 2])

    with col_poster:
        if movie.has_poster:
            st.image(movie.poster, width=DETAIL_POSTER_WIDTH)
        else:
            render_placeholder(movie.imdb_id, "No Poster Available", height=420)
        if is_available(movie.imdb_rating):
            st.metric("IMDb", movie.imdb_rating)

    with col_info:
        chips = detail_chips(movie)
        if chips:
            st.markdown(chips_html(chips), unsafe_allow_html=True)

        if movie.genres:
            st.markdown(chips_html(movie.genres), unsafe_allow_html=True)

        if is_available(movie.plot):
            st.markdown("### Plot")
            st.write(movie.plot)

        col_dir, col_wri = st.columns(2)
        if is_available(movie.director):
            col_dir.markdown("#### Director")
            col_dir.write(movie.director)
        if is_available(movie.writer):
            col_wri.markdown("#### Writer")
            col_wri.write(movie.writer)

        if movie.cast:
            st.markdown("#### Cast")
            st.markdown(chips_html(movie.cast), unsafe_allow_html=True)

        if is_available(movie.awards):
            st.success(f"🏆 **Awards** — {movie.awards}")

        if movie.ratings:
            st.markdown("### Ratings")
            cols = st.columns(min(3, len(movie.ratings)))
            for i, rating in enumerate(movie.ratings):
                with cols[i % len(cols)]:
                    st.markdown(f"<span class='small-label'>{html.escape(rating.source)}</span>", unsafe_allow_html=True)
                    stars = stars_text(rating.value) if rating.source == IMDB_SOURCE else None
                    st.markdown(f"**{rating.value}**" + (f"  {stars}" if stars else ""))

        rows = detail_rows(movie)
        if rows:
            st.divider()
            for col, (label, value) in zip(st.columns(len(rows)), rows):
                col.markdown(f"<span class='small-label'>{label}</span>", unsafe_allow_html=True)
                col.write(value)


# ---------------------- ESTADO INICIAL ---------------------- #

if "finder" not in st.session_state:
    st.session_state["finder"] = MovieFinder()

finder: MovieFinder = st.session_state["finder"]

# ---------------------- TÍTULO GERAL ---------------------- #

st.markdown('<div class="main-title">🎬 Movie Finder</div>', unsafe_allow_html=True)
st.markdown(
    '<div class="main-subtitle">Discover thousands of movies and their details</div>',
    unsafe_allow_html=True,
)

# Enter no campo também envia o form
with st.form("search-form"):
    col_input, col_button = st.columns([5, 1])
    term = col_input.text_input(
        "Movie title",
        value=finder.query,
        placeholder="Search for a movie...",
        label_visibility="collapsed",
    )
    submitted = col_button.form_submit_button("🔍 Search")

if submitted:
    with st.spinner("Searching for movies..."):
        finder.submit_query(term)

# Renderização sempre a partir do estado do controlador
state = finder.state

if isinstance(state, ErrorShown):
    st.error(state.message)

if isinstance(state, Idle) and not finder.loading:
    st.markdown(
        """
        <div style="text-align:center; padding: 4rem 0; color:#9ca3af">
            <div style="font-size:4rem; opacity:0.5">🎞️</div>
            <h3>Ready to explore movies?</h3>
            <p>Enter a movie title above and discover information about your favorite films.</p>
        </div>
        """,
        unsafe_allow_html=True,
    )
elif isinstance(state, Detail):
    render_detail(state.record)
else:
    listing = finder.visible_listing
    if listing is not None:
        render_listing(listing)

st.divider()
st.caption("Movie data provided by OMDB API")
