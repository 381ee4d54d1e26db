# main.py
import sys

from display import IMDB_SOURCE, detail_chips, detail_rows, stars_text
from logger_conf import get_logger
from normalizer import DetailRecord, is_available
from view_state import Detail, ErrorShown, Idle, ListResult, MovieFinder, ViewSnapshot

logger = get_logger(__name__)

COMMANDS = "search / open <n> / next / prev / back / quit"


def show_loading(snapshot: ViewSnapshot):
    if snapshot.loading:
        print("Searching for movies...")


def pretty_print_listing(listing: ListResult) -> None:
    page = listing.page
    print(f'\nResults for "{listing.query}" — page {page.page}/{page.total_pages} ({page.total_results} results)')
    if not page.records:
        print("No movies on this page.")
        return
    for i, movie in enumerate(page.records, start=1):
        poster = "" if movie.has_poster else " (no poster)"
        print(f"{i:>2}) {movie.title} ({movie.year}) — {movie.media_type} — {movie.imdb_id}{poster}")


def pretty_print_detail(movie: DetailRecord) -> None:
    print(f"\n=== {movie.title} ===")
    chips = detail_chips(movie)
    if chips:
        print(" | ".join(chips))
    if is_available(movie.imdb_rating):
        print(f"IMDb: {movie.imdb_rating}")
    if movie.genres:
        print("Genre:", ", ".join(movie.genres))
    if is_available(movie.plot):
        print(f"\nPlot: {movie.plot}\n")
    if is_available(movie.director):
        print(f"Director: {movie.director}")
    if is_available(movie.writer):
        print(f"Writer: {movie.writer}")
    if movie.cast:
        print("Cast:", ", ".join(movie.cast))
    if is_available(movie.awards):
        print(f"Awards: {movie.awards}")
    for rating in movie.ratings:
        stars = stars_text(rating.value) if rating.source == IMDB_SOURCE else None
        print(f"  {rating.source}: {rating.value}" + (f"  {stars}" if stars else ""))
    for label, value in detail_rows(movie):
        print(f"{label}: {value}")
    if not movie.has_poster:
        print("No Poster Available")


def render(finder: MovieFinder) -> None:
    state = finder.state
    if isinstance(state, Idle):
        print("Ready to explore movies? Type 'search' and a movie title.")
    elif isinstance(state, ErrorShown):
        print(f"Error: {state.message}")
        if state.listing is not None:
            pretty_print_listing(state.listing)
    elif isinstance(state, ListResult):
        pretty_print_listing(state)
    elif isinstance(state, Detail):
        pretty_print_detail(state.record)


def handle_open(finder: MovieFinder, arg: str) -> bool:
    listing = finder.visible_listing
    if listing is None:
        print("No results yet. Search first.")
        return False
    if not arg.isdigit():
        print("Invalid choice.")
        return False
    idx = int(arg) - 1
    if idx < 0 or idx >= len(listing.records):
        print("Index out of range.")
        return False
    return finder.select_record(listing.records[idx].imdb_id)


def handle_page(finder: MovieFinder, step: int) -> bool:
    listing = finder.visible_listing
    if listing is None:
        print("No results yet. Search first.")
        return False
    if not finder.change_page(listing.page.page + step):
        print("No more pages in that direction.")
        return False
    return True


def input_loop(finder: MovieFinder = None):
    finder = finder or MovieFinder()
    finder.subscribe(show_loading)
    render(finder)

    while True:
        print(f"\nWhat do you want to do? ({COMMANDS})")
        cmd, _, arg = input("> ").strip().partition(" ")
        cmd = cmd.lower()
        arg = arg.strip()
        logger.debug("command=%s arg=%r", cmd, arg)

        if cmd in ("quit", "exit", "sair"):
            print("Bye!")
            sys.exit(0)

        if cmd in ("search", "s"):
            term = arg or input("Search for a movie: ")
            changed = finder.submit_query(term)
        elif cmd in ("open", "o"):
            changed = handle_open(finder, arg)
        elif cmd in ("next", "n"):
            changed = handle_page(finder, +1)
        elif cmd in ("prev", "p"):
            changed = handle_page(finder, -1)
        elif cmd in ("back", "b"):
            changed = finder.go_back() or finder.dismiss_error()
            if not changed:
                print("Nothing to go back to.")
        else:
            print(f"Unknown command. Use: {COMMANDS}")
            continue

        if changed:
            render(finder)


if __name__ == "__main__":
    try:
        input_loop()
    except KeyboardInterrupt:
        print("\nInterrupted. Bye.")
        sys.exit(0)
