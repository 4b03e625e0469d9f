from typing import List

from rich import print as rprint
from rich.markup import escape

from config import MEDIA_DATA_FILE, DEFAULT_MIN_RATING, DEFAULT_MAX_DURATION
from errors import ExportError, InvalidMediaDataError
from media import play
from pretty_print import show_list, show_history, show_stats
from utilities import parse_rating, parse_duration


HELP = """
Commands:
/load [path]               → load media from a file (default media_data.txt)
/list                      → show every item in the library
/details                   → print the full detail line of every item
/sort                      → sort the library by title
/search <query>            → case-insensitive title search
/genre <genre>             → items whose genre matches exactly (any case)
/watch <title>             → play every title match and add it to your history
/history                   → show your watch history
/recommend [min] [max]     → recommendations (min rating 0-10, max minutes)
/export-history [file]     → write your watch history to a text report
/export-recs [file]        → write recommendations to a text report
/stats                     → library, recommendation and genre statistics
/help                      → show commands
/quit                      → save your history and exit
"""


def _ask_filters(args: List[str]):
    raw_min = args[0] if len(args) > 0 else input(f"Minimum rating (0.0-10.0, default {DEFAULT_MIN_RATING}): ")
    raw_max = args[1] if len(args) > 1 else input(f"Maximum duration in minutes (default {DEFAULT_MAX_DURATION}): ")
    return parse_rating(raw_min, DEFAULT_MIN_RATING), parse_duration(raw_max, DEFAULT_MAX_DURATION)


def cmd_load(state, args: List[str]):
    path = " ".join(args).strip() or input(f"Filename (Enter for '{MEDIA_DATA_FILE}'): ").strip() or MEDIA_DATA_FILE
    try:
        n = state.catalog.load_from_file(path)
    except InvalidMediaDataError as e:
        rprint(f"[red]Error loading media data:[/red] {escape(str(e))}")
        rprint("[dim]Please check your file format and try again.[/dim]")
        return
    rprint(f"[green]Loaded {n} items from {escape(str(path))}.[/green] Library size: {len(state.catalog)}")


def cmd_list(state, args: List[str]):
    items = state.catalog.get_all_media()
    if not items:
        rprint("[yellow]The library is empty. Try /load first.[/yellow]"); return
    show_list(items, title="Library")


def cmd_sort(state, args: List[str]):
    state.catalog.sort_media(); rprint("[green]Library sorted by title.[/green]")


def cmd_search(state, args: List[str]):
    query = " ".join(args) if args else input("Title to search: ")
    hits = state.catalog.search_by_title(query)
    if not hits:
        rprint(f"[yellow]No media found matching '{escape(query)}'.[/yellow]"); return
    show_list(hits, title=f"Search results for: {query} ({len(hits)} found)")


def cmd_genre(state, args: List[str]):
    if not args:
        rprint("[yellow]Usage: /genre <genre>[/yellow]"); return
    genre = " ".join(args)
    hits = state.catalog.get_media_by_genre(genre)
    if not hits:
        rprint(f"[yellow]No media in genre '{escape(genre)}'.[/yellow]"); return
    show_list(hits, title=f"Genre: {genre}")


def cmd_watch(state, args: List[str]):
    query = " ".join(args) if args else input("Title to watch: ")
    hits = state.catalog.search_by_title(query)
    if not hits:
        rprint(f"[yellow]No media found matching '{escape(query)}'.[/yellow]"); return
    user = state.current_user
    for m in hits:
        rprint(f"▶️ {escape(play(m))}")
        user.watch_media(m)
    # autosave so a crash doesn't lose the session
    if state.logout():
        rprint(f"[green]Added {len(hits)} item(s) to your watch history.[/green]")
    else:
        rprint("[yellow]Added to your history, but it could not be saved right now.[/yellow]")


def cmd_history(state, args: List[str]):
    show_history(state.current_user)


def cmd_recommend(state, args: List[str]):
    min_rating, max_duration = _ask_filters(args)
    recs = state.current_user.get_recommendations(state.catalog, state.engine, min_rating, max_duration)
    if not recs:
        rprint("[yellow]No recommendations found matching your criteria.[/yellow]")
        rprint("[dim]Try watching more content or adjusting your filters.[/dim]")
        return
    show_list(recs, title="Your recommendations")


def cmd_export_history(state, args: List[str]):
    user = state.current_user
    default = f"watchhistory_{user.user_id}.txt"
    path = " ".join(args).strip() or input(f"Export file (default: {default}): ").strip() or default
    try:
        user.export_watch_history(path)
    except ExportError as e:
        rprint(f"[red]Error exporting watch history:[/red] {escape(str(e))}"); return
    rprint(f"[green]Watch history exported to {escape(path)}[/green]")


def cmd_export_recs(state, args: List[str]):
    user = state.current_user
    min_rating, max_duration = _ask_filters([])
    recs = user.get_recommendations(state.catalog, state.engine, min_rating, max_duration)
    default = f"recommendations_{user.user_id}.txt"
    path = " ".join(args).strip() or input(f"Export file (default: {default}): ").strip() or default
    try:
        user.export_recommendations(recs, path, min_rating, max_duration)
    except ExportError as e:
        rprint(f"[red]Error exporting recommendations:[/red] {escape(str(e))}"); return
    rprint(f"[green]{len(recs)} recommendation(s) exported to {escape(path)}[/green]")


def cmd_stats(state, args: List[str]):
    show_stats(state)


def cmd_show(state, args: List[str]):
    """Print the full detail line for each catalog item, one per line."""
    state.catalog.display_all()


COMMANDS = {
    "/load": cmd_load,
    "/list": cmd_list,
    "/details": cmd_show,
    "/sort": cmd_sort,
    "/search": cmd_search,
    "/genre": cmd_genre,
    "/watch": cmd_watch,
    "/history": cmd_history,
    "/recommend": cmd_recommend,
    "/export-history": cmd_export_history,
    "/export-recs": cmd_export_recs,
    "/stats": cmd_stats,
}


def dispatch(state, line: str) -> bool:
    """Run one command line. Returns False when the session should end."""
    parts = line.split()
    name, args = parts[0].lower(), parts[1:]
    if name == "/quit":
        if state.logout():
            rprint("[green]Your watch history has been saved.[/green]")
        rprint("Goodbye!")
        return False
    if name == "/help":
        print(HELP); return True
    handler = COMMANDS.get(name)
    if handler is None:
        rprint("[yellow]Unknown command.[/yellow] Try /help.")
        return True
    handler(state, args)
    return True
