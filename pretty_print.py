from typing import List

import numpy as np
from rich import print as rprint
from rich.markup import escape
from rich.table import Table

from media import MediaRecord, EXTRA_FIELDS
from scoring import analyze_user_genre_preferences
from utilities import tally_genres


def show_list(items: List[MediaRecord], title="Media"):
    tbl = Table(title=title)
    tbl.add_column("#", justify="right")
    tbl.add_column("Type")
    tbl.add_column("ID")
    tbl.add_column("Title")
    tbl.add_column("Genre")
    tbl.add_column("Rating", justify="right")
    tbl.add_column("Minutes", justify="right")
    tbl.add_column("Details")

    for i, m in enumerate(items, start=1):
        label, _ = EXTRA_FIELDS[m.kind]
        tbl.add_row(
            str(i),
            m.kind.value,
            escape(m.id),
            escape(m.title),
            escape(m.genre),
            f"{m.rating:.1f}",
            str(m.duration),
            escape(f"{label}: {m.extra}"),
        )

    rprint(tbl)


def show_history(user):
    history = user.get_watch_history()
    if not history:
        rprint(f"[dim]{escape(user.username)}'s watch history is empty.[/dim]")
        return
    show_list(history, title=f"{user.username}'s Watch History")


def show_stats(state):
    user = state.current_user
    rprint("[bold cyan]Statistics[/bold cyan]")
    if user is not None:
        rprint(f" Current user: {escape(str(user))}")
    rprint(f" Total media in library: {len(state.catalog)}")
    rprint(f" Total recommendations generated: {state.engine.get_total_recommendations_generated()}")
    if user is None:
        return

    history = user.get_watch_history()
    if not history:
        return
    ratings = np.array([m.rating for m in history], dtype=float)
    minutes = np.array([m.duration for m in history], dtype=int)
    rprint(f" Average rating watched: {ratings.mean():.2f}")
    rprint(f" Total minutes watched: {int(minutes.sum())}")

    tbl = Table(title="Your Genre Preferences")
    tbl.add_column("Genre")
    tbl.add_column("Items", justify="right")
    for genre, count in tally_genres(analyze_user_genre_preferences(user)):
        tbl.add_row(escape(genre), str(count))
    rprint(tbl)
