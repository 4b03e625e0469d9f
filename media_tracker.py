# media_tracker.py
# Terminal media catalog and watch-history tracker with slash commands.

from rich import print as rprint
from rich.markup import escape

from config import setup_logging
from state import AppState
from cli import dispatch


def main():
    setup_logging()
    state = AppState()
    rprint("[bold green]Media Tracker[/bold green] — local catalog, watch history, recommendations.")
    try:
        username = ""
        while not username:
            username = input("Username: ").strip()
    except (EOFError, KeyboardInterrupt):
        print(); return

    user, restored = state.login(username)
    if restored:
        rprint(f"Welcome back, [bold]{escape(user.username)}[/bold]! "
               f"{len(user.get_watch_history())} watched item(s) restored. (ID: {user.user_id})")
    else:
        rprint(f"Welcome, [bold]{escape(user.username)}[/bold]! Your user ID is {user.user_id}.")
    rprint("Type /help to see commands.")

    while True:
        try:
            cmd = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print(); state.logout(); break
        if not cmd: continue
        if not cmd.startswith("/"):
            rprint("[dim]Commands start with '/'. Try /help.[/dim]")
            continue
        if not dispatch(state, cmd):
            break


if __name__ == "__main__":
    main()
