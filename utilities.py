import math
from collections import Counter
from typing import Iterable, List, Tuple

from rich import print as rprint

from config import MIN_RATING, MAX_RATING


def tally_genres(genres: Iterable[str]) -> List[Tuple[str, int]]:
    """(genre, count) pairs, most watched first; ties keep first-seen order."""
    return Counter(genres).most_common()


def parse_rating(s: str | None, default: float) -> float:
    """
    Parse a minimum-rating answer. Blank -> default; non-numeric or outside
    0..10 -> default with a warning.
    """
    s = (s or "").strip()
    if not s: return default
    try:
        v = float(s)
    except ValueError:
        rprint(f"[yellow]Invalid number format. Using default: {default}[/yellow]")
        return default
    if not math.isfinite(v) or v < MIN_RATING or v > MAX_RATING:
        rprint(f"[yellow]Rating must be between {MIN_RATING} and {MAX_RATING}. Using default: {default}[/yellow]")
        return default
    return v


def parse_duration(s: str | None, default: int) -> int:
    """Parse a maximum-duration answer in minutes. Blank -> default; bad or negative -> default."""
    s = (s or "").strip()
    if not s: return default
    try:
        v = int(s)
    except ValueError:
        rprint(f"[yellow]Invalid number format. Using default: {default}[/yellow]")
        return default
    if v < 0:
        rprint(f"[yellow]Duration must be positive. Using default: {default}[/yellow]")
        return default
    return v
