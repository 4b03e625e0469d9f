"""
Plain-text report writers for watch history and recommendations.

Reports are meant for people, not for re-parsing. Each one is a short
header, a rule, one numbered line per item (the item's full detail string),
a closing rule and an end marker. Files are written atomically; any I/O
or encoding failure surfaces as ExportError.
"""

import logging
import pathlib
from datetime import datetime
from typing import List

from errors import ExportError
from light_persistence import write_text_atomic
from media import MediaRecord, display_details

logger = logging.getLogger(__name__)

RULE = "=" * 51
DATE_FORMAT = "%a %b %d %H:%M:%S %Y"


def _numbered(items: List[MediaRecord]) -> List[str]:
    return [f"{i}. {display_details(m)}" for i, m in enumerate(items, start=1)]


def render_watch_history(user, when: datetime | None = None) -> str:
    history = user.get_watch_history()
    when = when or datetime.now()
    lines = [
        f"Watch History for: {user.username} (ID: {user.user_id})",
        f"Export Date: {when.strftime(DATE_FORMAT)}",
        f"Total Items Watched: {len(history)}",
        RULE,
    ]
    lines += _numbered(history) if history else ["No items in watch history."]
    lines += [RULE, "End of Watch History"]
    return "\n".join(lines) + "\n"


def render_recommendations(user, recommendations: List[MediaRecord], min_rating: float,
                           max_duration: int, when: datetime | None = None) -> str:
    when = when or datetime.now()
    lines = [
        f"Personalized Recommendations for: {user.username} (ID: {user.user_id})",
        f"Generated Date: {when.strftime(DATE_FORMAT)}",
        f"Filter Criteria - Min Rating: {min_rating}, Max Duration: {max_duration} mins",
        f"Total Recommendations: {len(recommendations)}",
        RULE,
    ]
    if recommendations:
        lines += ["Based on your viewing history, we recommend:", ""]
        lines += _numbered(recommendations)
    else:
        lines += [
            "No recommendations found matching your criteria.",
            "Try adjusting your filters or watching more content to improve recommendations.",
        ]
    lines += [RULE, "End of Recommendations"]
    return "\n".join(lines) + "\n"


def _write_report(path, text: str, what: str) -> pathlib.Path:
    p = pathlib.Path(path)
    try:
        write_text_atomic(p, text)
    except (OSError, ValueError) as e:
        raise ExportError(f"Could not write {what} to '{p}': {e}", path=p) from e
    logger.info("Exported %s to %s", what, p)
    return p


def export_watch_history(user, path) -> pathlib.Path:
    return _write_report(path, render_watch_history(user), "watch history")


def export_recommendations(user, recommendations, path, min_rating, max_duration) -> pathlib.Path:
    text = render_recommendations(user, list(recommendations), min_rating, max_duration)
    return _write_report(path, text, "recommendations")
