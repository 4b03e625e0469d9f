import logging
from typing import List

from config import COLD_START_LIMIT
from media import MediaRecord

logger = logging.getLogger(__name__)


def _by_rating(items: List[MediaRecord]) -> List[MediaRecord]:
    # sorted() is stable, so equal ratings keep catalog order
    return sorted(items, key=lambda m: m.rating, reverse=True)


def _passes_filters(m: MediaRecord, min_rating: float, max_duration: int) -> bool:
    return m.rating >= min_rating and m.duration <= max_duration


def analyze_user_genre_preferences(user) -> List[str]:
    """One genre per watched item, in history order; repeats are the frequency signal."""
    return [m.genre for m in user.get_watch_history()]


class RecommendationEngine:
    """
    Rating/genre recommender.

    Keeps a running total of recommendations handed out on the warm path.
    Each engine owns its own counter so tests can build isolated instances.
    """

    def __init__(self, cold_start_limit: int = COLD_START_LIMIT) -> None:
        self.cold_start_limit = cold_start_limit
        self.total_generated = 0

    def generate_recommendations(self, user, catalog, min_rating: float, max_duration: int) -> List[MediaRecord]:
        """
        Rank catalog items for `user`.

        Empty history (cold start): the `cold_start_limit` best-rated items
        passing the rating/duration filters; the counter is left alone.
        Otherwise: unwatched items passing the filters whose genre appears in
        the user's history, best-rated first, uncapped; the counter grows by
        the number returned.
        """
        if user is None or catalog is None:
            return []

        history = user.get_watch_history()
        watched_ids = {m.id for m in history}
        genres = dict.fromkeys(m.genre for m in history)

        if not history:
            pool = [m for m in catalog.get_all_media() if _passes_filters(m, min_rating, max_duration)]
            top = _by_rating(pool)[: self.cold_start_limit]
            logger.debug("Cold start for %s: %d of %d candidates", user.username, len(top), len(pool))
            return top

        recs = _by_rating([
            m for m in catalog.get_all_media()
            if m.id not in watched_ids
            and _passes_filters(m, min_rating, max_duration)
            and m.genre in genres
        ])
        self.total_generated += len(recs)
        logger.debug("Recommended %d items to %s from genres %s", len(recs), user.username, list(genres))
        return recs

    def get_total_recommendations_generated(self) -> int:
        return self.total_generated

    def reset_recommendation_counter(self) -> None:
        self.total_generated = 0
