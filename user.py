import logging
from typing import List, Optional

from rich import print as rprint
from rich.markup import escape

import exports
from light_persistence import read_user_data, save_user_data
from media import MediaRecord

logger = logging.getLogger(__name__)


class User:
    """
    A person and their watch history.

    History is append-only through this class; get_watch_history() hands out
    a fresh list on every call so callers can't reach the internal one.
    """

    def __init__(self, user_id: str, username: str, watch_history=None) -> None:
        self.user_id = user_id
        self.username = username
        self._history: List[MediaRecord] = list(watch_history or [])

    def __eq__(self, other):
        if not isinstance(other, User):
            return NotImplemented
        return self.user_id == other.user_id

    def __hash__(self):
        return hash(self.user_id)

    def __str__(self):
        return f"User [ID: {self.user_id}, Username: {self.username}, Watched Items: {len(self._history)}]"

    def __repr__(self):
        return f"User(user_id={self.user_id!r}, username={self.username!r}, watched={len(self._history)})"

    def watch_media(self, item: Optional[MediaRecord]) -> None:
        if item is not None:
            self._history.append(item)

    def get_watch_history(self) -> List[MediaRecord]:
        return list(self._history)

    def view_watch_history(self) -> None:
        if not self._history:
            rprint(escape(f"{self.username}'s watch history is empty."))
            return
        rprint(escape(f"{self.username}'s Watch History:"))
        for m in self._history:
            rprint(escape(f"- {m}"))

    def get_recommendations(self, catalog, engine, min_rating: float, max_duration: int) -> List[MediaRecord]:
        return engine.generate_recommendations(self, catalog, min_rating, max_duration)

    def export_watch_history(self, path):
        return exports.export_watch_history(self, path)

    def export_recommendations(self, recommendations, path, min_rating, max_duration):
        return exports.export_recommendations(self, recommendations, path, min_rating, max_duration)

    def logout(self, directory=None) -> bool:
        """Save watch history to userdata_<username>.txt. Write failures are logged, not raised."""
        try:
            save_user_data(self, directory)
        except (OSError, ValueError) as e:
            logger.warning("Could not save watch history for %s: %s", self.username, e)
            return False
        return True

    @classmethod
    def load_user_data(cls, username: str, directory=None) -> Optional["User"]:
        """Restore a saved user, or None if there is no usable saved file for `username`."""
        saved = read_user_data(username, directory)
        if saved is None:
            return None
        saved_name, user_id, history = saved
        logger.info("Restored %s (%s) with %d watched items", saved_name, user_id, len(history))
        return cls(user_id, saved_name, history)


load_user_data = User.load_user_data
