import logging
import pathlib
from dataclasses import dataclass, field
from typing import Optional, Tuple

from catalog import MediaCatalog
from config import DATA_DIR
from scoring import RecommendationEngine
from user import User

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """
    Everything one console session works with.

    Holds the counters that would otherwise be process-wide globals: the
    running number behind generated user ids (User1, User2, ...) and the
    engine's recommendation total. Build a fresh AppState for isolation.
    """

    catalog: MediaCatalog = field(default_factory=MediaCatalog)
    engine: RecommendationEngine = field(default_factory=RecommendationEngine)
    data_dir: pathlib.Path = DATA_DIR
    user_counter: int = 0
    current_user: Optional[User] = None

    def new_user(self, username: str) -> User:
        self.user_counter += 1
        return User(f"User{self.user_counter}", username)

    def login(self, username: str) -> Tuple[User, bool]:
        """Restore `username` from disk if possible, else create a new user. Returns (user, restored)."""
        user = User.load_user_data(username, self.data_dir)
        restored = user is not None
        if not restored:
            user = self.new_user(username)
            logger.info("Created new user %s (%s)", username, user.user_id)
        self.current_user = user
        return user, restored

    def logout(self) -> bool:
        if self.current_user is None:
            return False
        return self.current_user.logout(self.data_dir)
