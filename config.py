import os, logging, pathlib
from rich.logging import RichHandler

DATA_DIR = pathlib.Path(os.getenv("MEDIA_TRACKER_HOME", "."))
MEDIA_DATA_FILE = DATA_DIR / "media_data.txt"   # default catalog
USER_DATA_PREFIX = "userdata_"                   # userdata_<username>.txt
LOG_LEVEL = os.getenv("MEDIA_TRACKER_LOG_LEVEL", "WARNING")

MIN_RATING = 0.0
MAX_RATING = 10.0
DEFAULT_MIN_RATING = 0.0
DEFAULT_MAX_DURATION = 200
COLD_START_LIMIT = 5


def setup_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False, markup=False)],
    )
