import os, stat, logging, pathlib, tempfile
from typing import Iterable, List, Optional, Tuple

from config import DATA_DIR, USER_DATA_PREFIX
from errors import ValidationError
from data_ingestion import FULL_FIELDS, build_record, media_kind, split_fields
from media import MediaRecord, to_line

logger = logging.getLogger(__name__)

USER_DATA_HEADER = "USER_DATA"
USERNAME_KEY = "Username:"
USER_ID_KEY = "UserId:"
HISTORY_MARKER = "WatchHistory:"

SavedUser = Tuple[str, str, List[MediaRecord]]  # (username, user_id, history)


def _file_mode(p: pathlib.Path) -> int:
    """Mode for a rewritten file: keep the existing one, else what open() would give under the umask."""
    try:
        return stat.S_IMODE(os.stat(p).st_mode)
    except FileNotFoundError:
        mask = os.umask(0)
        os.umask(mask)
        return 0o666 & ~mask


def write_text_atomic(p: pathlib.Path, text: str) -> None:
    """Write `text` to a temp file beside `p`, then rename it over `p`."""
    p = pathlib.Path(p)
    fd, tmp = tempfile.mkstemp(prefix=f".{p.name}.", suffix=".tmp", dir=p.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        # mkstemp files are 0600
        os.chmod(tmp, _file_mode(p))
        os.replace(tmp, p)
    except BaseException:
        try: os.unlink(tmp)
        except FileNotFoundError: pass
        raise


def user_data_path(username: str, directory=None) -> pathlib.Path:
    """userdata_<username>.txt inside `directory`; usernames that would leave it raise ValidationError."""
    name = f"{USER_DATA_PREFIX}{username}.txt"
    if not username or pathlib.Path(name).name != name or "/" in username or "\\" in username:
        raise ValidationError(f"Username {username!r} can't be used as a file name")
    return pathlib.Path(directory if directory is not None else DATA_DIR) / name


def render_user_data(username: str, user_id: str, history: Iterable[MediaRecord]) -> str:
    lines = [USER_DATA_HEADER, USERNAME_KEY + username, USER_ID_KEY + user_id, HISTORY_MARKER]
    lines += [to_line(m) for m in history]
    return "\n".join(lines) + "\n"


def save_user_data(user, directory=None) -> pathlib.Path:
    """Persist a user's watch history. OSError and ValueError propagate to the caller."""
    p = user_data_path(user.username, directory)
    p.parent.mkdir(parents=True, exist_ok=True)
    write_text_atomic(p, render_user_data(user.username, user.user_id, user.get_watch_history()))
    logger.info("Saved %d watch history entries to %s", len(user.get_watch_history()), p)
    return p


def parse_history_line(line: str) -> MediaRecord:
    """Strict parse of one saved history entry; raises KeyError/ValueError on bad input."""
    fields = split_fields(line)
    if len(fields) < FULL_FIELDS:
        raise ValueError(f"expected {FULL_FIELDS} fields, got {len(fields)}")
    return build_record(media_kind(fields[0]), fields)


def parse_user_data(lines: List[str], source="<memory>") -> Optional[SavedUser]:
    """
    Parse the lines of a user data file.

    Returns None unless the first line is exactly USER_DATA and both the
    Username: and UserId: lines are present. Bad history entries are logged
    and skipped.
    """
    lines = [ln.rstrip("\r\n") for ln in lines]
    if not lines or lines[0] != USER_DATA_HEADER:
        return None

    username = user_id = None
    history: List[MediaRecord] = []
    in_history = False
    for line_no, line in enumerate(lines[1:], start=2):
        if in_history:
            if not line.strip():
                continue
            try:
                history.append(parse_history_line(line))
            except KeyError as e:
                logger.warning("Skipping invalid watch history entry in %s line %d (unknown type %s): %s",
                               source, line_no, e, line)
            except ValueError as e:
                logger.warning("Skipping invalid watch history entry in %s line %d (%s): %s",
                               source, line_no, e, line)
        elif line.startswith(USERNAME_KEY):
            username = line[len(USERNAME_KEY):]
        elif line.startswith(USER_ID_KEY):
            user_id = line[len(USER_ID_KEY):]
        elif line == HISTORY_MARKER:
            in_history = True

    if username is None or user_id is None:
        return None
    return username, user_id, history


def read_user_data(username: str, directory=None) -> Optional[SavedUser]:
    """Look up userdata_<username>.txt; None when absent, malformed or unreadable."""
    try:
        p = user_data_path(username, directory)
    except ValidationError as e:
        logger.warning("No saved data looked up: %s", e)
        return None
    if not p.exists():
        return None
    try:
        with p.open("r", encoding="utf-8") as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error loading user data from %s: %s", p, e)
        return None
    return parse_user_data(lines, source=p)
