import logging
import pathlib
from typing import List

from errors import InvalidMediaDataError, ValidationError
from media import MediaKind, MediaRecord

logger = logging.getLogger(__name__)

CATALOG_FIELDS = "Type,ID,Title,Genre,Rating,Duration,Extra"
MIN_FIELDS = 6
FULL_FIELDS = 7
_EXTRA_NAMES = {
    MediaKind.MOVIE: "Director",
    MediaKind.SERIES: "Seasons",
    MediaKind.DOCUMENTARY: "Subject",
}


def split_fields(line: str) -> List[str]:
    """Comma-split a record line, dropping trailing empty fields and trimming the rest."""
    parts = line.rstrip("\r\n").split(",")
    while parts and parts[-1] == "":
        parts.pop()
    return [p.strip() for p in parts]


def media_kind(type_name: str) -> MediaKind:
    """Exact, case-sensitive lookup of a Type column value."""
    for kind in MediaKind:
        if kind.value == type_name:
            return kind
    raise KeyError(type_name)


def build_record(kind: MediaKind, fields: List[str]) -> MediaRecord:
    """
    Build a record from already-split fields (at least 7).

    Raises ValueError for non-numeric rating/duration/season count and
    ValidationError for an out-of-range rating.
    """
    _, mid, title, genre, rating_s, duration_s, extra = fields[:FULL_FIELDS]
    rating = float(rating_s)
    duration = int(duration_s)
    if kind is MediaKind.SERIES:
        extra = int(extra)
    return MediaRecord(kind, mid, title, genre, rating, duration, extra)


def _line_error(message: str, line_no: int, path=None) -> InvalidMediaDataError:
    where = f"{path}: " if path is not None else ""
    return InvalidMediaDataError(f"{where}Line {line_no}: {message}", path=path, line_number=line_no)


def parse_catalog_line(line: str, line_no: int, path=None) -> MediaRecord:
    fields = split_fields(line)
    if len(fields) < MIN_FIELDS:
        raise _line_error(f"Insufficient data fields. Expected at least {MIN_FIELDS}, got {len(fields)}",
                          line_no, path)

    type_name = fields[0]
    try:
        kind = media_kind(type_name)
    except KeyError:
        raise _line_error(f"Unknown media type '{type_name}'. Expected 'Movie', 'Series', or 'Documentary'",
                          line_no, path) from None

    if len(fields) < FULL_FIELDS:
        raise _line_error(f"{kind.value} requires {FULL_FIELDS} fields "
                          f"({CATALOG_FIELDS.replace('Extra', _EXTRA_NAMES[kind])})", line_no, path)

    try:
        return build_record(kind, fields)
    except ValidationError as e:
        raise _line_error(f"Invalid data values: {e}", line_no, path) from e
    except ValueError as e:
        raise _line_error(f"Invalid number format in data: {e}", line_no, path) from e


def read_media_file(path) -> List[MediaRecord]:
    """
    Parse a whole catalog file into records.

    Fails fast: the first bad line raises InvalidMediaDataError and nothing
    parsed so far is returned. Blank lines are skipped but still counted, so
    reported line numbers match what an editor shows.
    """
    p = pathlib.Path(path)
    records: List[MediaRecord] = []
    try:
        with p.open("r", encoding="utf-8") as f:
            for line_no, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                records.append(parse_catalog_line(line, line_no, path=p))
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidMediaDataError(f"Error reading file '{p}': {e}", path=p) from e
    logger.debug("Parsed %d records from %s", len(records), p)
    return records
