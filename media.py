"""
Media record model.

A MediaRecord is one tagged type covering every kind of item in the catalog.
The `kind` field says which variant a record is and `extra` carries the
field only that variant has:

- Movie: director (str)
- Series: season count (int)
- Documentary: subject (str)

Behavior that differs per kind (detail strings, playback messages) goes
through the module-level `display_details` and `play` functions, which look
the kind up in tables that must list every MediaKind.
"""

from dataclasses import dataclass
from enum import Enum

from config import MIN_RATING, MAX_RATING
from errors import ValidationError


class MediaKind(str, Enum):
    MOVIE = "Movie"
    SERIES = "Series"
    DOCUMENTARY = "Documentary"


# kind -> (label used in detail strings, attribute name of the payload)
EXTRA_FIELDS = {
    MediaKind.MOVIE: ("Director", "director"),
    MediaKind.SERIES: ("Seasons", "season_count"),
    MediaKind.DOCUMENTARY: ("Subject", "subject"),
}

PLAY_VERBS = {
    MediaKind.MOVIE: "movie",
    MediaKind.SERIES: "series",
    MediaKind.DOCUMENTARY: "documentary",
}

_READ_ONLY = frozenset({"kind", "id", "rating", "extra"})


def validate_rating(rating) -> float:
    try:
        value = float(rating)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Rating must be a number, got {rating!r}") from e
    if not MIN_RATING <= value <= MAX_RATING:
        raise ValidationError(f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {rating}")
    return value


@dataclass(eq=False)
class MediaRecord:
    """
    A single catalog item.

    Attributes:
        kind: which variant this record is
        id: caller-assigned identifier; records compare equal iff ids match
        title: display title, also the natural sort key
        genre: genre label as written in the source file
        rating: score in [0.0, 10.0]
        duration: running time in minutes
        extra: director, season count or subject depending on `kind`
    """

    kind: MediaKind
    id: str
    title: str
    genre: str
    rating: float
    duration: int
    extra: str | int

    def __post_init__(self):
        object.__setattr__(self, "kind", MediaKind(self.kind))
        object.__setattr__(self, "rating", validate_rating(self.rating))
        if self.kind is MediaKind.SERIES:
            try:
                object.__setattr__(self, "extra", int(self.extra))
            except (TypeError, ValueError) as e:
                raise ValidationError(f"Season count must be a whole number, got {self.extra!r}") from e

    def __setattr__(self, name, value):
        if name in _READ_ONLY and name in self.__dict__:
            raise AttributeError(f"{name} is read-only on MediaRecord")
        super().__setattr__(name, value)

    def __eq__(self, other):
        if not isinstance(other, MediaRecord):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def __lt__(self, other):
        if not isinstance(other, MediaRecord):
            return NotImplemented
        return self.title < other.title

    def __str__(self):
        return (f"{self.title} [ID: {self.id}, Genre: {self.genre}, "
                f"Rating: {self.rating:.1f}, Duration: {self.duration} min]")

    def _payload(self, kind: MediaKind):
        if self.kind is not kind:
            raise AttributeError(f"{self.kind.value} has no {EXTRA_FIELDS[kind][1]}")
        return self.extra

    @property
    def director(self) -> str:
        return self._payload(MediaKind.MOVIE)

    @property
    def season_count(self) -> int:
        return self._payload(MediaKind.SERIES)

    @property
    def subject(self) -> str:
        return self._payload(MediaKind.DOCUMENTARY)


def movie(id, title, genre, rating, duration, director) -> MediaRecord:
    return MediaRecord(MediaKind.MOVIE, id, title, genre, rating, duration, director)


def series(id, title, genre, rating, duration, season_count) -> MediaRecord:
    return MediaRecord(MediaKind.SERIES, id, title, genre, rating, duration, season_count)


def documentary(id, title, genre, rating, duration, subject) -> MediaRecord:
    return MediaRecord(MediaKind.DOCUMENTARY, id, title, genre, rating, duration, subject)


def display_details(record: MediaRecord) -> str:
    """Summary string plus the kind-specific field, e.g. '..., Director: Nolan'."""
    label, _ = EXTRA_FIELDS[record.kind]
    return f"{record}, {label}: {record.extra}"


def play(record: MediaRecord) -> str:
    return f"Playing {PLAY_VERBS[record.kind]}: {record.title}"


def to_line(record: MediaRecord) -> str:
    """Serialize as Type,ID,Title,Genre,Rating,Duration,Extra (catalog/user-data line format)."""
    return ",".join([
        record.kind.value, record.id, record.title, record.genre,
        str(record.rating), str(record.duration), str(record.extra),
    ])
