import logging
from typing import Iterator, List

from rich import print as rprint
from rich.markup import escape

from data_ingestion import read_media_file
from media import MediaRecord, display_details

logger = logging.getLogger(__name__)


class MediaCatalog:
    """In-memory, ordered collection of media records. Duplicate ids are allowed."""

    def __init__(self, items=None) -> None:
        self._items: List[MediaRecord] = list(items or [])

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[MediaRecord]:
        return iter(list(self._items))

    def load_from_file(self, path) -> int:
        """
        Append every record in `path` to the catalog.

        The file is parsed completely before anything is added, so a bad line
        (InvalidMediaDataError) leaves the catalog exactly as it was.
        Returns the number of records added.
        """
        records = read_media_file(path)
        self._items.extend(records)
        logger.info("Loaded %d media items from %s (catalog size %d)", len(records), path, len(self._items))
        return len(records)

    def add_media(self, item: MediaRecord) -> None:
        self._items.append(item)

    def remove_media(self, item: MediaRecord) -> None:
        """Remove the first entry that is `item` or shares its id and kind; no-op if absent."""
        for i, m in enumerate(self._items):
            if m is item or (m.id == item.id and m.kind is item.kind):
                del self._items[i]
                return

    def search_by_title(self, query: str) -> List[MediaRecord]:
        """Case-insensitive substring search; an empty query matches everything."""
        q = (query or "").lower()
        return [m for m in self._items if q in m.title.lower()]

    def get_media_by_genre(self, genre: str) -> List[MediaRecord]:
        g = (genre or "").lower()
        return [m for m in self._items if m.genre.lower() == g]

    def sort_media(self) -> None:
        self._items.sort()

    def get_all_media(self) -> List[MediaRecord]:
        return list(self._items)

    def display_all(self) -> None:
        for m in self._items:
            rprint(escape(display_details(m)))
