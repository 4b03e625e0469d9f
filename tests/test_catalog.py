import pytest

from catalog import MediaCatalog
from errors import InvalidMediaDataError, ValidationError
from media import MediaKind, movie

GOOD_LINES = [
    "Movie,M1,Inception,Sci-Fi,8.8,148,Christopher Nolan",
    "Series,S1,Breaking Bad,Drama,9.5,47,5",
    "Documentary,D1,Planet Earth,Nature,9.4,50,Wildlife",
    "Movie,M2,Interstellar,Sci-Fi,8.6,169,Christopher Nolan",
    "Movie,M3,The Matrix,Sci-Fi,8.7,136,Lana Wachowski",
]


def _write(tmp_path, lines, name="catalog.txt"):
    p = tmp_path / name
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return p


def _load_error(tmp_path, lines) -> InvalidMediaDataError:
    c = MediaCatalog()
    with pytest.raises(InvalidMediaDataError) as exc:
        c.load_from_file(_write(tmp_path, lines))
    assert len(c) == 0
    return exc.value


def test_load_parses_every_kind(catalog):
    items = catalog.get_all_media()
    assert [m.id for m in items] == ["M1", "S1", "D1", "M2", "M3"]
    assert [m.kind for m in items[:3]] == [MediaKind.MOVIE, MediaKind.SERIES, MediaKind.DOCUMENTARY]
    assert items[1].season_count == 5
    assert items[2].subject == "Wildlife"
    assert items[0].director == "Christopher Nolan"


def test_load_returns_count_and_is_additive(tmp_path, catalog_file):
    c = MediaCatalog()
    assert c.load_from_file(catalog_file) == 5
    assert c.load_from_file(_write(tmp_path, ["Movie,M9,Heat,Crime,8.3,170,Michael Mann"], "more.txt")) == 1
    assert len(c) == 6
    assert c.get_all_media()[-1].title == "Heat"


def test_fields_are_trimmed_and_blank_lines_skipped(tmp_path):
    p = _write(tmp_path, ["", "  Movie , M1 ,  Inception , Sci-Fi , 8.8 , 148 , Nolan  ", "   "])
    c = MediaCatalog()
    c.load_from_file(p)
    (m,) = c.get_all_media()
    assert (m.id, m.title, m.genre, m.rating, m.duration, m.director) == (
        "M1", "Inception", "Sci-Fi", 8.8, 148, "Nolan")


def test_malformed_line_three_aborts_whole_load(tmp_path):
    lines = list(GOOD_LINES)
    lines[2] = "Documentary,D1,Planet Earth,Nature,not-a-number,50,Wildlife"
    err = _load_error(tmp_path, lines)
    assert err.line_number == 3
    assert "Line 3" in str(err)
    assert isinstance(err.__cause__, ValueError)


def test_failed_load_keeps_prior_contents(tmp_path, catalog):
    bad = _write(tmp_path, ["Movie,M9,Heat,Crime,8.3,170,Michael Mann", "Podcast,P1,Talk,Chat,5,30,x"], "bad.txt")
    before = catalog.get_all_media()
    with pytest.raises(InvalidMediaDataError):
        catalog.load_from_file(bad)
    assert catalog.get_all_media() == before


def test_too_few_fields(tmp_path):
    err = _load_error(tmp_path, ["Movie,M1,Inception,Sci-Fi,8.8"])
    assert err.line_number == 1
    assert "at least 6" in str(err)


def test_trailing_empty_fields_do_not_count(tmp_path):
    err = _load_error(tmp_path, ["Movie,M1,Inception,Sci-Fi,8.8,,,"])
    assert "at least 6" in str(err)


@pytest.mark.parametrize("type_name", ["Series", "Movie", "Documentary"])
def test_known_type_missing_extra_field(tmp_path, type_name):
    err = _load_error(tmp_path, [f"{type_name},X1,Title,Genre,7.0,90"])
    assert f"{type_name} requires 7 fields" in str(err)


@pytest.mark.parametrize("type_name", ["movie", "Podcast", "SERIES"])
def test_unknown_type_is_named(tmp_path, type_name):
    err = _load_error(tmp_path, GOOD_LINES[:1] + [f"{type_name},X1,Title,Genre,7.0,90,x"])
    assert err.line_number == 2
    assert f"'{type_name}'" in str(err)


@pytest.mark.parametrize("line", [
    "Movie,M1,Inception,Sci-Fi,8.8,long,Nolan",
    "Series,S1,Breaking Bad,Drama,9.5,47,five",
    "Movie,M1,Inception,Sci-Fi,eight,148,Nolan",
])
def test_bad_numbers_wrap_the_parse_error(tmp_path, line):
    err = _load_error(tmp_path, [line])
    assert "Invalid number format" in str(err)
    assert isinstance(err.__cause__, ValueError)


def test_out_of_range_rating(tmp_path):
    err = _load_error(tmp_path, ["Movie,M1,Inception,Sci-Fi,10.5,148,Nolan"])
    assert isinstance(err.__cause__, ValidationError)
    assert err.line_number == 1


def test_missing_file_is_reported_as_invalid_media_data(tmp_path):
    c = MediaCatalog()
    missing = tmp_path / "nope.txt"
    with pytest.raises(InvalidMediaDataError) as exc:
        c.load_from_file(missing)
    assert exc.value.line_number is None
    assert "nope.txt" in str(exc.value)
    assert isinstance(exc.value.__cause__, OSError)


def test_undecodable_file(tmp_path):
    p = tmp_path / "binary.txt"
    p.write_bytes(b"Movie,M1,\xff\xfe,Sci-Fi,8.8,148,Nolan\n")
    with pytest.raises(InvalidMediaDataError):
        MediaCatalog().load_from_file(p)


def test_extra_fields_beyond_seven_are_ignored(tmp_path):
    c = MediaCatalog()
    c.load_from_file(_write(tmp_path, ["Movie,M1,Inception,Sci-Fi,8.8,148,Nolan,2010,extra"]))
    assert c.get_all_media()[0].director == "Nolan"


def test_empty_search_returns_everything_in_order(catalog):
    assert catalog.search_by_title("") == catalog.get_all_media()


def test_search_is_case_insensitive_substring(catalog):
    assert [m.id for m in catalog.search_by_title("IN")] == ["M1", "S1", "M2"]
    assert catalog.search_by_title("zzz") == []


def test_genre_is_case_insensitive_exact(catalog):
    assert [m.id for m in catalog.get_media_by_genre("sci-fi")] == ["M1", "M2", "M3"]
    assert catalog.get_media_by_genre("sci") == []


def test_sort_media_orders_by_title(catalog):
    catalog.sort_media()
    assert [m.title for m in catalog.get_all_media()] == [
        "Breaking Bad", "Inception", "Interstellar", "Planet Earth", "The Matrix"]


def test_get_all_media_is_a_copy(catalog):
    catalog.get_all_media().clear()
    assert len(catalog) == 5


def test_duplicate_ids_are_allowed():
    c = MediaCatalog()
    c.add_media(movie("M1", "Inception", "Sci-Fi", 8.8, 148, "Nolan"))
    c.add_media(movie("M1", "Inception", "Sci-Fi", 8.8, 148, "Nolan"))
    assert len(c) == 2


def test_remove_media(catalog):
    target = catalog.get_all_media()[1]
    catalog.remove_media(target)
    assert "S1" not in [m.id for m in catalog]
    catalog.remove_media(target)
    catalog.remove_media(movie("X", "Missing", "None", 1, 1, "Nobody"))
    assert len(catalog) == 4


def test_remove_media_by_id_and_kind(catalog):
    catalog.remove_media(movie("M2", "Other title", "Other", 1, 1, "Someone"))
    assert [m.id for m in catalog] == ["M1", "S1", "D1", "M3"]


def test_display_all_prints_details(catalog, capsys):
    catalog.display_all()
    out = capsys.readouterr().out
    assert "Seasons" in out
    assert "Wildlife" in out
    assert out.index("Inception") < out.index("Breaking Bad")
