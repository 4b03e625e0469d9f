import pytest
import rich

from catalog import MediaCatalog
from media import movie, series, documentary
from scoring import RecommendationEngine
from state import AppState
from user import User

SAMPLE_CATALOG = """\
Movie,M1,Inception,Sci-Fi,8.8,148,Christopher Nolan
Series,S1,Breaking Bad,Drama,9.5,47,5
Documentary,D1,Planet Earth,Nature,9.4,50,Wildlife
Movie,M2,Interstellar,Sci-Fi,8.6,169,Christopher Nolan
Movie,M3,The Matrix,Sci-Fi,8.7,136,Lana Wachowski
"""


@pytest.fixture
def catalog_file(tmp_path):
    p = tmp_path / "media_data.txt"
    p.write_text(SAMPLE_CATALOG, encoding="utf-8")
    return p


@pytest.fixture
def catalog(catalog_file):
    c = MediaCatalog()
    c.load_from_file(catalog_file)
    return c


@pytest.fixture
def engine():
    return RecommendationEngine()


@pytest.fixture
def user():
    return User("User1", "alice")


@pytest.fixture
def mixed_records():
    return [
        movie("M1", "Inception", "Sci-Fi", 8.8, 148, "Christopher Nolan"),
        series("S1", "Breaking Bad", "Drama", 9.5, 47, 5),
        documentary("D1", "Planet Earth", "Nature", 9.4, 50, "Wildlife"),
    ]


@pytest.fixture
def state(tmp_path):
    return AppState(data_dir=tmp_path)


@pytest.fixture(autouse=True, scope="session")
def wide_console():
    # keep rich from wrapping table cells when output is captured
    rich.reconfigure(width=200)
