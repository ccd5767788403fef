import sys
from pathlib import Path

import pytest
from sqlalchemy.pool import StaticPool

# Ensure the backend package root is on sys.path for direct pytest runs
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from db import init_db, make_engine, make_session_factory  # noqa: E402
from domain.models import Author, Genre  # noqa: E402
from repositories import AuthorsRepository, GenresRepository  # noqa: E402


@pytest.fixture
def engine():
    # one shared in-memory connection per test
    eng = make_engine("sqlite://", poolclass=StaticPool)
    init_db(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def seeded(session_factory):
    """Author Jane Doe plus the Fiction and Poetry genres."""
    authors_repo = AuthorsRepository()
    genres_repo = GenresRepository()
    with session_factory() as session:
        jane = authors_repo.create_author(session, Author(first_name="Jane", family_name="Doe"))
        fiction = genres_repo.create_genre(session, Genre(name="Fiction"))
        poetry = genres_repo.create_genre(session, Genre(name="Poetry"))
    return {"author": jane, "fiction": fiction, "poetry": poetry}
