"""Seed the catalog with a few authors, genres and books.

Usage:
    python -m scripts.seed_catalog          (from backend/)

Existing authors and genres are reused, so the script can be run more than
once; each run adds the sample books again.
"""

from __future__ import annotations

import logging
import sys
from typing import List, Tuple

from db import SessionLocal, init_db
from domain.models import Author, Genre, NotFoundError
from repositories import AuthorsRepository, GenresRepository
from services.book_catalog import BookCatalog

LOG = logging.getLogger("seed_catalog")

AUTHORS: List[Tuple[str, str]] = [
    ("Rothfuss", "Patrick"),
    ("Asimov", "Isaac"),
    ("Doe", "Jane"),
]
GENRES = ["Fantasy", "Science Fiction", "Fiction"]
BOOKS: List[Tuple[str, str, str, str]] = [
    ("Rothfuss", "Patrick", "Fantasy", "The Name of the Wind"),
    ("Rothfuss", "Patrick", "Fantasy", "The Wise Man's Fear"),
    ("Asimov", "Isaac", "Science Fiction", "Foundation"),
    ("Doe", "Jane", "Fiction", "My Book"),
]


def seed_collaborators() -> None:
    authors_repo = AuthorsRepository()
    genres_repo = GenresRepository()
    with SessionLocal() as session:
        for family_name, first_name in AUTHORS:
            if authors_repo.get_author_id_by_name(session, family_name, first_name) is None:
                authors_repo.create_author(session, Author(first_name=first_name, family_name=family_name))
                LOG.info("Added author %s, %s", family_name, first_name)
        for name in GENRES:
            if genres_repo.get_genre_id_by_name(session, name) is None:
                genres_repo.create_genre(session, Genre(name=name))
                LOG.info("Added genre %s", name)


def main():
    logging.basicConfig(level=logging.INFO)
    init_db()
    seed_collaborators()

    catalog = BookCatalog(SessionLocal)
    for family_name, first_name, genre_name, title in BOOKS:
        try:
            catalog.save_book_of_existing_author_and_genre(family_name, first_name, genre_name, title)
        except NotFoundError:
            LOG.exception("Failed to seed %r", title)
            sys.exit(2)
    print(f"Books in catalog: {catalog.get_book_count()}")


if __name__ == "__main__":
    main()
