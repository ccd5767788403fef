"""
Book catalog service.

Wraps the book repository and the author/genre lookups behind the four
catalog operations. The service owns no connection state of its own: it is
built with a session factory and opens one session per call.
"""
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from sqlalchemy.orm import Session

from domain.models import Book, NotFoundError
from repositories import AuthorsRepository, BooksRepository, GenresRepository
from repositories.books import Projection

logger = logging.getLogger(__name__)

SUMMARY_PLACEHOLDER = "Demo Summary to be updated later"
ISBN_PLACEHOLDER = "ISBN2022"


class BookCatalog:
    """Book operations over an injected session factory."""

    def __init__(
        self,
        session_factory: Callable[[], Session],
        books_repo: Optional[BooksRepository] = None,
        authors_repo: Optional[AuthorsRepository] = None,
        genres_repo: Optional[GenresRepository] = None,
    ):
        self.session_factory = session_factory
        self.books_repo = books_repo or BooksRepository()
        self.authors_repo = authors_repo or AuthorsRepository()
        self.genres_repo = genres_repo or GenresRepository()

    def get_books_with_authors(self) -> List[Dict[str, Any]]:
        """All books with only their title and the author's name."""
        with self.session_factory() as session:
            return self.books_repo.list_books_with_author_names(session)

    def get_all_books_with_authors(
        self, projection: Projection, sort: Optional[Mapping[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        """
        All books restricted to ``projection``, with the author populated.

        Args:
            projection: Space-separated field names, or an iterable of them
            sort: Optional mapping of field name to 1/-1 (or "asc"/"desc")

        Returns:
            List of book mappings; ``id`` is always present
        """
        with self.session_factory() as session:
            return self.books_repo.list_books(session, projection, sort)

    def get_book_count(self, filters: Optional[Mapping[str, Any]] = None) -> int:
        with self.session_factory() as session:
            return self.books_repo.count_books(session, filters)

    def save_book_of_existing_author_and_genre(
        self,
        author_family_name: str,
        author_first_name: str,
        genre_name: str,
        title: str,
    ) -> Book:
        """
        Create a book for an author and a genre that already exist.

        Summary and ISBN are set to fixed placeholders. Both lookups and the
        insert share one session, so nothing is written unless every step
        succeeds.

        Raises:
            NotFoundError: the author or the genre does not exist
            ValidationError: the resulting record is missing a required field
        """
        with self.session_factory() as session:
            author_id = self.authors_repo.get_author_id_by_name(
                session, author_family_name, author_first_name
            )
            genre_id = self.genres_repo.get_genre_id_by_name(session, genre_name)
            if not author_id or not genre_id:
                logger.warning(
                    "Lookup failed for author=%r, %r genre=%r",
                    author_family_name,
                    author_first_name,
                    genre_name,
                )
                raise NotFoundError("Author or genre not found")

            draft = Book(
                title=title,
                summary=SUMMARY_PLACEHOLDER,
                isbn=ISBN_PLACEHOLDER,
                author=author_id,
                genre=[genre_id],
            )
            saved = self.books_repo.create_book(session, draft)
            logger.info("Created book %s (%r) for author %s", saved.id, saved.title, author_id)
            return saved
