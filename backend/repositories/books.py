"""
Book repository backed by SQLAlchemy.
"""
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union
from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload, selectinload

from domain.models import Book
from repositories.authors import _author_from_orm
from repositories.models import BookGenreORM, BookORM

logger = logging.getLogger(__name__)

BOOK_FIELDS = ("title", "author", "summary", "isbn", "genre")

SORT_COLUMNS = {
    "id": BookORM.id,
    "title": BookORM.title,
    "summary": BookORM.summary,
    "isbn": BookORM.isbn,
    "author": BookORM.author_id,
}

_ASCENDING = {1, "1", "asc", "ascending"}
_DESCENDING = {-1, "-1", "desc", "descending"}

Projection = Union[str, Iterable[str]]


def _book_from_orm(orm: BookORM) -> Book:
    return Book(
        id=orm.id,
        title=orm.title,
        author=orm.author_id,
        summary=orm.summary,
        isbn=orm.isbn,
        genre=[link.genre_id for link in orm.genre_links],
    )


def _parse_projection(projection: Optional[Projection]) -> List[str]:
    """
    Return the book fields selected by ``projection``, in schema order.

    A blank projection selects every field. Names prefixed with ``-``
    exclude that field from the full set; inclusions and exclusions
    cannot be mixed.
    """
    names = projection.split() if isinstance(projection, str) else list(projection or [])
    if not names:
        return list(BOOK_FIELDS)
    excluded = [n[1:] for n in names if n.startswith("-")]
    included = [n for n in names if not n.startswith("-")]
    if excluded and included:
        raise ValueError("Projection cannot mix inclusion and exclusion")
    unknown = [n for n in (excluded or included) if n not in BOOK_FIELDS and n != "id"]
    if unknown:
        logger.debug("Ignoring unknown projection fields: %s", unknown)
    if excluded:
        return [f for f in BOOK_FIELDS if f not in excluded]
    return [f for f in BOOK_FIELDS if f in included]


def _sort_direction(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"Invalid sort direction: {value!r}")
    key = value.lower() if isinstance(value, str) else value
    if key in _ASCENDING:
        return 1
    if key in _DESCENDING:
        return -1
    raise ValueError(f"Invalid sort direction: {value!r}")


def _project(orm: BookORM, fields: List[str]) -> Dict[str, Any]:
    doc: Dict[str, Any] = {"id": orm.id}
    for name in fields:
        if name == "author":
            doc["author"] = _author_from_orm(orm.author).to_dict() if orm.author else None
        elif name == "genre":
            doc["genre"] = [link.genre_id for link in orm.genre_links]
        else:
            doc[name] = getattr(orm, name)
    return doc


class BooksRepository:
    """Persistence and query operations for books."""

    def create_book(self, session: Session, book: Book) -> Book:
        book.validate()
        orm = BookORM(
            title=book.title,
            author_id=book.author,
            summary=book.summary,
            isbn=book.isbn,
            genre_links=[
                BookGenreORM(position=i, genre_id=genre_id)
                for i, genre_id in enumerate(book.genre)
            ],
        )
        session.add(orm)
        session.commit()
        session.refresh(orm)
        return _book_from_orm(orm)

    def list_books_with_author_names(self, session: Session) -> List[Dict[str, Any]]:
        books = (
            session.query(BookORM)
            .options(joinedload(BookORM.author))
            .order_by(BookORM.seq)
            .all()
        )
        return [
            {
                "id": b.id,
                "title": b.title,
                "author": {"id": b.author.id, "name": _author_from_orm(b.author).name}
                if b.author
                else None,
            }
            for b in books
        ]

    def list_books(
        self,
        session: Session,
        projection: Optional[Projection] = None,
        sort: Optional[Mapping[str, Any]] = None,
    ) -> List[Dict[str, Any]]:
        fields = _parse_projection(projection)
        query = session.query(BookORM)
        if "author" in fields:
            query = query.options(joinedload(BookORM.author))
        if "genre" in fields:
            query = query.options(selectinload(BookORM.genre_links))

        order_by = []
        for name, direction in (sort or {}).items():
            column = SORT_COLUMNS.get(name)
            if column is None:
                logger.debug("Ignoring unknown sort field: %s", name)
                continue
            order_by.append(column.asc() if _sort_direction(direction) > 0 else column.desc())
        order_by.append(BookORM.seq)

        return [_project(b, fields) for b in query.order_by(*order_by).all()]

    def count_books(self, session: Session, filters: Optional[Mapping[str, Any]] = None) -> int:
        query = session.query(func.count(BookORM.seq))
        for name, value in (filters or {}).items():
            if name == "genre":
                query = query.filter(BookORM.genre_links.any(BookGenreORM.genre_id == value))
            elif name == "author":
                query = query.filter(BookORM.author_id == value)
            elif name in ("id", "title", "summary", "isbn"):
                query = query.filter(getattr(BookORM, name) == value)
            else:
                logger.debug("Ignoring unknown filter field: %s", name)
        return query.scalar() or 0
