"""
Books API routes.
"""
import logging
from typing import Dict, Optional
from fastapi import APIRouter

from api.responses import error_response, success_response
from db import SessionLocal
from services.book_catalog import BookCatalog

router = APIRouter()
catalog = BookCatalog(SessionLocal)
logger = logging.getLogger(__name__)

DEFAULT_FIELDS = "title author"


def parse_sort(sort: Optional[str]) -> Optional[Dict[str, int]]:
    """Turn ``"title,-isbn"`` into ``{"title": 1, "isbn": -1}``."""
    if not sort:
        return None
    spec: Dict[str, int] = {}
    for token in sort.split(","):
        token = token.strip()
        if not token:
            continue
        if token.startswith("-"):
            spec[token[1:]] = -1
        else:
            spec[token.lstrip("+")] = 1
    return spec or None


@router.get("")
async def list_books(fields: str = DEFAULT_FIELDS, sort: Optional[str] = None):
    """List books restricted to ``fields`` with their authors populated."""
    projection = fields.replace(",", " ")
    try:
        books = catalog.get_all_books_with_authors(projection, parse_sort(sort))
    except ValueError as e:
        return error_response(e, status_code=400)
    except Exception as e:
        logger.exception("list_books: failed to fetch books")
        return error_response(e, status_code=500)
    return success_response(books)


@router.get("/count")
async def count_books(
    title: Optional[str] = None,
    isbn: Optional[str] = None,
    author: Optional[str] = None,
    genre: Optional[str] = None,
):
    """Count books, optionally filtered by exact field values."""
    filters = {
        name: value
        for name, value in (("title", title), ("isbn", isbn), ("author", author), ("genre", genre))
        if value is not None
    }
    try:
        count = catalog.get_book_count(filters or None)
    except Exception as e:
        logger.exception("count_books: failed to count books")
        return error_response(e, status_code=500)
    return success_response({"count": count})
