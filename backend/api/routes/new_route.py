"""
Book listing route with titles and author names only.
"""
import logging
from fastapi import APIRouter

from api.responses import error_response, success_response
from db import SessionLocal
from services.book_catalog import BookCatalog

router = APIRouter()
catalog = BookCatalog(SessionLocal)
logger = logging.getLogger(__name__)


@router.get("/new-endpoint")
async def new_endpoint():
    """Return every book with its title and its author's name."""
    try:
        books = catalog.get_books_with_authors()
    except Exception as e:
        logger.exception("new-endpoint: failed to fetch books")
        return error_response(e, status_code=500)
    return success_response(books)
