"""
Route for adding a book by an existing author in an existing genre.
"""
import logging
from fastapi import APIRouter
from pydantic import BaseModel

from api.responses import error_response, success_response
from db import SessionLocal
from domain.models import NotFoundError, ValidationError
from services.book_catalog import BookCatalog

router = APIRouter()
catalog = BookCatalog(SessionLocal)
logger = logging.getLogger(__name__)


class BookCreate(BaseModel):
    author_family_name: str
    author_first_name: str
    genre_name: str
    title: str


@router.post("")
async def create_book(data: BookCreate):
    """Create a book; summary and ISBN are filled with placeholders."""
    try:
        book = catalog.save_book_of_existing_author_and_genre(
            data.author_family_name,
            data.author_first_name,
            data.genre_name,
            data.title,
        )
    except NotFoundError as e:
        return error_response(e, status_code=404)
    except ValidationError as e:
        return error_response(e, status_code=422)
    except Exception as e:
        logger.exception("create_book: failed to save book %r", data.title)
        return error_response(e, status_code=500)
    return success_response(book.to_dict(), status_code=201)
