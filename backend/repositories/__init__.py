from .books import BooksRepository
from .authors import AuthorsRepository
from .genres import GenresRepository
from . import models

__all__ = ["BooksRepository", "AuthorsRepository", "GenresRepository", "models"]
