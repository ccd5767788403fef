"""
SQLAlchemy ORM models for persistence.
"""
import uuid

from sqlalchemy import Column, Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from db import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class AuthorORM(Base):
    __tablename__ = "authors"

    id = Column(String, primary_key=True, index=True, default=_new_id)
    first_name = Column(String, nullable=False)
    family_name = Column(String, nullable=False)
    date_of_birth = Column(Date, nullable=True)
    date_of_death = Column(Date, nullable=True)

    books = relationship("BookORM", back_populates="author")


class GenreORM(Base):
    __tablename__ = "genres"

    id = Column(String, primary_key=True, index=True, default=_new_id)
    name = Column(String, nullable=False, index=True)


class BookGenreORM(Base):
    __tablename__ = "book_genres"

    book_id = Column(String, ForeignKey("books.id", ondelete="CASCADE"), primary_key=True)
    position = Column(Integer, primary_key=True, autoincrement=False)
    genre_id = Column(String, ForeignKey("genres.id"), nullable=False)


class BookORM(Base):
    __tablename__ = "books"

    # seq keeps insertion order for unsorted reads
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, index=True, nullable=False, default=_new_id)
    title = Column(String, nullable=False)
    author_id = Column(String, ForeignKey("authors.id"), nullable=False, index=True)
    summary = Column(Text, nullable=False)
    isbn = Column(String, nullable=False)

    author = relationship("AuthorORM", back_populates="books")
    genre_links = relationship(
        "BookGenreORM",
        order_by=BookGenreORM.position,
        cascade="all, delete-orphan",
    )
