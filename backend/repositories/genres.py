"""
Genre repository backed by SQLAlchemy.
"""
from typing import Optional
from sqlalchemy.orm import Session

from domain.models import Genre, ValidationError
from repositories.models import GenreORM


class GenresRepository:
    """Lookup and seeding operations for genres."""

    def get_genre_id_by_name(self, session: Session, name: str) -> Optional[str]:
        row = session.query(GenreORM.id).filter(GenreORM.name == name).first()
        return row[0] if row else None

    def create_genre(self, session: Session, genre: Genre) -> Genre:
        if not (genre.name or "").strip():
            raise ValidationError("Genre", ["name"])
        orm = GenreORM(name=genre.name)
        session.add(orm)
        session.commit()
        session.refresh(orm)
        return Genre(id=orm.id, name=orm.name)
