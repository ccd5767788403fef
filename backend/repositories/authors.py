"""
Author repository backed by SQLAlchemy.
"""
from typing import Optional
from sqlalchemy.orm import Session

from domain.models import Author, ValidationError
from repositories.models import AuthorORM


def _author_from_orm(orm: AuthorORM) -> Author:
    return Author(
        id=orm.id,
        first_name=orm.first_name,
        family_name=orm.family_name,
        date_of_birth=orm.date_of_birth,
        date_of_death=orm.date_of_death,
    )


class AuthorsRepository:
    """Lookup and seeding operations for authors."""

    def get_author_id_by_name(
        self, session: Session, family_name: str, first_name: str
    ) -> Optional[str]:
        row = (
            session.query(AuthorORM.id)
            .filter(AuthorORM.family_name == family_name, AuthorORM.first_name == first_name)
            .first()
        )
        return row[0] if row else None

    def create_author(self, session: Session, author: Author) -> Author:
        missing = [
            name for name in ("first_name", "family_name")
            if not (getattr(author, name) or "").strip()
        ]
        if missing:
            raise ValidationError("Author", missing)
        orm = AuthorORM(
            first_name=author.first_name,
            family_name=author.family_name,
            date_of_birth=author.date_of_birth,
            date_of_death=author.date_of_death,
        )
        session.add(orm)
        session.commit()
        session.refresh(orm)
        return _author_from_orm(orm)
