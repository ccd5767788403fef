"""
Core domain models for the library catalog.
These are framework-agnostic and can be used across all services.
"""
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional


class ValidationError(ValueError):
    """A record is missing one or more required fields."""

    def __init__(self, entity: str, missing_fields: List[str]):
        self.entity = entity
        self.missing_fields = list(missing_fields)
        super().__init__(
            f"{entity} validation failed: missing required field(s) {', '.join(self.missing_fields)}"
        )


class NotFoundError(LookupError):
    """A name did not resolve to a stored record."""

    def __str__(self) -> str:
        return self.args[0] if self.args else "Not found"


def _is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


@dataclass
class Author:
    """A book author, identified by family name + first name."""
    first_name: str
    family_name: str
    date_of_birth: Optional[date] = None
    date_of_death: Optional[date] = None
    id: Optional[str] = None

    @property
    def name(self) -> str:
        return f"{self.family_name}, {self.first_name}"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "first_name": self.first_name,
            "family_name": self.family_name,
            "name": self.name,
            "date_of_birth": self.date_of_birth.isoformat() if self.date_of_birth else None,
            "date_of_death": self.date_of_death.isoformat() if self.date_of_death else None,
        }


@dataclass
class Genre:
    """A genre, identified by name."""
    name: str
    id: Optional[str] = None


@dataclass
class Book:
    """
    A catalog record.

    ``author`` holds the referenced Author's id and ``genre`` the ordered
    list of referenced Genre ids. ``id`` stays None until the record is
    persisted; the store assigns it.
    """
    title: Optional[str] = None
    author: Optional[str] = None
    summary: Optional[str] = None
    isbn: Optional[str] = None
    genre: List[str] = field(default_factory=list)
    id: Optional[str] = None

    REQUIRED_FIELDS = ("title", "author", "summary", "isbn")

    def missing_fields(self) -> List[str]:
        return [name for name in self.REQUIRED_FIELDS if _is_blank(getattr(self, name))]

    def validate(self) -> None:
        """Raise ValidationError if any required field is missing."""
        missing = self.missing_fields()
        if missing:
            raise ValidationError("Book", missing)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "summary": self.summary,
            "isbn": self.isbn,
            "genre": list(self.genre),
        }
