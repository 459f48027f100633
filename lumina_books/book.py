from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


EDITABLE_FIELDS = ("title", "author", "published_year")


class Book:
    """Sunucudan gelen tek bir kitap kaydını temsil eder."""

    def __init__(self, id: Any, title: str, author: str, published_year: Any = None) -> None:
        self.id = id
        self.title = title
        self.author = author
        self.published_year = published_year

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self.title} by {self.author} ({self.published_year})"

    def __repr__(self) -> str:
        return f"Book(id={self.id!r}, title={self.title!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(str(self.id))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "published_year": self.published_year,
        }

    @staticmethod
    def from_dict(data: dict) -> "Book":
        # Eksik metin alanları aramayı bozmasın diye boş dizeye normalleştirilir
        return Book(
            id=data["id"],
            title=data.get("title") or "",
            author=data.get("author") or "",
            published_year=data.get("published_year"),
        )


@dataclass
class BookDraft:
    """Form alanlarının henüz gönderilmemiş değerleri."""

    title: str = ""
    author: str = ""
    published_year: str = ""
    # Düzenlenen kaydın sunucudaki yıl değeri; karşılaştırmaya katılmaz
    stored_year: Any = field(default=None, compare=False, repr=False)

    @classmethod
    def from_book(cls, book: Book) -> "BookDraft":
        year = "" if book.published_year is None else str(book.published_year)
        return cls(title=book.title, author=book.author, published_year=year, stored_year=book.published_year)

    def is_empty(self) -> bool:
        return not (self.title or self.author or self.published_year)

    def to_payload(self) -> dict:
        """Build the JSON body sent on create and update.

        The year is sent exactly as typed. When the form still shows the
        edited record's own year, the stored value goes back unchanged, so an
        edit without changes leaves the record as it was.
        """
        year: Any = self.published_year
        if self.stored_year is not None and year == str(self.stored_year):
            year = self.stored_year
        return {"title": self.title, "author": self.author, "published_year": year}
