from enum import Enum
from typing import Any, Optional

from lumina_books.book import EDITABLE_FIELDS, Book, BookDraft


class SessionMode(Enum):
    CREATING = "creating"
    EDITING = "editing"


class EditingSession:
    """Oluşturma/düzenleme formunun geçici durumu."""

    def __init__(self) -> None:
        self.mode = SessionMode.CREATING
        self.target_id: Optional[Any] = None
        self.draft = BookDraft()

    @property
    def is_editing(self) -> bool:
        return self.mode is SessionMode.EDITING

    @property
    def heading(self) -> str:
        return "Update Details" if self.is_editing else "Add to Library"

    @property
    def submit_label(self) -> str:
        return "Save Changes" if self.is_editing else "Create Entry"

    def start_create(self) -> None:
        self.mode = SessionMode.CREATING
        self.target_id = None
        self.draft = BookDraft()

    def start_edit(self, book: Book) -> None:
        # Tekrar çağrılırsa taslak birleştirilmez, tamamen üzerine yazılır
        self.mode = SessionMode.EDITING
        self.target_id = book.id
        self.draft = BookDraft.from_book(book)

    def update_field(self, name: str, value: str) -> None:
        if name not in EDITABLE_FIELDS:
            raise ValueError(f"Unknown field: {name}")
        setattr(self.draft, name, value)

    def cancel(self) -> None:
        self.start_create()

    def snapshot(self) -> dict:
        """Return mode, target and draft values; used to compare session states."""
        return {
            "mode": self.mode,
            "target_id": self.target_id,
            **{name: getattr(self.draft, name) for name in EDITABLE_FIELDS},
        }
