import logging
import time
from typing import Any, Callable, Optional

from config import settings
from lumina_books.projection import FilteredBooks, filter_books
from lumina_books.services.http_client import ApiError, RemoteCollectionClient
from lumina_books.session import EditingSession
from lumina_books.store import CollectionStore
from lumina_books.utils.validators import DraftValidationError, validate_draft

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Are you sure you want to remove this book?"

ErrorChannel = Callable[[str], None]
ConfirmGate = Callable[[str], bool]


class Notification:
    """Belirli bir süre görünür kalan başarı mesajı."""

    def __init__(self, duration: float, clock: Callable[[], float] = time.monotonic) -> None:
        self.duration = duration
        self._clock = clock
        self._message: Optional[str] = None
        self._expires_at = 0.0

    def show(self, message: str) -> None:
        # Yeni mesaj öncekinin yerini alır ve süre baştan başlar
        self._message = message
        self._expires_at = self._clock() + self.duration

    @property
    def message(self) -> Optional[str]:
        if self._message is not None and self._clock() >= self._expires_at:
            self._message = None
        return self._message


class LibraryController:
    """Uygulama durumunun tek sahibi.

    Holds the collection store, the editing session, the search term and the
    transient notification. The view layer reads from it and calls these
    methods; it never mutates the store or the session directly.

    ``on_error`` receives user-facing error messages; ``confirm`` is the yes/no
    gate asked before a delete.
    """

    def __init__(
        self,
        client: Optional[RemoteCollectionClient] = None,
        on_error: Optional[ErrorChannel] = None,
        confirm: Optional[ConfirmGate] = None,
        toast_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.store = CollectionStore(client or RemoteCollectionClient())
        self.session = EditingSession()
        self.search_term = ""
        self.notification = Notification(
            settings.toast_seconds if toast_seconds is None else toast_seconds, clock
        )
        self._on_error = on_error or (lambda message: logger.error("Error: %s", message))
        # Onay kapısı verilmezse silme işlemi hiçbir zaman onaylanmaz
        self._confirm = confirm or (lambda prompt: False)

    # ------------------------- Collection ------------------------- #
    def load(self) -> bool:
        """Başlangıçta koleksiyonu getir."""
        return self.store.refresh()

    def refresh(self) -> bool:
        return self.store.refresh()

    def close(self) -> None:
        """Uzak istemcinin bağlantı havuzunu kapat."""
        self.store.client.close()

    def set_search(self, term: Optional[str]) -> None:
        self.search_term = term or ""

    def visible_books(self) -> FilteredBooks:
        return filter_books(self.store.books, self.search_term)

    # ------------------------- Editing session ------------------------- #
    def start_create(self) -> None:
        self.session.start_create()

    def start_edit(self, book_id: Any) -> bool:
        book = self.store.find(book_id)
        if book is None:
            return False
        self.session.start_edit(book)
        return True

    def cancel_edit(self) -> None:
        self.session.cancel()

    def update_field(self, name: str, value: str) -> None:
        self.session.update_field(name, value)

    def submit(self) -> bool:
        """Taslağı oluştur veya güncelle; hata olursa oturum olduğu gibi kalır."""
        session = self.session
        try:
            validate_draft(session.draft)
            if session.is_editing:
                self.store.update(session.target_id, session.draft)
                message = "Book updated successfully!"
            else:
                self.store.create(session.draft)
                message = "New book added!"
        except DraftValidationError as e:
            self._on_error(str(e))
            return False
        except ApiError as e:
            logger.warning("Kaydetme başarısız: %s", e.message)
            self._on_error(e.message)
            return False
        self.notification.show(message)
        session.start_create()
        return True

    def delete(self, book_id: Any, confirm: Optional[ConfirmGate] = None) -> bool:
        """Onay alındıktan sonra kitabı sil.

        ``confirm`` overrides the injected gate for this call only.
        """
        # Silinmiş olabilecek bir kaydın düzenlemesi asla gönderilmemeli
        self.session.start_create()
        if not (confirm or self._confirm)(DELETE_PROMPT):
            logger.debug("Kitap %s silme işlemi iptal edildi", book_id)
            return False
        try:
            self.store.delete(book_id)
        except ApiError as e:
            logger.warning("Silme başarısız: %s", e.message)
            self._on_error(e.message)
            return False
        self.notification.show("Book removed.")
        return True
