import logging
from functools import wraps
from typing import Any, Optional, Tuple

from lumina_books.book import Book, BookDraft
from lumina_books.services.http_client import ApiError, RemoteCollectionClient

logger = logging.getLogger(__name__)


# Veri değiştiren işlemler için yardımcı dekoratör
def refresh_after(func):
    """Başarılı her değişiklikten sonra listeyi sunucudan yeniden çek."""
    @wraps(func)
    def wrapper(self, *args, **kwargs):
        result = func(self, *args, **kwargs)
        self.refresh()
        return result
    return wrapper


class CollectionStore:
    """Sunucuyla eşitlenen yerel kitap listesini tutar.

    The list is only ever replaced as a whole with what the server returns;
    mutations never patch it locally.
    """

    def __init__(self, client: RemoteCollectionClient) -> None:
        self.client = client
        self._books: Tuple[Book, ...] = ()
        self.last_error: Optional[ApiError] = None

    @property
    def books(self) -> Tuple[Book, ...]:
        return self._books

    def find(self, book_id: Any) -> Optional[Book]:
        for book in self._books:
            if str(book.id) == str(book_id):
                return book
        return None

    def refresh(self) -> bool:
        """Tüm koleksiyonu getir; hata olursa önceki liste korunur."""
        try:
            books = self.client.list_books()
        except ApiError as e:
            # Kullanıcıya gösterilmez, yalnızca tanılama için kaydedilir
            self.last_error = e
            logger.error("Kitaplar getirilirken hata: %s", e.message)
            return False
        self._books = tuple(books)
        self.last_error = None
        return True

    @refresh_after
    def create(self, draft: BookDraft) -> None:
        logger.info("Yeni kitap ekleniyor: %s", draft.title)
        self.client.create_book(draft.to_payload())

    @refresh_after
    def update(self, book_id: Any, draft: BookDraft) -> None:
        logger.info("Kitap %s güncelleniyor", book_id)
        self.client.update_book(book_id, draft.to_payload())

    @refresh_after
    def delete(self, book_id: Any) -> None:
        logger.info("Kitap %s siliniyor", book_id)
        self.client.delete_book(book_id)
