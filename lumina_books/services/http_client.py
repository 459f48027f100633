import logging
from typing import Any, Dict, List, Optional

import httpx

from config import settings
from lumina_books.book import Book

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Request failed"


class ApiError(Exception):
    """Kitap API'sine yapılan bir çağrı başarısız olduğunda fırlatılır."""

    def __init__(self, message: str = GENERIC_ERROR_MESSAGE, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_message(response: httpx.Response) -> str:
    """Hata gövdesindeki 'message' alanını döndür, yoksa genel mesajı."""
    try:
        body = response.json()
    except ValueError:
        return GENERIC_ERROR_MESSAGE
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return GENERIC_ERROR_MESSAGE


def _json_or_none(response: httpx.Response) -> Optional[Dict[str, Any]]:
    # Oluşturulan/güncellenen kayıt yalnızca bilgi amaçlıdır; liste her zaman yeniden çekilir
    try:
        return response.json()
    except ValueError:
        return None


class RemoteCollectionClient:
    """Uzak kitap koleksiyonu için CRUD istemcisi (GET/POST/PUT/DELETE /books)"""

    def __init__(self, http_client: Optional[httpx.Client] = None, books_path: Optional[str] = None):
        # Testler bir FastAPI TestClient geçirebilir; o da bir httpx.Client'tır
        self._client = http_client or httpx.Client(
            base_url=settings.api_base_url,
            timeout=settings.api_timeout,
            follow_redirects=True,
        )
        self.books_path = (books_path or settings.books_path).rstrip("/")

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        logger.debug("%s %s", method, path)
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.RequestError as e:
            logger.warning("Kitap API'sine ulaşılamadı: %s", e)
            raise ApiError() from e
        if response.is_error:
            raise ApiError(_error_message(response), response.status_code)
        return response

    def list_books(self) -> List[Book]:
        response = self._request("GET", self.books_path)
        try:
            data: Any = response.json()
            if not isinstance(data, list):
                raise TypeError("books payload is not a list")
            return [Book.from_dict(item) for item in data]
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            raise ApiError("Unexpected response from the books API", response.status_code) from e

    def create_book(self, payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return _json_or_none(self._request("POST", self.books_path, json=payload))

    def update_book(self, book_id: Any, payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return _json_or_none(self._request("PUT", f"{self.books_path}/{book_id}", json=payload))

    def delete_book(self, book_id: Any) -> None:
        self._request("DELETE", f"{self.books_path}/{book_id}")

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    def close(self) -> None:
        """HTTP istemcisini kapat"""
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
