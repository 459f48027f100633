import os
from typing import Any, Dict, List, Optional

import pytest
from fastapi import Body, FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.testclient import TestClient

import main
from lumina_books.controller import LibraryController
from lumina_books.services.http_client import RemoteCollectionClient
from lumina_books.utils.ui_helpers import OUTPUT_MODE_ENV, print_error


class FakeBooksApi:
    """Testlerde uzak sunucunun yerine geçen bellek içi kitap API'si."""

    def __init__(self, books: Optional[List[Dict[str, Any]]] = None) -> None:
        self.books: List[Dict[str, Any]] = [dict(b) for b in (books or [])]
        self._next_id = max((b["id"] for b in self.books), default=0) + 1
        self.calls: List[tuple] = []
        # Testler bu bayrakları açarak sunucu hatalarını taklit eder
        self.fail_list = False
        self.fail_with: Optional[Dict[str, Any]] = None
        self.app = self._build_app()

    def count(self, method: str) -> int:
        return sum(1 for m, _ in self.calls if m == method)

    def _forced_error(self) -> Optional[JSONResponse]:
        if self.fail_with is None:
            return None
        return JSONResponse(status_code=self.fail_with.get("status", 400), content=self.fail_with.get("body"))

    def _validate(self, payload: Dict[str, Any]) -> Optional[JSONResponse]:
        forced = self._forced_error()
        if forced is not None:
            return forced
        if not payload.get("title"):
            return JSONResponse(status_code=400, content={"message": "Title required"})
        return None

    def _build_app(self) -> FastAPI:
        app = FastAPI()

        @app.middleware("http")
        async def record_calls(request: Request, call_next):
            self.calls.append((request.method, request.url.path))
            return await call_next(request)

        @app.get("/books")
        def list_books():
            if self.fail_list:
                return JSONResponse(status_code=500, content={"message": "database offline"})
            return self.books

        @app.post("/books")
        def create_book(payload: Dict[str, Any] = Body(...)):
            error = self._validate(payload)
            if error is not None:
                return error
            book = {"id": self._next_id, **payload}
            self._next_id += 1
            self.books.append(book)
            return book

        @app.put("/books/{book_id}")
        def update_book(book_id: int, payload: Dict[str, Any] = Body(...)):
            error = self._validate(payload)
            if error is not None:
                return error
            for book in self.books:
                if book["id"] == book_id:
                    book.update(payload)
                    return book
            return JSONResponse(status_code=404, content={"message": "Book not found"})

        @app.delete("/books/{book_id}")
        def delete_book(book_id: int):
            forced = self._forced_error()
            if forced is not None:
                return forced
            before = len(self.books)
            self.books = [b for b in self.books if b["id"] != book_id]
            if len(self.books) == before:
                return JSONResponse(status_code=404, content={"message": "Book not found"})
            return {"message": "deleted"}

        return app


DUNE = {"id": 1, "title": "Dune", "author": "Herbert", "published_year": 1965}


@pytest.fixture
def api():
    return FakeBooksApi([DUNE])


@pytest.fixture
def client(api):
    with TestClient(api.app) as test_client:
        yield RemoteCollectionClient(http_client=test_client)


@pytest.fixture
def errors():
    return []


@pytest.fixture
def confirm_answer():
    # Testler listeyi değiştirerek onay kapısının cevabını belirler
    return [True]


@pytest.fixture
def controller(client, errors, confirm_answer):
    ctrl = LibraryController(
        client=client,
        on_error=errors.append,
        confirm=lambda prompt: confirm_answer[0],
        toast_seconds=3,
    )
    ctrl.load()
    return ctrl


@pytest.fixture
def cli_controller(client, confirm_answer):
    # CLI komutları tekil örneği kullanır; hatalar gerçek CLI gibi panelde gösterilir
    controller = LibraryController(
        client=client,
        on_error=print_error,
        confirm=lambda prompt: confirm_answer[0],
        toast_seconds=3,
    )
    controller.load()
    main.ControllerManager._instance = controller
    yield controller
    main.ControllerManager.reset()
    os.environ.pop(OUTPUT_MODE_ENV, None)
