import logging
from unittest.mock import MagicMock

import pytest

from lumina_books.book import Book, BookDraft
from lumina_books.services.http_client import ApiError
from lumina_books.store import CollectionStore


def _server_books(api):
    return [Book.from_dict(b) for b in api.books]


@pytest.fixture
def store(client):
    s = CollectionStore(client)
    s.refresh()
    return s


def test_refresh_replaces_whole_collection(api, store):
    assert list(store.books) == _server_books(api)

    # Sunucu tarafında yapılan değişiklik bir sonraki yenilemede görünür
    api.books.append({"id": 9, "title": "Emma", "author": "Austen", "published_year": 1815})
    assert store.refresh() is True
    assert list(store.books) == _server_books(api)


def test_collection_matches_server_after_every_mutation(api, store):
    store.create(BookDraft("Foo", "Bar", "2020"))
    assert list(store.books) == _server_books(api)

    new_id = api.books[-1]["id"]
    store.update(new_id, BookDraft("Foo", "Baz", "2021"))
    assert list(store.books) == _server_books(api)
    assert store.find(new_id).author == "Baz"

    store.delete(1)
    assert list(store.books) == _server_books(api)
    assert store.find(1) is None


def test_mutation_refreshes_exactly_once(api, store):
    gets_before = api.count("GET")
    store.create(BookDraft("Foo", "Bar", "2020"))
    assert api.count("GET") == gets_before + 1


def test_failed_mutation_does_not_refresh(api, store):
    gets_before = api.count("GET")
    with pytest.raises(ApiError, match="Title required"):
        store.create(BookDraft("", "Bar", "2020"))
    assert api.count("GET") == gets_before


def test_failed_refresh_keeps_stale_list_and_logs(api, store, caplog):
    stale = store.books
    api.books.clear()
    api.fail_list = True

    with caplog.at_level(logging.ERROR, logger="lumina_books.store"):
        assert store.refresh() is False

    assert store.books == stale
    assert store.last_error.message == "database offline"
    assert "database offline" in caplog.text


def test_successful_refresh_clears_last_error(api, store):
    api.fail_list = True
    store.refresh()
    api.fail_list = False
    assert store.refresh() is True
    assert store.last_error is None


def test_refresh_never_patches_locally():
    client = MagicMock()
    client.list_books.side_effect = [
        [Book(1, "Dune", "Herbert", 1965)],
        [Book(2, "Server Says", "Something Else", 2000)],
    ]
    store = CollectionStore(client)
    store.refresh()

    store.create(BookDraft("Foo", "Bar", "2020"))

    client.create_book.assert_called_once_with({"title": "Foo", "author": "Bar", "published_year": "2020"})
    assert list(store.books) == [Book(2, "Server Says", "Something Else", 2000)]


def test_find_compares_ids_as_text(store):
    assert store.find("1") is store.find(1)
    assert store.find("404") is None
