from typing import Iterable, Iterator, Sequence

from lumina_books.book import Book


def matches(book: Book, term: str) -> bool:
    """Başlık veya yazar, terimi büyük/küçük harf duyarsız içeriyor mu?"""
    needle = term.lower()
    return needle in book.title.lower() or needle in book.author.lower()


class FilteredBooks(Iterable[Book]):
    """Arama terimine göre süzülmüş, her yinelemede yeniden hesaplanan görünüm."""

    def __init__(self, books: Sequence[Book], term: str = "") -> None:
        self._books = books
        self.term = term or ""

    def __iter__(self) -> Iterator[Book]:
        if not self.term:
            return iter(self._books)
        return (book for book in self._books if matches(book, self.term))

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return any(True for _ in self)


def filter_books(books: Sequence[Book], term: str = "") -> FilteredBooks:
    return FilteredBooks(books, term)
