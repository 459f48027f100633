import os
import json
from typing import Iterable, Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

from lumina_books.book import Book

# Environment variable to control CLI output mode
# İzin verilen değerler: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"

EMPTY_TITLE = "No books found in your library."
EMPTY_HINT = "Try adding a new one or changing your search."

_console = Console()


def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in {"plain", "json", "rich"}:
        os.environ[OUTPUT_MODE_ENV] = mode
    # Geçersiz değerler yoksayılır; mevcut varsayılan korunur


def get_output_mode() -> str:
    return os.environ.get(OUTPUT_MODE_ENV, "plain").lower()


def books_table(books: Iterable[Book], title: str = "📚 Books") -> Table:
    table = Table(title=title, show_lines=True, header_style="bold cyan")
    table.add_column("ID", style="magenta", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Author", style="white")
    table.add_column("Published", style="white")
    for b in books:
        year = "" if b.published_year is None else str(b.published_year)
        table.add_row(escape(str(b.id)), escape(b.title), escape(b.author), year)
    return table


def print_list_result(books: Iterable[Book]) -> None:
    """Kitap listesini mevcut çıktı moduna göre yazdır.
    - plain: 'ID - Title by Author (Year)' satırları, veya boş durum mesajı
    - json: JSON dizisi olarak id, title, author, published_year
    - rich: Rich tablosu
    """
    books = list(books)
    mode = get_output_mode()

    if not books:
        print(EMPTY_TITLE)
        print(EMPTY_HINT)
        return

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        _console.print(books_table(books))
    else:
        for b in books:
            print(f"{b.id} - {b.title} by {b.author} ({b.published_year})")


def print_error(message: str, console: Optional[Console] = None) -> None:
    """Tarayıcıdaki uyarı kutusunun karşılığı."""
    (console or _console).print(
        Panel.fit(f"[bold red]Error:[/] {escape(message)}", title="❌ Error", border_style="red")
    )


def print_notification(message: str, console: Optional[Console] = None) -> None:
    (console or _console).print(f"[bold green]✅ {escape(message)}[/]")
