import logging
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.markup import escape
from rich import box
import typer

from config import settings
from lumina_books.controller import LibraryController
from lumina_books.utils.ui_helpers import (
    EMPTY_HINT,
    EMPTY_TITLE,
    books_table,
    print_error,
    print_list_result,
    print_notification,
    set_output_mode,
)

APP_NAME = settings.app_name

console = Console()
logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def ask_confirmation(prompt: str) -> bool:
    return Confirm.ask(f"🗑️ {prompt}", default=False)


# Tekil kontrolcü örneği
class ControllerManager:
    _instance: Optional[LibraryController] = None

    @classmethod
    def get_instance(cls) -> LibraryController:
        """LibraryController tekil örneğini al veya oluştur ve koleksiyonu yükle."""
        if cls._instance is None:
            cls._instance = LibraryController(on_error=print_error, confirm=ask_confirmation)
            cls._instance.load()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        if cls._instance is not None:
            cls._instance.close()
        cls._instance = None


def _flush_notification(controller: LibraryController) -> None:
    message = controller.notification.message
    if message:
        print_notification(message)


# --- Typer CLI Uygulaması ---
app = typer.Typer(help=f"{APP_NAME} CLI", invoke_without_command=True)


@app.callback(invoke_without_command=True)
def _global_options(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Çıktı formatı: plain | json | rich (varsayılan: plain)",
    ),
):
    """CLI için genel seçenekler (ör. çıktı modu)."""
    configure_logging()
    # Komut bittiğinde HTTP bağlantıları kapatılır
    ctx.call_on_close(ControllerManager.reset)
    if output:
        set_output_mode(output)
    if ctx.invoked_subcommand is None:
        run_menu(ControllerManager.get_instance())


@app.command("list")
def cli_list(search: str = typer.Option("", "--search", "-s", help="Başlık veya yazarda ara")):
    """Kitapları listele; isteğe bağlı olarak başlık/yazara göre süz."""
    controller = ControllerManager.get_instance()
    controller.set_search(search)
    print_list_result(controller.visible_books())


@app.command("add")
def cli_add(
    title: str = typer.Option(..., "--title", "-t", help="Kitap başlığı"),
    author: str = typer.Option(..., "--author", "-a", help="Yazar"),
    year: str = typer.Option(..., "--year", "-y", help="Yayın yılı"),
):
    """Kütüphaneye yeni bir kitap ekle."""
    controller = ControllerManager.get_instance()
    controller.start_create()
    controller.update_field("title", title)
    controller.update_field("author", author)
    controller.update_field("published_year", year)
    if controller.submit():
        _flush_notification(controller)


@app.command("edit")
def cli_edit(
    book_id: str = typer.Argument(..., help="Düzenlenecek kitabın kimliği"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Yeni başlık"),
    author: Optional[str] = typer.Option(None, "--author", "-a", help="Yeni yazar"),
    year: Optional[str] = typer.Option(None, "--year", "-y", help="Yeni yayın yılı"),
):
    """Var olan bir kitabın alanlarını güncelle."""
    controller = ControllerManager.get_instance()
    if not controller.start_edit(book_id):
        print(f"Book {book_id} not found.")
        return
    for name, value in (("title", title), ("author", author), ("published_year", year)):
        if value is not None:
            controller.update_field(name, value)
    if controller.submit():
        _flush_notification(controller)


@app.command("delete")
def cli_delete(
    book_id: str = typer.Argument(..., help="Silinecek kitabın kimliği"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Onay sormadan sil"),
):
    """Bir kitabı onay ile sil."""
    controller = ControllerManager.get_instance()
    gate = (lambda prompt: True) if yes else None
    if controller.delete(book_id, confirm=gate):
        _flush_notification(controller)


@app.command("menu")
def cli_menu():
    """Etkileşimli menüyü başlat."""
    run_menu(ControllerManager.get_instance())


# --- Etkileşimli menü ---
def render_screen(controller: LibraryController) -> None:
    session = controller.session
    message = controller.notification.message
    if message:
        print_notification(message, console)

    header = f"[bold]{escape(APP_NAME)}[/]"
    if controller.search_term:
        header += f"   🔎 [dim]{escape(controller.search_term)}[/]"
    console.print(header)

    draft = session.draft
    icon = "✏️" if session.is_editing else "➕"
    console.print(Panel(
        f"[bold]Title:[/] {escape(draft.title)}\n"
        f"[bold]Author:[/] {escape(draft.author)}\n"
        f"[bold]Year:[/] {escape(draft.published_year)}",
        title=f"{icon} {session.heading}",
        border_style="yellow" if session.is_editing else "cyan",
    ))

    books = controller.visible_books()
    if books:
        console.print(books_table(books, title="📚 Library"))
    else:
        console.print(Panel.fit(f"{EMPTY_TITLE}\n[dim]{EMPTY_HINT}[/]", border_style="dim"))


def fill_form(controller: LibraryController) -> None:
    """Taslak alanlarını mevcut değerleri varsayılan alarak sor."""
    draft = controller.session.draft
    controller.update_field("title", Prompt.ask("Title", default=draft.title or None) or "")
    controller.update_field("author", Prompt.ask("Author", default=draft.author or None) or "")
    controller.update_field("published_year", Prompt.ask("Year", default=draft.published_year or None) or "")


def run_menu(controller: LibraryController) -> None:
    """Kütüphane için uzun ömürlü etkileşimli menü."""
    def render_menu() -> None:
        session = controller.session
        menu_items = [
            ("1", "Search library", "🔎"),
            ("2", session.submit_label, "💾" if session.is_editing else "➕"),
            ("3", "Edit a book", "✏️"),
            ("4", "Cancel editing", "✖"),
            ("5", "Remove a book", "🗑️"),
            ("6", "Refresh", "🔄"),
            ("0", "Exit", "🚪"),
        ]

        table = Table.grid(padding=(0, 2))
        table.add_column(justify="right", style="bold cyan", width=4)
        table.add_column(justify="left", style="white")
        for key, label, icon in menu_items:
            table.add_row(f"[reverse]{key}[/]", f"{icon} {label}")

        console.print(Panel(table, title=APP_NAME, border_style="cyan", box=box.HEAVY, padding=(1, 2)))

    while True:
        render_screen(controller)
        render_menu()
        choice = Prompt.ask("Choose an option", choices=["1", "2", "3", "4", "5", "6", "0"], default="1").strip()

        if choice == "1":
            controller.set_search(Prompt.ask("Search", default=controller.search_term or None) or "")
        elif choice == "2":
            fill_form(controller)
            controller.submit()
        elif choice == "3":
            book_id = Prompt.ask("Book ID").strip()
            if not controller.start_edit(book_id):
                console.print(f"[yellow]⚠️ Book {escape(book_id)} not found.[/]")
        elif choice == "4":
            controller.cancel_edit()
        elif choice == "5":
            controller.delete(Prompt.ask("Book ID").strip())
        elif choice == "6":
            if not controller.refresh():
                logger.info("Yenileme başarısız; önceki liste gösteriliyor")
        elif choice == "0":
            console.print("[green]Goodbye![/]")
            break
        console.print()  # işlemler arasında boşluk bırakır


if __name__ == "__main__":
    app()
