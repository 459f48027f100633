from typing import List, Optional

from lumina_books.book import BookDraft


class DraftValidationError(ValueError):
    """Raised when a form draft is missing a required field."""

    def __init__(self, problems: List[str]):
        super().__init__("; ".join(problems))
        self.problems = problems


class TextValidator:
    """Form alanları için basit zorunluluk kontrolleri."""

    @staticmethod
    def is_present(text: Optional[str]) -> bool:
        return text is not None and bool(text.strip())

    @staticmethod
    def validate_title(title: Optional[str]) -> bool:
        return TextValidator.is_present(title)

    @staticmethod
    def validate_author(author: Optional[str]) -> bool:
        return TextValidator.is_present(author)

    @staticmethod
    def validate_year(year: Optional[str]) -> bool:
        # Yalnızca zorunlu; aralık veya biçim kontrolü sunucuya bırakılır
        return TextValidator.is_present(year)


def validate_draft(draft: BookDraft) -> None:
    problems = []
    if not TextValidator.validate_title(draft.title):
        problems.append("Title is required")
    if not TextValidator.validate_author(draft.author):
        problems.append("Author is required")
    if not TextValidator.validate_year(draft.published_year):
        problems.append("Year is required")
    if problems:
        raise DraftValidationError(problems)
