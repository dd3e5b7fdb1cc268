"""
Book — Модель библиографической записи
"""

from typing import Any

from pydantic import BaseModel, Field


class Book(BaseModel):
    """Запись каталога: название, автор, категория"""

    title: str = Field(..., description="Название книги")
    author: str = Field(..., description="Автор")
    category: str = Field(..., description="Категория каталога (например, 'Technical')")

    model_config = {"frozen": True}

    def __init__(self, title: str, author: str, category: str, **data: Any) -> None:
        super().__init__(title=title, author=author, category=category, **data)

    def summary(self) -> str:
        """Ссылка в формате '<title>, by <author> (<category>)'"""
        return f"{self.title}, by {self.author} ({self.category})"
