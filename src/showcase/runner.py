"""Console showcase — однократный прогон демонстрационных сущностей.

Порядок вывода:
- Spaceship: объявление капитана и результат запуска
- Rectangle: периметр и сводка
- Book: две библиографические записи
- Person: два приветствия

Группы разделены строкой из SEPARATOR_WIDTH символов SEPARATOR_CHAR.
Перед выводом каждая сущность и сводка прямоугольника проверяются по своим
JSON Schema контрактам.
"""

import logging
from dataclasses import dataclass
from typing import Final, List, Optional

from src.core.contracts import validate_entity, validate_rectangle_summary
from src.core.domain import Book, Person, Rectangle, Spaceship

logger = logging.getLogger(__name__)

SEPARATOR_CHAR: Final[str] = "*"
SEPARATOR_WIDTH: Final[int] = 72


@dataclass(frozen=True)
class ShowcaseConfig:
    """Конфигурация вывода showcase."""
    separator_char: str = SEPARATOR_CHAR
    separator_width: int = SEPARATOR_WIDTH

    @property
    def separator(self) -> str:
        return self.separator_char * self.separator_width


def spaceship_section(ship: Spaceship) -> List[str]:
    """Объявление капитана и сообщение о запуске."""
    validate_entity(ship)
    logger.debug("Spaceship %s launch outcome: %s", ship.name, ship.launch_outcome().value)
    return [ship.captains_announcement(), ship.launch()]


def rectangle_section(rectangle: Rectangle, label: str = "epic rectangle") -> List[str]:
    """Периметр, пустая строка и сводка.

    Args:
        rectangle: прямоугольник
        label: название прямоугольника во фразе о периметре

    Raises:
        jsonschema.ValidationError: если сводка нарушает контракт rectangle_summary
    """
    validate_entity(rectangle)
    summary = validate_rectangle_summary(rectangle.summary())
    logger.debug("Rectangle summary: %s", summary)
    return [
        f"The perimeter of the {label} is {rectangle.perimeter()}",
        "",
        str(summary),
    ]


def book_section(books: List[Book]) -> List[str]:
    """Ссылки на книги, каждая с пустой строкой после неё."""
    lines: List[str] = []
    for book in books:
        validate_entity(book)
        lines.extend([book.summary(), ""])
    return lines


def person_section(people: List[Person]) -> List[str]:
    """Приветствия, по одному на строку."""
    for person in people:
        validate_entity(person)
    return [person.greet() for person in people]


def render_showcase(config: Optional[ShowcaseConfig] = None) -> List[str]:
    """Построение строк вывода showcase без печати.

    Args:
        config: конфигурация разделителя (по умолчанию ShowcaseConfig())

    Returns:
        Список строк; пустая строка соответствует пустой строке вывода
    """
    config = config or ShowcaseConfig()

    ship = Spaceship("Gatticca 3000", "Ethan Hawke", 15)
    epic_rectangle = Rectangle(3, 4)
    books = [
        Book("User Stories Applied", "Mike Cohn", "Technical"),
        Book("Pragmatic Thinking and Learning", "Andy Hunt", "Technical"),
    ]
    people = [Person("Brianna"), Person("Casi")]

    lines: List[str] = []
    lines.extend(spaceship_section(ship))
    lines.extend([config.separator, ""])

    lines.extend(rectangle_section(epic_rectangle))
    lines.extend([config.separator, ""])

    lines.extend(book_section(books))
    lines.extend([config.separator, ""])

    lines.extend(person_section(people))

    logger.debug("Rendered showcase: %d lines", len(lines))
    return lines


def main(config: Optional[ShowcaseConfig] = None) -> None:
    """Печать showcase в stdout."""
    for line in render_showcase(config):
        print(line)
