"""
Domain models and value objects.

Contains the showcase entities: Spaceship, Rectangle, Book, Person.
"""

from src.core.domain.book import Book
from src.core.domain.person import Person
from src.core.domain.rectangle import Rectangle
from src.core.domain.spaceship import (
    MARGINAL_FUEL_THRESHOLD_GALLONS,
    ORBIT_FUEL_THRESHOLD_GALLONS,
    LaunchOutcome,
    Spaceship,
)

__all__ = [
    # Spaceship model
    "Spaceship",
    "LaunchOutcome",
    "ORBIT_FUEL_THRESHOLD_GALLONS",
    "MARGINAL_FUEL_THRESHOLD_GALLONS",
    # Rectangle model
    "Rectangle",
    # Book model
    "Book",
    # Person model
    "Person",
]
