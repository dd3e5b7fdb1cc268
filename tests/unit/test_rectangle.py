"""
Тесты для модели Rectangle

Проверяет:
1. Периметр и площадь
2. Сводку (порядок ключей, согласованность с методами)
3. Отсутствие валидации положительности
4. Immutability
"""

import pytest
from pydantic import ValidationError

from src.core.domain import Rectangle


@pytest.fixture
def epic_rectangle() -> Rectangle:
    return Rectangle(3, 4)


class TestRectangleMetrics:
    """Периметр и площадь"""

    def test_perimeter(self, epic_rectangle: Rectangle) -> None:
        assert epic_rectangle.perimeter() == 14

    def test_area(self, epic_rectangle: Rectangle) -> None:
        assert epic_rectangle.area() == 12

    @pytest.mark.parametrize(
        "length,width",
        [(1, 1), (2.5, 4), (10, 0.5), (7, 3)],
    )
    def test_formulas(self, length, width) -> None:
        rect = Rectangle(length, width)
        assert rect.perimeter() == pytest.approx(2 * (length + width))
        assert rect.area() == pytest.approx(length * width)

    def test_zero_and_negative_sides_propagate(self) -> None:
        """Стороны не проверяются на положительность"""
        assert Rectangle(0, 5).area() == 0
        assert Rectangle(0, 5).perimeter() == 10
        assert Rectangle(-2, 3).perimeter() == 2
        assert Rectangle(-2, 3).area() == -6


class TestRectangleSummary:
    """Сводка по прямоугольнику"""

    def test_summary_values(self, epic_rectangle: Rectangle) -> None:
        assert epic_rectangle.summary() == {
            "length": 3,
            "width": 4,
            "perimeter": 14,
            "area": 12,
        }

    def test_summary_key_order(self, epic_rectangle: Rectangle) -> None:
        assert list(epic_rectangle.summary()) == ["length", "width", "perimeter", "area"]

    def test_summary_matches_methods(self) -> None:
        rect = Rectangle(6.5, 2)
        summary = rect.summary()
        assert summary["perimeter"] == rect.perimeter()
        assert summary["area"] == rect.area()

    def test_summary_is_fresh_dict(self, epic_rectangle: Rectangle) -> None:
        """Изменение возвращённого dict не влияет на модель"""
        summary = epic_rectangle.summary()
        summary["area"] = 0
        assert epic_rectangle.summary()["area"] == 12


class TestRectangleModel:
    def test_immutable(self, epic_rectangle: Rectangle) -> None:
        with pytest.raises(ValidationError):
            epic_rectangle.length = 10  # type: ignore

    def test_keyword_creation(self) -> None:
        assert Rectangle(length=3, width=4) == Rectangle(3, 4)

    def test_non_numeric_side_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Rectangle("wide", 4)

    @pytest.mark.parametrize("length,width", [("3", 4), (3, "4"), (True, 4), (3, False)])
    def test_coercible_side_rejected(self, length, width) -> None:
        """Числовые строки и bool не приводятся к сторонам"""
        with pytest.raises(ValidationError):
            Rectangle(length, width)

    def test_hashable(self, epic_rectangle: Rectangle) -> None:
        assert hash(epic_rectangle) == hash(Rectangle(3, 4))
