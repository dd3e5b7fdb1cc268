"""
Rectangle — Модель прямоугольника

Immutable Pydantic модель с двумя сторонами.
Периметр и площадь вычисляются при каждом вызове, без кэширования.
"""

from typing import Any

from pydantic import BaseModel, Field


class Rectangle(BaseModel):
    """
    Модель прямоугольника.

    Стороны хранятся как переданы: положительность не проверяется,
    нулевые и отрицательные значения проходят в периметр и площадь арифметически.
    """

    length: int | float = Field(..., description="Длина")
    width: int | float = Field(..., description="Ширина")

    model_config = {"frozen": True, "strict": True}  # Immutable, без приведения типов

    def __init__(self, length: int | float, width: int | float, **data: Any) -> None:
        super().__init__(length=length, width=width, **data)

    def perimeter(self) -> int | float:
        """Периметр: 2*length + 2*width"""
        return self.length * 2 + self.width * 2

    def area(self) -> int | float:
        """Площадь: length*width"""
        return self.length * self.width

    def summary(self) -> dict[str, int | float]:
        """
        Сводка по прямоугольнику.

        Returns:
            dict с ключами в порядке length, width, perimeter, area
        """
        return {
            "length": self.length,
            "width": self.width,
            "perimeter": self.perimeter(),
            "area": self.area(),
        }
