"""
Person — Модель человека
"""

from typing import Any

from pydantic import BaseModel, Field


class Person(BaseModel):
    name: str = Field(..., description="Имя")

    model_config = {"frozen": True}

    def __init__(self, name: str, **data: Any) -> None:
        super().__init__(name=name, **data)

    def greet(self) -> str:
        return f"Hello, {self.name}."
