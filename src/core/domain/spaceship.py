"""
Spaceship — Модель корабля и политика запуска

Immutable Pydantic модель: название, капитан, запас топлива (галлоны).
Исход запуска является чистой функцией от топлива (трёхуровневая пороговая политика).
"""

from enum import Enum
from typing import Any, Final

from pydantic import BaseModel, Field


# =============================================================================
# ПОРОГИ ТОПЛИВА
# =============================================================================

# Выше этого порога корабль уверенно выходит на орбиту
ORBIT_FUEL_THRESHOLD_GALLONS: Final[int] = 50

# Выше этого порога (и не выше орбитального) корабль едва долетает
MARGINAL_FUEL_THRESHOLD_GALLONS: Final[int] = 25


# =============================================================================
# ENUMS
# =============================================================================


class LaunchOutcome(str, Enum):
    """Исход запуска"""

    ORBIT = "orbit"  # fuel > 50
    MARGINAL = "marginal"  # 25 < fuel <= 50
    CRASH = "crash"  # fuel <= 25


# =============================================================================
# SPACESHIP MODEL
# =============================================================================


class Spaceship(BaseModel):
    """
    Модель корабля.

    Immutable модель (frozen=True): топливо фиксируется при создании,
    поэтому исход запуска детерминирован и не меняется между вызовами.

    Поля передаются позиционно в порядке (name, captain, fuel) или по имени.
    """

    name: str = Field(..., description="Название корабля")
    captain: str = Field(..., description="Имя капитана")
    # int остаётся int: в сообщении о крушении печатается исходное значение.
    fuel: int | float = Field(..., description="Запас топлива (галлоны)")

    model_config = {"frozen": True, "strict": True}  # Immutable, без приведения типов

    def __init__(self, name: str, captain: str, fuel: int | float, **data: Any) -> None:
        super().__init__(name=name, captain=captain, fuel=fuel, **data)

    def captains_announcement(self) -> str:
        """Объявление о капитане сегодняшнего полёта"""
        return f"{self.name} will be captained by {self.captain} for today's flight"

    def launch_outcome(self) -> LaunchOutcome:
        """
        Классификация запуска по запасу топлива.

        Границы строгие: ровно 50 галлонов даёт MARGINAL, ровно 25 даёт CRASH.

        Returns:
            LaunchOutcome для текущего запаса топлива
        """
        if self.fuel > ORBIT_FUEL_THRESHOLD_GALLONS:
            return LaunchOutcome.ORBIT
        if self.fuel > MARGINAL_FUEL_THRESHOLD_GALLONS:
            return LaunchOutcome.MARGINAL
        return LaunchOutcome.CRASH

    def launch(self) -> str:
        """
        Сообщение о результате запуска.

        Returns:
            Текст, соответствующий LaunchOutcome
        """
        outcome = self.launch_outcome()
        if outcome is LaunchOutcome.ORBIT:
            return f"{self.name} has launched into orbit!!"
        if outcome is LaunchOutcome.MARGINAL:
            return f"{self.name} barely had enough fuel to make it into orbit!!"
        return (
            f"Captain {self.captain} forgot to fill up the tank and attempted to take off "
            f"with just {self.fuel} gallons in the tank. {self.name} promptly crashed back "
            f"to earth upon takeoff *explosion in background*."
        )
