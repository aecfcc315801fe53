"""
Machine — Модель машины: индикаторы, кнопки, счётчики joltage

Immutable Pydantic модели, описывающие один экземпляр машины:
- Button: кнопка и множество счётчиков, на которые она действует
- Machine: целевые состояния индикаторов и счётчиков + упорядоченный список кнопок
- Regime: режим решения (BINARY — переключение ламп, COUNTING — счётчики)

Позиция кнопки во входном порядке является её идентификатором (столбец матрицы).
"""

from enum import Enum
from typing import Iterable, Sequence

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class Regime(str, Enum):
    """Режим решения"""

    BINARY = "binary"  # GF(2): нажатие переключает лампы
    COUNTING = "counting"  # нажатие прибавляет 1 к каждому счётчику


# =============================================================================
# BUTTON
# =============================================================================


class Button(BaseModel):
    """
    Кнопка машины.

    Immutable модель (frozen=True). Индексы счётчиков уникальны, порядок не важен.
    Индексы за пределами числа счётчиков допустимы: Equation Builder их игнорирует.
    """

    index: int = Field(..., ge=0, description="Позиция кнопки во входном порядке")
    counters: frozenset[int] = Field(
        default_factory=frozenset, description="Индексы счётчиков, на которые действует кнопка"
    )

    model_config = {"frozen": True}

    @field_validator("counters")
    @classmethod
    def validate_counters(cls, v: frozenset[int]) -> frozenset[int]:
        """Индексы счётчиков неотрицательны"""
        negative = sorted(c for c in v if c < 0)
        if negative:
            raise ValueError(f"counter indices must be non-negative, got {negative}")
        return v

    def affects(self, counter: int) -> bool:
        """Действует ли кнопка на счётчик counter"""
        return counter in self.counters


# =============================================================================
# MACHINE
# =============================================================================


class Machine(BaseModel):
    """
    Экземпляр машины.

    light_target задаёт целевой паттерн ламп (BINARY), joltage_target —
    целевые значения счётчиков (COUNTING, может быть пустым).
    """

    light_target: tuple[bool, ...] = Field(default=(), description="Целевое состояние ламп")
    buttons: tuple[Button, ...] = Field(default=(), description="Кнопки в порядке ввода")
    joltage_target: tuple[int, ...] = Field(
        default=(), description="Целевые значения счётчиков (неотрицательные)"
    )

    model_config = {"frozen": True}

    @field_validator("joltage_target")
    @classmethod
    def validate_joltage(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Целевые значения счётчиков неотрицательны"""
        for value in v:
            if value < 0:
                raise ValueError(f"joltage targets must be non-negative, got {value}")
        return v

    @model_validator(mode="after")
    def validate_button_order(self) -> "Machine":
        """index каждой кнопки совпадает с её позицией"""
        for position, button in enumerate(self.buttons):
            if button.index != position:
                raise ValueError(
                    f"button at position {position} has index {button.index}"
                )
        return self

    @property
    def light_count(self) -> int:
        return len(self.light_target)

    @property
    def counter_count(self) -> int:
        return len(self.joltage_target)

    @property
    def has_joltage(self) -> bool:
        return len(self.joltage_target) > 0

    def button_indices(self) -> list[list[int]]:
        """Кнопки как отсортированные списки индексов счётчиков"""
        return [sorted(button.counters) for button in self.buttons]

    @classmethod
    def from_indices(
        cls,
        light_target: Sequence[bool],
        buttons: Iterable[Iterable[int]],
        joltage_target: Sequence[int] = (),
    ) -> "Machine":
        """
        Создание машины из простых списков индексов.

        Args:
            light_target: Целевое состояние ламп
            buttons: Для каждой кнопки — индексы счётчиков
            joltage_target: Целевые значения счётчиков

        Returns:
            Machine с кнопками, пронумерованными по порядку

        Raises:
            ValidationError: Если индексы или цели некорректны
        """
        return cls(
            light_target=tuple(bool(x) for x in light_target),
            buttons=tuple(
                Button(index=i, counters=frozenset(counters))
                for i, counters in enumerate(buttons)
            ),
            joltage_target=tuple(joltage_target),
        )
