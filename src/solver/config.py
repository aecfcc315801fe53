"""
Solver Config — параметры выбора алгоритма и ограничения перебора

BRUTE_FORCE_MAX_BUTTONS: до этого числа кнопок BINARY решается полным перебором.
FREE_VARIABLE_SEARCH_CAP: потолок перебора одной свободной переменной (COUNTING).
    Прагматичный ограничитель, а не доказанная граница: если оптимум требует
    большего значения, решение будет неоптимальным или не найдено.
max_search_leaves: необязательный глобальный бюджет перебора (None — без лимита).
"""

from dataclasses import dataclass
from typing import Final, Optional

# =============================================================================
# DEFAULTS
# =============================================================================

BRUTE_FORCE_MAX_BUTTONS: Final[int] = 20

FREE_VARIABLE_SEARCH_CAP: Final[int] = 500


@dataclass(frozen=True)
class SolverConfig:
    """Конфигурация решателей.

    Худший случай экспоненциален: 2^F для BINARY, произведение границ
    свободных переменных для COUNTING.
    """

    brute_force_max_buttons: int = BRUTE_FORCE_MAX_BUTTONS
    free_variable_search_cap: int = FREE_VARIABLE_SEARCH_CAP
    max_search_leaves: Optional[int] = None

    def __post_init__(self):
        if self.brute_force_max_buttons < 0:
            raise ValueError(
                f"brute_force_max_buttons must be non-negative, got {self.brute_force_max_buttons}"
            )
        if self.free_variable_search_cap < 0:
            raise ValueError(
                f"free_variable_search_cap must be non-negative, got {self.free_variable_search_cap}"
            )
        if self.max_search_leaves is not None and self.max_search_leaves <= 0:
            raise ValueError(
                f"max_search_leaves must be positive, got {self.max_search_leaves}"
            )


DEFAULT_CONFIG: Final[SolverConfig] = SolverConfig()
