"""Binary regime — минимальное число кнопок для паттерна ламп.

Нажатие кнопки переключает (XOR) затронутые лампы; повторные нажатия
взаимно уничтожаются, поэтому каждая кнопка нажимается 0 или 1 раз.

Выбор алгоритма по числу кнопок N:
- N <= brute_force_max_buttons: полный перебор 2^N
- иначе: исключение над GF(2) + перебор свободных переменных
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence

from src.core.math.equations import build_binary_system
from src.core.math.gf2 import min_weight_brute_force, min_weight_elimination
from src.solver.config import DEFAULT_CONFIG, SolverConfig

logger = logging.getLogger(__name__)


class BinaryMethod(str, Enum):
    """Использованный алгоритм"""

    BRUTE_FORCE = "brute_force"
    ELIMINATION = "elimination"


@dataclass(frozen=True)
class BinarySolution:
    """Минимальное решение для паттерна ламп."""

    cost: int
    presses: tuple[int, ...]  # 0/1 на каждую кнопку
    method: BinaryMethod
    free_variables: int
    candidates: int

    @property
    def pressed_buttons(self) -> tuple[int, ...]:
        return tuple(i for i, pressed in enumerate(self.presses) if pressed)


def find_binary_solution(
    binary_target: Sequence[bool],
    buttons: Sequence[Iterable[int]],
    config: Optional[SolverConfig] = None,
) -> BinarySolution:
    """Поиск подмножества кнопок минимального размера.

    Args:
        binary_target: Целевое состояние ламп
        buttons: Индексы ламп для каждой кнопки
        config: Конфигурация (по умолчанию DEFAULT_CONFIG)

    Returns:
        BinarySolution с минимальным числом кнопок

    Raises:
        NoSolutionError: Если паттерн недостижим
        SearchBudgetExceeded: Если исчерпан max_search_leaves
    """
    config = config or DEFAULT_CONFIG
    system = build_binary_system(binary_target, buttons)

    if system.columns <= config.brute_force_max_buttons:
        method = BinaryMethod.BRUTE_FORCE
        result = min_weight_brute_force(system, budget=config.max_search_leaves)
    else:
        method = BinaryMethod.ELIMINATION
        result = min_weight_elimination(system, budget=config.max_search_leaves)

    logger.debug(
        "binary solve: lights=%d buttons=%d method=%s free=%d candidates=%d cost=%d",
        system.rows,
        system.columns,
        method.value,
        result.free_variables,
        result.candidates,
        result.weight,
    )

    return BinarySolution(
        cost=result.weight,
        presses=result.assignment,
        method=method,
        free_variables=result.free_variables,
        candidates=result.candidates,
    )


def solve_binary(
    binary_target: Sequence[bool],
    buttons: Sequence[Iterable[int]],
    config: Optional[SolverConfig] = None,
) -> int:
    """Минимальное число нажатых кнопок (см. find_binary_solution)."""
    return find_binary_solution(binary_target, buttons, config).cost
