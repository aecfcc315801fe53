"""Counting regime — минимальное число нажатий для значений счётчиков.

Каждое нажатие прибавляет 1 к каждому затронутому счётчику; кнопка может
нажиматься любое неотрицательное число раз. Ищется x >= 0 (целый) с A·x = b
и минимальной суммой.

Алгоритм:
1. Fraction-free исключение, проверка совместности
2. Границы свободных переменных из неотрицательности (с потолком)
3. Branch-and-bound в глубину по свободным переменным в фиксированном
   порядке: ветвь отсекается, как только сумма свободных значений
   достигает лучшего найденного решения
4. В листе — обратная подстановка; недопустимый лист не прерывает поиск
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from src.core.domain.machine import Regime
from src.core.math.equations import build_counting_system
from src.core.math.exceptions import NoSolutionError, SearchBudgetExceeded
from src.core.math.integer_elimination import (
    IntegerElimination,
    VariableBound,
    back_substitute,
    eliminate_integer,
    free_variable_bounds,
)
from src.solver.config import DEFAULT_CONFIG, SolverConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CountingSolution:
    """Минимальное решение для значений счётчиков."""

    cost: int
    presses: tuple[int, ...]  # число нажатий каждой кнопки
    rank: int
    free_variables: int
    leaves_visited: int
    bounds: tuple[VariableBound, ...]

    @property
    def bounds_clamped(self) -> bool:
        """Хотя бы одна граница урезана потолком (оптимальность не гарантирована)"""
        return any(b.clamped for b in self.bounds)


@dataclass
class _SearchState:
    """Изменяемое состояние одного поиска (лучшее решение, счётчик листьев)."""

    elimination: IntegerElimination
    bounds: list[VariableBound]
    budget: Optional[int]
    values: list[int]
    best_cost: Optional[int] = None
    best_presses: Optional[list[int]] = None
    leaves: int = field(default=0)


def _visit_leaf(state: _SearchState) -> None:
    state.leaves += 1
    if state.budget is not None and state.leaves > state.budget:
        raise SearchBudgetExceeded(Regime.COUNTING, state.budget)

    solution = back_substitute(state.elimination, state.values)
    if solution is None:
        return

    total = sum(solution)
    if state.best_cost is None or total < state.best_cost:
        state.best_cost = total
        state.best_presses = solution


def _search(state: _SearchState, depth: int, running: int) -> None:
    if depth == len(state.bounds):
        _visit_leaf(state)
        return

    if state.best_cost is not None and running >= state.best_cost:
        return

    column, bound = state.bounds[depth].column, state.bounds[depth].bound
    for value in range(bound + 1):
        if state.best_cost is not None and running + value >= state.best_cost:
            break
        state.values[column] = value
        _search(state, depth + 1, running + value)
    state.values[column] = 0


def find_counting_solution(
    integer_target: Sequence[int],
    buttons: Sequence[Iterable[int]],
    config: Optional[SolverConfig] = None,
) -> CountingSolution:
    """Поиск неотрицательного целого x с A·x = b и минимальной суммой.

    Args:
        integer_target: Целевые значения счётчиков (неотрицательные)
        buttons: Индексы счётчиков для каждой кнопки
        config: Конфигурация (по умолчанию DEFAULT_CONFIG)

    Returns:
        CountingSolution с минимальной суммой нажатий

    Raises:
        NoSolutionError: Если система несовместна или нет неотрицательной целой точки
        SearchBudgetExceeded: Если исчерпан max_search_leaves
        ValueError: Если цель содержит отрицательные значения
    """
    config = config or DEFAULT_CONFIG
    system = build_counting_system(integer_target, buttons)

    elimination = eliminate_integer(system)
    if not elimination.consistent:
        raise NoSolutionError(Regime.COUNTING, "inconsistent system after elimination")

    bounds = free_variable_bounds(
        system, elimination.free_columns, config.free_variable_search_cap
    )
    for b in bounds:
        if b.clamped:
            logger.warning(
                "free variable %d bound %d clamped to %d; result may not be optimal",
                b.column,
                b.natural_bound,
                b.bound,
            )

    logger.debug(
        "counting solve: counters=%d buttons=%d rank=%d free=%d bounds=%s",
        system.rows,
        system.columns,
        elimination.rank,
        len(bounds),
        [b.bound for b in bounds],
    )

    state = _SearchState(
        elimination=elimination,
        bounds=bounds,
        budget=config.max_search_leaves,
        values=[0] * system.columns,
    )
    _search(state, depth=0, running=0)

    if state.best_cost is None or state.best_presses is None:
        raise NoSolutionError(
            Regime.COUNTING, "no non-negative integer point within search bounds"
        )

    logger.debug("counting solve: leaves=%d cost=%d", state.leaves, state.best_cost)

    return CountingSolution(
        cost=state.best_cost,
        presses=tuple(state.best_presses),
        rank=elimination.rank,
        free_variables=len(bounds),
        leaves_visited=state.leaves,
        bounds=tuple(bounds),
    )


def solve_counting(
    integer_target: Sequence[int],
    buttons: Sequence[Iterable[int]],
    config: Optional[SolverConfig] = None,
) -> int:
    """Минимальная сумма нажатий (см. find_counting_solution)."""
    return find_counting_solution(integer_target, buttons, config).cost
