"""Aggregator — суммирование минимальных стоимостей по машинам.

Каждая машина решается независимо, без общего состояния. Итог — простая
свёртка (сумма), не зависящая от порядка.

FailurePolicy:
- HALT: первая ошибка "нет решения" прерывает обработку (эталонное поведение)
- SKIP: ошибка фиксируется в отчёте, остальные машины обрабатываются
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Sequence

from src.core.domain.machine import Machine, Regime
from src.core.math.exceptions import NoSolutionError
from src.solver.binary import solve_binary
from src.solver.config import DEFAULT_CONFIG, SolverConfig
from src.solver.counting import solve_counting

logger = logging.getLogger(__name__)


class FailurePolicy(str, Enum):
    """Реакция на машину без решения"""

    HALT = "halt"
    SKIP = "skip"


@dataclass(frozen=True)
class BatchReport:
    """Результат обработки набора машин в одном режиме."""

    regime: Regime
    total: int
    costs: tuple[Optional[int], ...]  # None для машины без решения
    failures: tuple[tuple[int, str], ...] = field(default=())  # (позиция, сообщение)

    @property
    def solved_count(self) -> int:
        return sum(1 for cost in self.costs if cost is not None)


def aggregate_costs(costs: Iterable[int]) -> int:
    """Сумма стоимостей по машинам."""
    return sum(costs)


def solve_machine(
    machine: Machine, regime: Regime, config: Optional[SolverConfig] = None
) -> int:
    """Минимальная стоимость одной машины в заданном режиме.

    Raises:
        NoSolutionError: Если у машины нет решения
        SearchBudgetExceeded: Если исчерпан бюджет перебора
    """
    if regime == Regime.BINARY:
        return solve_binary(machine.light_target, machine.button_indices(), config)
    return solve_counting(machine.joltage_target, machine.button_indices(), config)


def solve_batch(
    machines: Sequence[Machine],
    regime: Regime,
    config: Optional[SolverConfig] = None,
    policy: FailurePolicy = FailurePolicy.HALT,
) -> BatchReport:
    """Решение набора машин и суммирование стоимостей.

    Args:
        machines: Машины в порядке ввода
        regime: Режим решения
        config: Конфигурация решателей
        policy: Реакция на машину без решения

    Returns:
        BatchReport с итогом и стоимостью каждой машины

    Raises:
        NoSolutionError: При policy=HALT, если у какой-либо машины нет решения
    """
    config = config or DEFAULT_CONFIG
    costs: list[Optional[int]] = []
    failures: list[tuple[int, str]] = []

    for position, machine in enumerate(machines):
        try:
            costs.append(solve_machine(machine, regime, config))
        except NoSolutionError as e:
            if policy == FailurePolicy.HALT:
                raise
            logger.warning("machine %d skipped: %s", position, e)
            costs.append(None)
            failures.append((position, str(e)))

    total = aggregate_costs(cost for cost in costs if cost is not None)
    logger.debug(
        "%s batch: machines=%d solved=%d total=%d",
        regime.value,
        len(costs),
        len(costs) - len(failures),
        total,
    )

    return BatchReport(
        regime=regime,
        total=total,
        costs=tuple(costs),
        failures=tuple(failures),
    )
