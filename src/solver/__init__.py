"""Solver — минимальная стоимость нажатий для машин.

- Binary regime: минимальное число кнопок, переключающих лампы в целевой паттерн
- Counting regime: минимальная сумма нажатий, дающая точные значения счётчиков
- Aggregator: сумма минимальных стоимостей по набору машин
"""

from .aggregator import (
    BatchReport,
    FailurePolicy,
    aggregate_costs,
    solve_batch,
    solve_machine,
)
from .binary import BinaryMethod, BinarySolution, find_binary_solution, solve_binary
from .config import (
    BRUTE_FORCE_MAX_BUTTONS,
    DEFAULT_CONFIG,
    FREE_VARIABLE_SEARCH_CAP,
    SolverConfig,
)
from .counting import CountingSolution, find_counting_solution, solve_counting

__all__ = [
    "BatchReport",
    "FailurePolicy",
    "aggregate_costs",
    "solve_batch",
    "solve_machine",
    "BinaryMethod",
    "BinarySolution",
    "find_binary_solution",
    "solve_binary",
    "BRUTE_FORCE_MAX_BUTTONS",
    "DEFAULT_CONFIG",
    "FREE_VARIABLE_SEARCH_CAP",
    "SolverConfig",
    "CountingSolution",
    "find_counting_solution",
    "solve_counting",
]
