"""
GF(2) Minimum-Weight Solver

Поиск подмножества кнопок минимального размера, XOR столбцов которого равен цели:
- Полный перебор 2^N масок (малые N)
- Гауссово исключение над GF(2) + перебор 2^F присваиваний свободных переменных

Представление: строка расширенной матрицы — целое число (битовая маска),
бит j — коэффициент при кнопке j, бит N — значение цели.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Оба метода дают одинаковый минимальный вес (декомпозиция точная)
2. Несовместная система → NoSolutionError, никогда не sentinel-значение
3. Столбцы pivot различны и возрастают в порядке выбора
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from src.core.domain.machine import Regime
from src.core.math.equations import LinearSystem
from src.core.math.exceptions import NoSolutionError, SearchBudgetExceeded


# =============================================================================
# RESULT TYPES
# =============================================================================


@dataclass(frozen=True)
class Gf2Elimination:
    """Результат исключения над GF(2)."""

    rows: tuple[int, ...]  # расширенные строки (битовые маски)
    columns: int  # N — количество кнопок
    pivots: tuple[tuple[int, int], ...]  # (столбец, строка) в порядке выбора
    free_columns: tuple[int, ...]
    consistent: bool

    @property
    def rank(self) -> int:
        return len(self.pivots)


@dataclass(frozen=True)
class Gf2MinWeight:
    """Минимальное решение над GF(2)."""

    weight: int
    assignment: tuple[int, ...]  # 0/1 на каждую кнопку
    candidates: int  # число проверенных кандидатов
    free_variables: int


# =============================================================================
# HELPERS
# =============================================================================


def _column_masks(matrix: Sequence[Sequence[int]], columns: int) -> list[int]:
    """Столбцы матрицы как маски по строкам"""
    masks = [0] * columns
    for i, row in enumerate(matrix):
        for j in range(columns):
            if row[j] & 1:
                masks[j] |= 1 << i
    return masks


def _target_mask(target: Sequence[int]) -> int:
    mask = 0
    for i, value in enumerate(target):
        if value & 1:
            mask |= 1 << i
    return mask


def _unpack(mask: int, columns: int) -> tuple[int, ...]:
    return tuple((mask >> j) & 1 for j in range(columns))


def _check_budget(examined: int, budget: Optional[int]) -> None:
    if budget is not None and examined > budget:
        raise SearchBudgetExceeded(Regime.BINARY, budget)


# =============================================================================
# EXHAUSTIVE ENUMERATION
# =============================================================================


def min_weight_brute_force(
    system: LinearSystem, budget: Optional[int] = None
) -> Gf2MinWeight:
    """
    Полный перебор всех 2^N подмножеств кнопок.

    Маски перебираются по возрастанию значения, что не гарантирует
    возрастания веса, поэтому отсечение проверяется для каждого кандидата:
    кандидат с весом >= лучшего пропускается без вычисления XOR.

    Args:
        system: Система над GF(2) (матрица и цель из 0/1)
        budget: Максимум проверяемых кандидатов (None — без лимита)

    Returns:
        Gf2MinWeight с минимальным весом и маской кнопок

    Raises:
        NoSolutionError: Если ни одно подмножество не даёт цель
        SearchBudgetExceeded: Если исчерпан бюджет
    """
    columns = system.columns
    column_masks = _column_masks(system.matrix, columns)
    goal = _target_mask(system.target)

    best_weight: Optional[int] = None
    best_mask = 0
    examined = 0

    for mask in range(1 << columns):
        weight = mask.bit_count()
        if best_weight is not None and weight >= best_weight:
            continue

        examined += 1
        _check_budget(examined, budget)

        combined = 0
        remaining = mask
        while remaining:
            low = remaining & -remaining
            combined ^= column_masks[low.bit_length() - 1]
            remaining ^= low

        if combined == goal:
            best_weight = weight
            best_mask = mask

    if best_weight is None:
        raise NoSolutionError(Regime.BINARY, "no subset of buttons produces the target")

    return Gf2MinWeight(
        weight=best_weight,
        assignment=_unpack(best_mask, columns),
        candidates=examined,
        free_variables=columns,
    )


# =============================================================================
# GAUSSIAN ELIMINATION
# =============================================================================


def eliminate_gf2(system: LinearSystem) -> Gf2Elimination:
    """
    Приведение расширенной матрицы [A | b] к ступенчатому виду над GF(2).

    Исключение полное: столбец pivot обнуляется во всех остальных строках,
    поэтому строка pivot содержит только сам pivot и свободные переменные.

    Args:
        system: Система над GF(2) (матрица и цель из 0/1)

    Returns:
        Gf2Elimination (consistent=False если есть строка 0 = 1)
    """
    columns = system.columns
    augmented_bit = 1 << columns

    rows: list[int] = []
    for i, row in enumerate(system.matrix):
        value = augmented_bit if system.target[i] & 1 else 0
        for j in range(columns):
            if row[j] & 1:
                value |= 1 << j
        rows.append(value)

    pivots: list[tuple[int, int]] = []
    pivot_row = 0

    for column in range(columns):
        if pivot_row == len(rows):
            break

        bit = 1 << column
        found = next((r for r in range(pivot_row, len(rows)) if rows[r] & bit), None)
        if found is None:
            continue

        rows[pivot_row], rows[found] = rows[found], rows[pivot_row]
        for r in range(len(rows)):
            if r != pivot_row and rows[r] & bit:
                rows[r] ^= rows[pivot_row]

        pivots.append((column, pivot_row))
        pivot_row += 1

    # Строки ниже rank имеют нулевые коэффициенты: 0 = 1 означает несовместность
    consistent = not any(rows[r] & augmented_bit for r in range(pivot_row, len(rows)))

    pivot_columns = {column for column, _ in pivots}
    free_columns = tuple(j for j in range(columns) if j not in pivot_columns)

    return Gf2Elimination(
        rows=tuple(rows),
        columns=columns,
        pivots=tuple(pivots),
        free_columns=free_columns,
        consistent=consistent,
    )


def min_weight_elimination(
    system: LinearSystem, budget: Optional[int] = None
) -> Gf2MinWeight:
    """
    Минимальный вес через исключение и перебор свободных переменных.

    Для каждого из 2^F присваиваний свободных переменных значения pivot
    восстанавливаются обратной подстановкой (коэффициент pivot равен 1).
    Каждое глобальное решение достижимо некоторым присваиванием, поэтому
    минимум по перебору равен глобальному минимуму.

    Args:
        system: Система над GF(2) (матрица и цель из 0/1)
        budget: Максимум проверяемых кандидатов (None — без лимита)

    Returns:
        Gf2MinWeight с минимальным весом и маской кнопок

    Raises:
        NoSolutionError: Если система несовместна
        SearchBudgetExceeded: Если исчерпан бюджет
    """
    elimination = eliminate_gf2(system)
    if not elimination.consistent:
        raise NoSolutionError(Regime.BINARY, "inconsistent system after elimination")

    columns = elimination.columns
    augmented_bit = 1 << columns
    free_columns = elimination.free_columns

    best_weight: Optional[int] = None
    best_mask = 0
    examined = 0

    for free_assignment in range(1 << len(free_columns)):
        # Вес свободной части — нижняя граница полного веса
        free_weight = free_assignment.bit_count()
        if best_weight is not None and free_weight >= best_weight:
            continue

        examined += 1
        _check_budget(examined, budget)

        solution = 0
        for k, column in enumerate(free_columns):
            if (free_assignment >> k) & 1:
                solution |= 1 << column

        free_part = solution
        for column, row in reversed(elimination.pivots):
            coefficients = elimination.rows[row]
            value = 1 if coefficients & augmented_bit else 0
            value ^= (coefficients & free_part).bit_count() & 1
            if value:
                solution |= 1 << column

        weight = solution.bit_count()
        if best_weight is None or weight < best_weight:
            best_weight = weight
            best_mask = solution

    # Для совместной системы хотя бы одно присваивание существует
    assert best_weight is not None

    return Gf2MinWeight(
        weight=best_weight,
        assignment=_unpack(best_mask, columns),
        candidates=examined,
        free_variables=len(free_columns),
    )
