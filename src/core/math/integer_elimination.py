"""
Integer Elimination — исключение без деления и обратная подстановка

Fraction-free исключение Гаусса над целыми числами для системы A·x = b:
- pivot выбирается как первая строка с ненулевым элементом в столбце
- остальные строки: row = row * pivot_value - pivot_row * row_value
- после каждого шага строка делится на НОД своих элементов

Целые Python имеют произвольную точность, поэтому перекрёстное умножение
не переполняется; сокращение на НОД удерживает коэффициенты малыми.
Промежуточные значения могут быть отрицательными.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Множество целых решений системы не меняется (умножение на ненулевое, деление на НОД)
2. Строки ниже rank имеют нулевые коэффициенты
3. Обратная подстановка принимает только точное деление и неотрицательное частное
"""

import math
from dataclasses import dataclass
from typing import NamedTuple, Optional, Sequence

from src.core.math.equations import LinearSystem


# =============================================================================
# RESULT TYPES
# =============================================================================


@dataclass(frozen=True)
class IntegerElimination:
    """Результат fraction-free исключения."""

    rows: tuple[tuple[int, ...], ...]  # расширенная матрица C × (N + 1)
    columns: int
    pivots: tuple[tuple[int, int], ...]  # (столбец, строка) в порядке выбора
    free_columns: tuple[int, ...]
    consistent: bool

    @property
    def rank(self) -> int:
        return len(self.pivots)


class VariableBound(NamedTuple):
    """Верхняя граница перебора свободной переменной."""

    column: int
    bound: int  # граница после применения потолка
    natural_bound: int  # граница из целевых значений до потолка
    clamped: bool


# =============================================================================
# ELIMINATION
# =============================================================================


def _reduce_row(row: list[int]) -> list[int]:
    """Деление строки на НОД её элементов (знак сохраняется)"""
    divisor = math.gcd(*row)
    if divisor > 1:
        return [value // divisor for value in row]
    return row


def eliminate_integer(system: LinearSystem) -> IntegerElimination:
    """
    Fraction-free исключение расширенной матрицы [A | b].

    Args:
        system: Целочисленная система

    Returns:
        IntegerElimination (consistent=False если есть строка 0 = b, b != 0)
    """
    columns = system.columns
    rows = [list(row) + [value] for row, value in zip(system.matrix, system.target)]

    pivots: list[tuple[int, int]] = []
    current = 0

    for column in range(columns):
        if current == len(rows):
            break

        found = next((r for r in range(current, len(rows)) if rows[r][column] != 0), None)
        if found is None:
            continue

        rows[current], rows[found] = rows[found], rows[current]
        rows[current] = _reduce_row(rows[current])
        pivot = rows[current]
        pivot_value = pivot[column]

        for r in range(len(rows)):
            if r == current or rows[r][column] == 0:
                continue
            factor = rows[r][column]
            rows[r] = _reduce_row(
                [a * pivot_value - b * factor for a, b in zip(rows[r], pivot)]
            )

        pivots.append((column, current))
        current += 1

    consistent = all(rows[r][columns] == 0 for r in range(current, len(rows)))

    pivot_columns = {column for column, _ in pivots}
    free_columns = tuple(j for j in range(columns) if j not in pivot_columns)

    return IntegerElimination(
        rows=tuple(tuple(row) for row in rows),
        columns=columns,
        pivots=tuple(pivots),
        free_columns=free_columns,
        consistent=consistent,
    )


# =============================================================================
# BOUNDS
# =============================================================================


def free_variable_bounds(
    system: LinearSystem, free_columns: Sequence[int], cap: int
) -> list[VariableBound]:
    """
    Верхние границы свободных переменных из неотрицательности.

    Кнопка не может быть нажата больше раз, чем требует любой затронутый ею
    счётчик (вклады остальных кнопок тоже неотрицательны). Берётся максимум
    целевых значений по затронутым счётчикам; кнопка без счётчиков имеет
    границу 0. Затем применяется потолок cap.

    Args:
        system: Исходная (не приведённая) система
        free_columns: Столбцы свободных переменных
        cap: Потолок перебора для одной переменной

    Returns:
        Список VariableBound в порядке free_columns
    """
    bounds = []
    for column in free_columns:
        natural = max(
            (
                system.target[i]
                for i in range(system.rows)
                if system.matrix[i][column] != 0
            ),
            default=0,
        )
        bounds.append(
            VariableBound(
                column=column,
                bound=min(natural, cap),
                natural_bound=natural,
                clamped=natural > cap,
            )
        )
    return bounds


# =============================================================================
# BACK-SUBSTITUTION
# =============================================================================


def back_substitute(
    elimination: IntegerElimination, values: Sequence[int]
) -> Optional[list[int]]:
    """
    Восстановление pivot-переменных по значениям свободных.

    Строки pivot обходятся в обратном порядке исключения:
        rhs = b[r] - Σ a[r][j] * x[j]  (j > p)
        x[p] = rhs / a[r][p]
    Деление должно быть точным, частное — неотрицательным.

    Args:
        elimination: Результат eliminate_integer (совместная система)
        values: Вектор длины N, заполненный на свободных столбцах

    Returns:
        Полный вектор нажатий или None если присваивание недопустимо
    """
    columns = elimination.columns
    solution = list(values)

    for column, row in reversed(elimination.pivots):
        coefficients = elimination.rows[row]
        rhs = coefficients[columns]
        for j in range(column + 1, columns):
            if coefficients[j]:
                rhs -= coefficients[j] * solution[j]

        pivot_value = coefficients[column]
        if rhs % pivot_value != 0:
            return None

        quotient = rhs // pivot_value
        if quotient < 0:
            return None
        solution[column] = quotient

    return solution
