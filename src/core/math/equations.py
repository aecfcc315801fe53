"""
Equation Builder — матрица коэффициентов и вектор цели

Превращает список кнопок и целевой вектор в систему A·x = b:
- строки A — счётчики (лампы), столбцы — кнопки
- A[i][j] = 1 если кнопка j действует на счётчик i, иначе 0
- b — целевые значения (0/1 для BINARY, неотрицательные целые для COUNTING)

Индексы счётчиков за пределами len(target) игнорируются (не ошибка).
Чистое преобразование без побочных эффектов.
"""

from typing import Iterable, NamedTuple, Sequence


class LinearSystem(NamedTuple):
    """Система A·x = b (C строк × N столбцов)"""

    matrix: list[list[int]]
    target: list[int]
    columns: int  # N хранится явно: при C = 0 матрица пуста

    @property
    def rows(self) -> int:
        return len(self.matrix)


def build_matrix(buttons: Sequence[Iterable[int]], counter_count: int) -> list[list[int]]:
    """
    Матрица коэффициентов C×N.

    Args:
        buttons: Для каждой кнопки — индексы счётчиков, на которые она действует
        counter_count: Количество счётчиков C

    Returns:
        Список из C строк длиной N, элементы 0/1
    """
    matrix = [[0] * len(buttons) for _ in range(counter_count)]
    for column, counters in enumerate(buttons):
        for counter in counters:
            if 0 <= counter < counter_count:
                matrix[counter][column] = 1
    return matrix


def build_binary_system(
    target: Sequence[bool], buttons: Sequence[Iterable[int]]
) -> LinearSystem:
    """
    Система над GF(2): цель — паттерн ламп.

    Args:
        target: Целевое состояние ламп (True = горит)
        buttons: Индексы ламп для каждой кнопки

    Returns:
        LinearSystem с целью из 0/1
    """
    return LinearSystem(
        matrix=build_matrix(buttons, len(target)),
        target=[1 if lit else 0 for lit in target],
        columns=len(buttons),
    )


def build_counting_system(
    target: Sequence[int], buttons: Sequence[Iterable[int]]
) -> LinearSystem:
    """
    Система над целыми числами: цель — значения счётчиков.

    Args:
        target: Целевые значения счётчиков (неотрицательные)
        buttons: Индексы счётчиков для каждой кнопки

    Returns:
        LinearSystem с целыми значениями цели

    Raises:
        ValueError: Если в цели есть отрицательные значения
    """
    values = [int(v) for v in target]
    if any(v < 0 for v in values):
        raise ValueError(f"Counting targets must be non-negative, got {values}")
    return LinearSystem(
        matrix=build_matrix(buttons, len(values)), target=values, columns=len(buttons)
    )
