"""
Тесты для Equation Builder

Проверяет:
1. Форму матрицы: строки — счётчики, столбцы — кнопки
2. Игнорирование индексов за пределами числа счётчиков
3. Представление цели для BINARY (0/1) и COUNTING (целые)
4. Явное число столбцов при пустой матрице
"""

import pytest

from src.core.math.equations import (
    LinearSystem,
    build_binary_system,
    build_counting_system,
    build_matrix,
)


class TestBuildMatrix:
    """Тесты build_matrix"""

    def test_rows_are_counters_columns_are_buttons(self):
        """A[i][j] = 1 если кнопка j действует на счётчик i."""
        assert build_matrix([[0, 2], [1]], 3) == [[1, 0], [0, 1], [1, 0]]

    def test_out_of_range_indices_ignored(self):
        """Индексы >= C не влияют на матрицу."""
        assert build_matrix([[0, 5], [7]], 2) == [[1, 0], [0, 0]]

    def test_order_irrelevant(self):
        """Порядок индексов внутри кнопки не важен."""
        assert build_matrix([[2, 0]], 3) == build_matrix([[0, 2]], 3)

    def test_no_buttons(self):
        """Без кнопок строки пустые."""
        assert build_matrix([], 2) == [[], []]


class TestBuildSystems:
    """Тесты build_binary_system / build_counting_system"""

    def test_binary_target_as_bits(self):
        system = build_binary_system([False, True, True], [[1], [2]])
        assert isinstance(system, LinearSystem)
        assert system.target == [0, 1, 1]
        assert system.columns == 2
        assert system.rows == 3

    def test_counting_target_preserved(self):
        system = build_counting_system([3, 5, 4, 7], [[3], [1, 3]])
        assert system.target == [3, 5, 4, 7]
        assert system.matrix == [[0, 0], [0, 1], [0, 0], [1, 1]]

    def test_counting_negative_target_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            build_counting_system([1, -1], [[0]])

    def test_zero_counters_keeps_column_count(self):
        """При C = 0 матрица пуста, но N известно."""
        system = build_counting_system([], [[0], [1]])
        assert system.matrix == []
        assert system.columns == 2
        assert system.rows == 0

    def test_builder_is_pure(self):
        """Входные данные не изменяются."""
        buttons = [[0, 1], [1]]
        target = [True, False]
        build_binary_system(target, buttons)
        assert buttons == [[0, 1], [1]]
        assert target == [True, False]
