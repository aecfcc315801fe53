"""
Тесты для GF(2) Minimum-Weight Solver

Проверяемые инварианты:
1. Полный перебор и исключение дают одинаковый минимальный вес
2. Найденное подмножество кнопок действительно даёт цель
3. Несовместная система → NoSolutionError
4. Столбцы pivot различны и возрастают
5. Бюджет перебора соблюдается
"""

import random

import pytest

from src.core.math.equations import build_binary_system
from src.core.math.exceptions import NoSolutionError, SearchBudgetExceeded
from src.core.math.gf2 import (
    eliminate_gf2,
    min_weight_brute_force,
    min_weight_elimination,
)
from tests.unit.reference import EXAMPLE_MACHINES, apply_toggles, lights_from_diagram


def _random_solvable_instance(rng: random.Random):
    lights = rng.randint(1, 6)
    buttons = [
        [i for i in range(lights) if rng.random() < 0.5]
        for _ in range(rng.randint(1, 8))
    ]
    hidden = [rng.random() < 0.5 for _ in buttons]
    target = apply_toggles(lights, buttons, hidden)
    return target, buttons


# =============================================================================
# ELIMINATION
# =============================================================================


class TestEliminateGf2:
    """Тесты eliminate_gf2"""

    @pytest.mark.parametrize("diagram,buttons,_j,_b,_c", EXAMPLE_MACHINES)
    def test_pivots_distinct_and_increasing(self, diagram, buttons, _j, _b, _c):
        system = build_binary_system(lights_from_diagram(diagram), buttons)
        result = eliminate_gf2(system)

        pivot_columns = [column for column, _ in result.pivots]
        assert pivot_columns == sorted(set(pivot_columns))
        assert [row for _, row in result.pivots] == list(range(result.rank))
        assert result.rank <= min(system.rows, system.columns)
        assert sorted(pivot_columns + list(result.free_columns)) == list(
            range(system.columns)
        )
        assert result.consistent

    def test_inconsistent_system_detected(self):
        """Одна кнопка на обе лампы, цель — только первая лампа."""
        system = build_binary_system([True, False], [[0, 1]])
        result = eliminate_gf2(system)
        assert result.rank == 1
        assert result.consistent is False

    def test_pivot_rows_have_no_other_pivots(self):
        """Полное исключение: строка pivot не содержит других pivot-столбцов."""
        system = build_binary_system(
            [True, True, False], [[0, 1], [1, 2], [0, 2], [0]]
        )
        result = eliminate_gf2(system)
        for column, row in result.pivots:
            for other, _ in result.pivots:
                if other != column:
                    assert not (result.rows[row] >> other) & 1


# =============================================================================
# MINIMUM WEIGHT
# =============================================================================


class TestMinWeight:
    """Тесты min_weight_brute_force / min_weight_elimination"""

    @pytest.mark.parametrize("diagram,buttons,_j,expected,_c", EXAMPLE_MACHINES)
    def test_examples_both_methods(self, diagram, buttons, _j, expected, _c):
        system = build_binary_system(lights_from_diagram(diagram), buttons)
        assert min_weight_brute_force(system).weight == expected
        assert min_weight_elimination(system).weight == expected

    @pytest.mark.parametrize("seed", range(25))
    def test_methods_agree_on_random_instances(self, seed):
        """Декомпозиция по свободным переменным точна."""
        rng = random.Random(seed)
        target, buttons = _random_solvable_instance(rng)
        system = build_binary_system(target, buttons)

        brute = min_weight_brute_force(system)
        gauss = min_weight_elimination(system)

        assert brute.weight == gauss.weight
        assert apply_toggles(len(target), buttons, brute.assignment) == target
        assert apply_toggles(len(target), buttons, gauss.assignment) == target
        assert sum(brute.assignment) == brute.weight
        assert sum(gauss.assignment) == gauss.weight

    def test_all_dark_target_costs_zero(self):
        system = build_binary_system([False, False, False], [[0, 1], [2]])
        assert min_weight_brute_force(system).weight == 0
        assert min_weight_elimination(system).weight == 0

    def test_no_buttons_nonzero_target(self):
        system = build_binary_system([True], [])
        with pytest.raises(NoSolutionError):
            min_weight_brute_force(system)
        with pytest.raises(NoSolutionError):
            min_weight_elimination(system)

    def test_unreachable_pattern(self):
        system = build_binary_system([True, False], [[0, 1]])
        with pytest.raises(NoSolutionError, match="binary"):
            min_weight_brute_force(system)
        with pytest.raises(NoSolutionError, match="inconsistent"):
            min_weight_elimination(system)

    def test_free_variable_count_reported(self):
        """Одна лампа, три одинаковые кнопки: rank 1, две свободные."""
        system = build_binary_system([True], [[0], [0], [0]])
        result = min_weight_elimination(system)
        assert result.weight == 1
        assert result.free_variables == 2

    def test_brute_force_budget(self):
        diagram, buttons = EXAMPLE_MACHINES[0][0], EXAMPLE_MACHINES[0][1]
        system = build_binary_system(lights_from_diagram(diagram), buttons)
        with pytest.raises(SearchBudgetExceeded):
            min_weight_brute_force(system, budget=1)

    def test_idempotent(self):
        diagram, buttons = EXAMPLE_MACHINES[1][0], EXAMPLE_MACHINES[1][1]
        system = build_binary_system(lights_from_diagram(diagram), buttons)
        assert min_weight_elimination(system) == min_weight_elimination(system)
