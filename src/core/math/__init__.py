"""
Core math modules

Точная линейная алгебра для систем уравнений машины: построение системы,
исключение над GF(2) и над целыми числами, обратная подстановка.
"""

# Equation Builder
from src.core.math.equations import (
    LinearSystem,
    build_binary_system,
    build_counting_system,
    build_matrix,
)

# Exceptions
from src.core.math.exceptions import (
    NoSolutionError,
    SearchBudgetExceeded,
)

# GF(2)
from src.core.math.gf2 import (
    Gf2Elimination,
    Gf2MinWeight,
    eliminate_gf2,
    min_weight_brute_force,
    min_weight_elimination,
)

# Integer elimination
from src.core.math.integer_elimination import (
    IntegerElimination,
    VariableBound,
    back_substitute,
    eliminate_integer,
    free_variable_bounds,
)

__all__ = [
    # Equation Builder
    "LinearSystem",
    "build_binary_system",
    "build_counting_system",
    "build_matrix",
    # Exceptions
    "NoSolutionError",
    "SearchBudgetExceeded",
    # GF(2)
    "Gf2Elimination",
    "Gf2MinWeight",
    "eliminate_gf2",
    "min_weight_brute_force",
    "min_weight_elimination",
    # Integer elimination
    "IntegerElimination",
    "VariableBound",
    "back_substitute",
    "eliminate_integer",
    "free_variable_bounds",
]
