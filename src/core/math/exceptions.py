"""
Solver Exceptions

Ошибки решения систем уравнений машины. "Нет решения" никогда не подменяется
числовым значением (например, 0): вызывающий код получает исключение и сам
решает, прерывать ли обработку остальных машин.
"""

from src.core.domain.machine import Regime


class NoSolutionError(Exception):
    """
    Система не имеет решения в требуемой области.

    BINARY: нет подмножества кнопок, XOR столбцов которого равен цели.
    COUNTING: система несовместна или не имеет неотрицательной целой точки.

    Для корректных входных данных не должно возникать: трактуется как
    дефект входа, а не как восстановимая ситуация.
    """

    def __init__(self, regime: Regime, reason: str):
        self.regime = regime
        self.reason = reason
        super().__init__(f"No solution ({regime.value}): {reason}")


class SearchBudgetExceeded(Exception):
    """
    Исчерпан глобальный бюджет перебора (SolverConfig.max_search_leaves).

    По умолчанию бюджет не ограничен; исключение возможно только при явно
    заданном лимите.
    """

    def __init__(self, regime: Regime, budget: int):
        self.regime = regime
        self.budget = budget
        super().__init__(
            f"Search budget of {budget} candidates exhausted ({regime.value})"
        )
