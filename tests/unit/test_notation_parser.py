"""
Тесты для текстовой нотации машин

Coverage:
- Разбор строки из примера
- Необязательные joltage, пустые группы кнопок, пробелы
- MachineParseError для некорректных строк (с номером строки)
"""

import pytest

from src.parsing.notation import MachineParseError, parse_machine, parse_machines
from tests.unit.reference import EXAMPLE_TEXT


class TestParseMachine:
    """Тесты parse_machine"""

    def test_example_line(self):
        machine = parse_machine("[.##.] (3) (1,3) (2) (2,3) (0,2) (0,1) {3,5,4,7}")
        assert machine.light_target == (False, True, True, False)
        assert machine.button_indices() == [[3], [1, 3], [2], [2, 3], [0, 2], [0, 1]]
        assert machine.joltage_target == (3, 5, 4, 7)

    def test_joltage_optional(self):
        machine = parse_machine("[#.] (0) (0,1)")
        assert machine.joltage_target == ()
        assert len(machine.buttons) == 2

    def test_whitespace_tolerated(self):
        machine = parse_machine("  [#] ( 0 , 1 )   { 4 , 2 }  ")
        assert machine.button_indices() == [[0, 1]]
        assert machine.joltage_target == (4, 2)

    def test_empty_button_group(self):
        machine = parse_machine("[.] () (0)")
        assert machine.button_indices() == [[], [0]]

    def test_missing_brackets(self):
        with pytest.raises(MachineParseError, match="light diagram"):
            parse_machine("(0) (1) {1,2}")

    def test_bad_light_character(self):
        with pytest.raises(MachineParseError, match="unexpected"):
            parse_machine("[.x#] (0)")

    def test_non_numeric_index(self):
        with pytest.raises(MachineParseError, match="non-numeric"):
            parse_machine("[#] (a)")

    def test_unterminated_joltage(self):
        with pytest.raises(MachineParseError, match="unterminated"):
            parse_machine("[#] (0) {1,2")

    def test_negative_index_reported_as_parse_error(self):
        with pytest.raises(MachineParseError):
            parse_machine("[#] (-1)")

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_machine("no brackets")


class TestParseMachines:
    """Тесты parse_machines"""

    def test_example_text(self):
        machines = parse_machines(EXAMPLE_TEXT)
        assert len(machines) == 3
        assert machines[2].joltage_target == (10, 11, 11, 5, 10, 5)

    def test_blank_lines_skipped(self):
        machines = parse_machines("\n[#] (0)\n\n   \n[.] (0)\n")
        assert len(machines) == 2

    def test_line_number_in_error(self):
        with pytest.raises(MachineParseError) as exc_info:
            parse_machines("[#] (0)\n[#] (x)\n")
        assert exc_info.value.line_number == 2
        assert "line 2" in str(exc_info.value)
