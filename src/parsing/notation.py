"""Textual machine notation.

Одна машина на строку:

    [.##.] (3) (1,3) (2) (2,3) (0,2) (0,1) {3,5,4,7}

- [ ... ]  целевой паттерн ламп: '#' горит, '.' не горит
- ( ... )  кнопка: индексы счётчиков через запятую (пустая группа допустима)
- { ... }  целевые значения счётчиков (необязательно)
"""

import re
from typing import Optional

from pydantic import ValidationError

from src.core.domain.machine import Machine

_BUTTON_RE = re.compile(r"\(([^()]*)\)")


class MachineParseError(ValueError):
    """Строка не соответствует нотации машины."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        prefix = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{prefix}{message}")


def _parse_int_list(text: str, what: str, line_number: Optional[int]) -> list[int]:
    values = []
    for token in text.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            values.append(int(token))
        except ValueError:
            raise MachineParseError(f"non-numeric {what} {token!r}", line_number) from None
    return values


def parse_machine(line: str, line_number: Optional[int] = None) -> Machine:
    """Разбор одной строки нотации.

    Args:
        line: Строка описания машины
        line_number: Номер строки для сообщений об ошибках

    Returns:
        Machine

    Raises:
        MachineParseError: Если нет скобок [...] или индексы не числовые
    """
    start, end = line.find("["), line.find("]")
    if start < 0 or end < start:
        raise MachineParseError("missing [...] light diagram", line_number)

    diagram = line[start + 1 : end].strip()
    unexpected = set(diagram) - {"#", "."}
    if unexpected:
        raise MachineParseError(
            f"unexpected characters in light diagram: {''.join(sorted(unexpected))!r}",
            line_number,
        )
    lights = [c == "#" for c in diagram]

    rest = line[end + 1 :]
    brace = rest.find("{")
    buttons_part = rest if brace < 0 else rest[:brace]

    buttons = [
        _parse_int_list(group, "button index", line_number)
        for group in _BUTTON_RE.findall(buttons_part)
    ]

    joltage: list[int] = []
    if brace >= 0:
        close = rest.find("}", brace)
        if close < 0:
            raise MachineParseError("unterminated {...} joltage requirements", line_number)
        joltage = _parse_int_list(rest[brace + 1 : close], "joltage value", line_number)

    try:
        return Machine.from_indices(lights, buttons, joltage)
    except ValidationError as e:
        raise MachineParseError(str(e), line_number) from e


def parse_machines(text: str) -> list[Machine]:
    """Разбор всех машин; пустые строки пропускаются."""
    return [
        parse_machine(line, line_number)
        for line_number, line in enumerate(text.splitlines(), start=1)
        if line.strip()
    ]
