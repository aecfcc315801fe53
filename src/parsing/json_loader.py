"""JSON machine documents.

Документ — список объектов {"lights": [...], "buttons": [[...]], "joltage": [...]},
каждый проверяется контрактом machine.json до создания модели.
"""

import json
from pathlib import Path
from typing import Any, Union

from src.core.contracts.validators import MachineValidator
from src.core.domain.machine import Machine


def load_machines_json(data: Union[list[dict[str, Any]], str]) -> list[Machine]:
    """
    Загрузка машин из JSON.

    Args:
        data: Уже разобранный список объектов или JSON-строка

    Returns:
        Список Machine в порядке документа

    Raises:
        ValidationError (jsonschema): Если объект нарушает контракт
        TypeError: Если документ не является списком
    """
    if isinstance(data, str):
        data = json.loads(data)
    if not isinstance(data, list):
        raise TypeError(f"Machine document must be a JSON array, got {type(data).__name__}")

    validator = MachineValidator()
    machines = []
    for item in data:
        validator.validate(item)
        machines.append(
            Machine.from_indices(
                item["lights"], item["buttons"], item.get("joltage", [])
            )
        )
    return machines


def read_machines_json(path: Path) -> list[Machine]:
    """Чтение JSON-документа с машинами из файла."""
    with open(path, "r", encoding="utf-8") as f:
        return load_machines_json(json.load(f))
