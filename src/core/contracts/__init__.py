"""
Contract Validation Module

Модуль для валидации JSON описаний машин.
"""

from .validators import (
    ContractValidator,
    MachineValidator,
    SchemaLoader,
    validate_machine,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MachineValidator",
    # Functions
    "validate_machine",
]
