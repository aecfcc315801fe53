"""Parsing — чтение описаний машин (текстовая нотация и JSON)."""

from .json_loader import load_machines_json, read_machines_json
from .notation import MachineParseError, parse_machine, parse_machines

__all__ = [
    "MachineParseError",
    "parse_machine",
    "parse_machines",
    "load_machines_json",
    "read_machines_json",
]
