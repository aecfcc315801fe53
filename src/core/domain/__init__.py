"""
Domain models and value objects.

Contains the machine description shared by both solving regimes.
"""

from src.core.domain.machine import Button, Machine, Regime

__all__ = [
    "Button",
    "Machine",
    "Regime",
]
