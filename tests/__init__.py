"""
Test suite for press-optimizer

Contains:
- tests/unit/          : Unit tests for individual modules
"""
