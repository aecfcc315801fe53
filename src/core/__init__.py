"""
Core domain models, exact linear algebra, and input contracts.

This module contains the building blocks that are independent of how
machines are read or how results are reported.
"""
