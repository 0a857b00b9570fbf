"""
Core domain models, numeral codec and contracts.

This module contains the building blocks that are independent of any
input/output (terminal, files).
"""
