"""
Core math modules для Merchant's Guide

Numeral codec: разбор, валидация и суммирование римских чисел.
"""

from merchants_guide.core.math.numeral_codec import (
    NUMERAL_MAX,
    NUMERAL_MIN,
    encode,
    parse_numeral,
    parse_symbol,
    sum_symbols,
    validate,
)

__all__ = [
    # Constants
    "NUMERAL_MIN",
    "NUMERAL_MAX",
    # Functions
    "parse_symbol",
    "parse_numeral",
    "validate",
    "sum_symbols",
    "encode",
]
