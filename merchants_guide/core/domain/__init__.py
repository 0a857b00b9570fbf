"""
Domain models and value objects.

Contains Symbol, the error taxonomy and the fact models (NumeralBinding, CreditFact).
"""

from merchants_guide.core.domain.errors import (
    ErrorKind,
    GuideError,
    InvalidInput,
    InvalidNumeral,
    InvalidSymbol,
    NumberFormat,
    UnrecognizedQuestion,
)
from merchants_guide.core.domain.facts import CreditFact, NumeralBinding
from merchants_guide.core.domain.symbol import (
    SUBTRACTIVE_PAIRS,
    SYMBOL_VALUES,
    Symbol,
    can_subtract,
    render,
    symbol_token,
    symbol_value,
)

__all__ = [
    # Symbol
    "Symbol",
    "SYMBOL_VALUES",
    "SUBTRACTIVE_PAIRS",
    "symbol_value",
    "symbol_token",
    "can_subtract",
    "render",
    # Errors
    "ErrorKind",
    "GuideError",
    "InvalidSymbol",
    "InvalidNumeral",
    "InvalidInput",
    "UnrecognizedQuestion",
    "NumberFormat",
    # Facts
    "NumeralBinding",
    "CreditFact",
]
