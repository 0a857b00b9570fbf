"""
Symbol — Римские символы и их значения

Закрытый набор из семи литералов с явной таблицей значений:
I=1, V=5, X=10, L=50, C=100, D=500, M=1000.

Сравнение и арифметика выполняются через явные функции (symbol_value,
can_subtract), а не через перегрузку операторов.
"""

from enum import Enum
from typing import Final


# =============================================================================
# ENUMS
# =============================================================================


class Symbol(str, Enum):
    """Римский символ (значение enum — его литерал)."""

    I = "I"
    V = "V"
    X = "X"
    L = "L"
    C = "C"
    D = "D"
    M = "M"


# =============================================================================
# ТАБЛИЦЫ
# =============================================================================

SYMBOL_VALUES: Final[dict[Symbol, int]] = {
    Symbol.I: 1,
    Symbol.V: 5,
    Symbol.X: 10,
    Symbol.L: 50,
    Symbol.C: 100,
    Symbol.D: 500,
    Symbol.M: 1000,
}

# Допустимые вычитательные пары: меньший символ → символы, перед которыми он может стоять
SUBTRACTIVE_PAIRS: Final[dict[Symbol, frozenset[Symbol]]] = {
    Symbol.I: frozenset({Symbol.V, Symbol.X}),
    Symbol.X: frozenset({Symbol.L, Symbol.C}),
    Symbol.C: frozenset({Symbol.D, Symbol.M}),
}

# Символы, которые могут повторяться подряд (не более MAX_REPEAT раз)
REPEATABLE: Final[frozenset[Symbol]] = frozenset({Symbol.I, Symbol.X, Symbol.C, Symbol.M})

MAX_REPEAT: Final[int] = 3


# =============================================================================
# ФУНКЦИИ
# =============================================================================


def symbol_value(symbol: Symbol) -> int:
    """Целочисленное значение символа."""
    return SYMBOL_VALUES[symbol]


def symbol_token(symbol: Symbol) -> str:
    """Литерал символа (обратное к parse_symbol)."""
    return symbol.value


def can_subtract(smaller: Symbol, larger: Symbol) -> bool:
    """
    Разрешена ли вычитательная пара smaller→larger.

    I перед V/X, X перед L/C, C перед D/M. Всё остальное запрещено.
    """
    return larger in SUBTRACTIVE_PAIRS.get(smaller, frozenset())


def render(symbols) -> str:
    """Последовательность символов в виде строки литералов (для сообщений)."""
    return "".join(symbol_token(s) for s in symbols)
