"""
Numeral Codec — Разбор, валидация и суммирование римских чисел

Модуль обеспечивает:
- Разбор одиночного токена в Symbol (parse_symbol)
- Валидацию последовательности символов по классическим правилам (validate)
- Суммирование последовательности в целое число (sum_symbols)
- Каноническое кодирование целого 1..3999 в символы (encode)

ПРАВИЛА ВАЛИДАЦИИ:
1. I, X, C, M повторяются подряд не более 3 раз
2. V, L, D встречаются в последовательности не более одного раза
3. Меньший символ перед большим: только допустимая вычитательная пара
   (I перед V/X, X перед L/C, C перед D/M)
4. Символ непосредственно перед вычитательной парой не меньше второго члена пары
   (запрещает "IIV", "VIX", "XXC")
5. Символ сразу после вычитательной пары меньше её первого члена
   (запрещает "IXI", "XCX", "IVX")

Ошибки не прерывают работу: поднимается InvalidSymbol / InvalidNumeral
с указанием токена или подпоследовательности.
"""

from typing import Final, Sequence

from merchants_guide.core.domain.errors import InvalidNumeral, InvalidSymbol
from merchants_guide.core.domain.symbol import (
    MAX_REPEAT,
    REPEATABLE,
    Symbol,
    can_subtract,
    render,
    symbol_value,
)

# =============================================================================
# CONSTANTS
# =============================================================================

# Диапазон канонической записи
NUMERAL_MIN: Final[int] = 1
NUMERAL_MAX: Final[int] = 3999

# Таблица канонического кодирования (значение, символы), по убыванию
_ENCODING_TABLE: Final[tuple[tuple[int, tuple[Symbol, ...]], ...]] = (
    (1000, (Symbol.M,)),
    (900, (Symbol.C, Symbol.M)),
    (500, (Symbol.D,)),
    (400, (Symbol.C, Symbol.D)),
    (100, (Symbol.C,)),
    (90, (Symbol.X, Symbol.C)),
    (50, (Symbol.L,)),
    (40, (Symbol.X, Symbol.L)),
    (10, (Symbol.X,)),
    (9, (Symbol.I, Symbol.X)),
    (5, (Symbol.V,)),
    (4, (Symbol.I, Symbol.V)),
    (1, (Symbol.I,)),
)


# =============================================================================
# PARSING
# =============================================================================


def parse_symbol(token: str) -> Symbol:
    """
    Разбор одиночного токена в Symbol.

    Args:
        token: Токен (пробелы по краям игнорируются)

    Returns:
        Соответствующий Symbol

    Raises:
        InvalidSymbol: Если токен не является одним из семи литералов

    Examples:
        >>> parse_symbol(" X ")
        <Symbol.X: 'X'>
    """
    try:
        return Symbol(token.strip())
    except ValueError as e:
        raise InvalidSymbol(token) from e


def parse_numeral(text: str) -> list[Symbol]:
    """Разбор строки литералов ("MMMDCCXXIV") в последовательность символов."""
    return [parse_symbol(ch) for ch in text.strip()]


# =============================================================================
# VALIDATION
# =============================================================================


def validate(symbols: Sequence[Symbol]) -> None:
    """
    Проверка последовательности по правилам римской записи.

    Последовательности длины ≤ 1 валидны тривиально.

    Args:
        symbols: Последовательность символов

    Raises:
        InvalidNumeral: Если нарушено любое из правил 1-5 (см. docstring модуля)
    """
    if len(symbols) <= 1:
        return

    text = render(symbols)
    _check_repetition(symbols, text)

    for i in range(len(symbols) - 1):
        current, nxt = symbols[i], symbols[i + 1]
        if symbol_value(current) >= symbol_value(nxt):
            continue

        if not can_subtract(current, nxt):
            raise InvalidNumeral(
                text, f"{current.value} may not precede {nxt.value}"
            )

        # Правило 4: значение за две позиции до второго члена пары
        if i >= 1 and symbol_value(symbols[i - 1]) < symbol_value(nxt):
            raise InvalidNumeral(
                text,
                f"{symbols[i - 1].value} may not precede the pair {current.value}{nxt.value}",
            )

        # Правило 5
        if i + 2 < len(symbols) and symbol_value(symbols[i + 2]) >= symbol_value(current):
            raise InvalidNumeral(
                text,
                f"{symbols[i + 2].value} may not follow the pair {current.value}{nxt.value}",
            )


def _check_repetition(symbols: Sequence[Symbol], text: str) -> None:
    """Правила 1-2: ограничения на повторения."""
    seen_once: set[Symbol] = set()
    run_symbol: Symbol | None = None
    run_length = 0

    for symbol in symbols:
        if symbol not in REPEATABLE:
            if symbol in seen_once:
                raise InvalidNumeral(text, f"{symbol.value} may not repeat")
            seen_once.add(symbol)

        if symbol == run_symbol:
            run_length += 1
        else:
            run_symbol, run_length = symbol, 1

        if run_length > MAX_REPEAT:
            raise InvalidNumeral(
                text, f"{symbol.value} repeated more than {MAX_REPEAT} times"
            )


# =============================================================================
# SUM
# =============================================================================


def sum_symbols(symbols: Sequence[Symbol]) -> int:
    """
    Сумма последовательности символов.

    Сначала validate(), затем проход слева направо:
    - если текущий символ меньше следующего, прибавляется (next - current),
      шаг на две позиции (только для допустимой пары);
    - иначе прибавляется значение текущего символа, шаг на одну позицию.
    Непарный хвостовой символ прибавляется напрямую.

    Args:
        symbols: Последовательность символов

    Returns:
        Целое значение

    Raises:
        InvalidNumeral: Пустая последовательность или нарушение правил

    Examples:
        >>> sum_symbols([Symbol.L, Symbol.I, Symbol.X])
        59
    """
    if not symbols:
        raise InvalidNumeral("", "empty numeral")

    validate(symbols)

    total = 0
    i = 0
    while i < len(symbols):
        current = symbols[i]
        if i + 1 < len(symbols) and symbol_value(current) < symbol_value(symbols[i + 1]):
            nxt = symbols[i + 1]
            if not can_subtract(current, nxt):
                raise InvalidNumeral(
                    render(symbols), f"{current.value} may not precede {nxt.value}"
                )
            total += symbol_value(nxt) - symbol_value(current)
            i += 2
        else:
            total += symbol_value(current)
            i += 1

    return total


# =============================================================================
# ENCODING
# =============================================================================


def encode(value: int) -> list[Symbol]:
    """
    Каноническая запись целого числа римскими символами.

    Args:
        value: Целое в диапазоне [NUMERAL_MIN, NUMERAL_MAX]

    Returns:
        Последовательность символов (например, 3724 → MMMDCCXXIV)

    Raises:
        ValueError: Если значение вне диапазона
    """
    if not NUMERAL_MIN <= value <= NUMERAL_MAX:
        raise ValueError(
            f"Value {value} out of range [{NUMERAL_MIN}, {NUMERAL_MAX}]"
        )

    symbols: list[Symbol] = []
    remaining = value
    for amount, chunk in _ENCODING_TABLE:
        count, remaining = divmod(remaining, amount)
        symbols.extend(chunk * count)
    return symbols
