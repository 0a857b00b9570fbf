"""
Тесты для Numeral Codec — разбор, валидация и суммирование римских чисел

Проверяемые инварианты:
1. Только семь литералов разбираются в Symbol
2. sum_symbols(encode(n)) == n для всех 1 ≤ n ≤ 3999
3. Нарушения правил повторения и вычитания → InvalidNumeral, никогда не число
4. Пустая последовательность → InvalidNumeral
"""

import pytest

from merchants_guide.core.domain import ErrorKind, InvalidNumeral, InvalidSymbol, Symbol
from merchants_guide.core.math import (
    NUMERAL_MAX,
    NUMERAL_MIN,
    encode,
    parse_numeral,
    parse_symbol,
    sum_symbols,
    validate,
)


# =============================================================================
# ТЕСТЫ: parse_symbol
# =============================================================================


class TestParseSymbol:
    """Тесты parse_symbol."""

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("I", Symbol.I),
            ("V", Symbol.V),
            ("X", Symbol.X),
            ("L", Symbol.L),
            ("C", Symbol.C),
            ("D", Symbol.D),
            ("M", Symbol.M),
        ],
    )
    def test_seven_literals(self, token, expected):
        assert parse_symbol(token) is expected

    def test_whitespace_trimmed(self):
        """Пробелы по краям игнорируются."""
        assert parse_symbol("  X ") is Symbol.X

    @pytest.mark.parametrize("token", ["", "i", "II", "A", "IV", "10", " "])
    def test_invalid_tokens(self, token):
        with pytest.raises(InvalidSymbol) as exc_info:
            parse_symbol(token)
        assert exc_info.value.token == token
        assert exc_info.value.kind == ErrorKind.INVALID_SYMBOL

    def test_parse_numeral(self):
        assert parse_numeral("MCMIV") == [Symbol.M, Symbol.C, Symbol.M, Symbol.I, Symbol.V]

    def test_parse_numeral_invalid_character(self):
        with pytest.raises(InvalidSymbol):
            parse_numeral("XIZ")


# =============================================================================
# ТЕСТЫ: sum_symbols
# =============================================================================


class TestSumSymbols:
    """Тесты sum_symbols на известных значениях."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("I", 1),
            ("III", 3),
            ("IV", 4),
            ("IX", 9),
            ("XIV", 14),
            ("XIX", 19),
            ("XLII", 42),
            ("LIX", 59),
            ("XCIX", 99),
            ("CDXLIV", 444),
            ("CML", 950),
            ("MCMIII", 1903),
            ("MCMXLIV", 1944),
            ("MMMDCCXXIV", 3724),
            ("MMMCMXCIX", 3999),
        ],
    )
    def test_known_values(self, text, expected):
        assert sum_symbols(parse_numeral(text)) == expected

    def test_all_canonical_values(self):
        """sum_symbols(encode(n)) == n на всём диапазоне."""
        for n in range(NUMERAL_MIN, NUMERAL_MAX + 1):
            assert sum_symbols(encode(n)) == n

    def test_empty_sequence_rejected(self):
        """Пустая последовательность не суммируется в 0."""
        with pytest.raises(InvalidNumeral, match="empty numeral"):
            sum_symbols([])


# =============================================================================
# ТЕСТЫ: validate
# =============================================================================


class TestValidate:
    """Тесты validate: правила повторения и вычитания."""

    def test_short_sequences_valid(self):
        validate([])
        validate([Symbol.D])

    @pytest.mark.parametrize("text", ["IIII", "XXXX", "CCCC", "MMMM"])
    def test_repeat_more_than_three(self, text):
        with pytest.raises(InvalidNumeral, match="repeated more than 3 times"):
            validate(parse_numeral(text))

    @pytest.mark.parametrize("text", ["VV", "LL", "DD", "VIV", "LXL", "DCD", "LXLX"])
    def test_v_l_d_never_repeat(self, text):
        with pytest.raises(InvalidNumeral, match="may not repeat"):
            validate(parse_numeral(text))

    @pytest.mark.parametrize("text", ["IL", "IC", "ID", "IM", "XD", "XM", "VX", "LC", "DM"])
    def test_forbidden_subtractive_pairs(self, text):
        with pytest.raises(InvalidNumeral, match="may not precede"):
            validate(parse_numeral(text))

    @pytest.mark.parametrize("text", ["IIV", "IIX", "VIX", "XXC", "LXC", "CCM"])
    def test_smaller_symbol_before_pair(self, text):
        with pytest.raises(InvalidNumeral, match="may not precede the pair"):
            validate(parse_numeral(text))

    @pytest.mark.parametrize("text", ["IXI", "IVI", "IXV", "XCX", "XCL", "CMC", "IVIX"])
    def test_symbol_after_pair(self, text):
        with pytest.raises(InvalidNumeral, match="may not follow the pair"):
            validate(parse_numeral(text))

    def test_error_carries_sequence(self):
        with pytest.raises(InvalidNumeral) as exc_info:
            sum_symbols(parse_numeral("IIV"))
        assert exc_info.value.symbols == "IIV"
        assert exc_info.value.kind == ErrorKind.INVALID_NUMERAL

    @pytest.mark.parametrize("text", ["IIII", "IIV", "LXLX", "IXI", "VX", "MMMMCM"])
    def test_sum_never_returns_number_for_invalid(self, text):
        with pytest.raises(InvalidNumeral):
            sum_symbols(parse_numeral(text))


# =============================================================================
# ТЕСТЫ: encode
# =============================================================================


class TestEncode:
    """Тесты канонического кодирования."""

    @pytest.mark.parametrize(
        "value,text",
        [(1, "I"), (4, "IV"), (42, "XLII"), (1994, "MCMXCIV"), (3724, "MMMDCCXXIV")],
    )
    def test_known_encodings(self, value, text):
        assert "".join(s.value for s in encode(value)) == text

    @pytest.mark.parametrize("value", [0, -1, 4000])
    def test_out_of_range(self, value):
        with pytest.raises(ValueError, match="out of range"):
            encode(value)
