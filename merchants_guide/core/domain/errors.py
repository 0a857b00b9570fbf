"""
Errors — Таксономия ошибок Merchant's Guide

Все ошибки ядра являются значениями-исключениями с явным дискриминатором
`kind` (ErrorKind), чтобы вызывающий код мог различать их без разбора строк:

- INVALID_SYMBOL  — токен не является одним из семи литералов I V X L C D M
- INVALID_NUMERAL — последовательность символов нарушает правила римской записи
- INVALID_INPUT   — некорректная форма утверждения или вопроса
- NUMBER_FORMAT   — количество кредитов не является целым числом

Ядро никогда не завершает процесс на плохом вводе: ошибка поднимается,
presentation-слой (session.messages) превращает её в текст.
"""

from enum import Enum
from typing import Sequence


class ErrorKind(str, Enum):
    """Дискриминатор вида ошибки."""

    INVALID_SYMBOL = "INVALID_SYMBOL"
    INVALID_NUMERAL = "INVALID_NUMERAL"
    INVALID_INPUT = "INVALID_INPUT"
    NUMBER_FORMAT = "NUMBER_FORMAT"


class GuideError(Exception):
    """Базовая ошибка Merchant's Guide."""

    kind: ErrorKind


class InvalidSymbol(GuideError):
    """Токен не является литералом римской цифры."""

    kind = ErrorKind.INVALID_SYMBOL

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"invalid roman value: {token!r}")


class InvalidNumeral(GuideError):
    """
    Последовательность символов нарушает правила формирования римского числа.

    Attributes:
        symbols: Последовательность в виде строки литералов (например, "IIV")
        reason: Какое правило нарушено
    """

    kind = ErrorKind.INVALID_NUMERAL

    def __init__(self, symbols: str, reason: str):
        self.symbols = symbols
        self.reason = reason
        super().__init__(f"invalid roman sequence {symbols!r}: {reason}")


class InvalidInput(GuideError):
    """
    Некорректная форма входной строки.

    Attributes:
        line: Исходная строка (или её фрагмент), вызвавшая ошибку
        detail: Описание проблемы
    """

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, line: str, detail: str):
        self.line = line
        self.detail = detail
        super().__init__(f"{line!r}: {detail}")


class UnrecognizedQuestion(InvalidInput):
    """Вопрос без распознаваемого префикса ('how much is ' / 'how many Credits is ')."""

    def __init__(self, line: str):
        super().__init__(line, "question does not match any known form")


class NumberFormat(GuideError):
    """Количество кредитов после 'is' не является целым числом."""

    kind = ErrorKind.NUMBER_FORMAT

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"invalid credit amount: {raw!r}")


def format_split(parts: Sequence[str]) -> str:
    """Представление результата split для сообщений об ошибках."""
    return "[" + ", ".join(repr(p) for p in parts) + "]"
