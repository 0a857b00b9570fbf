"""Messages — человекочитаемые сообщения для ошибок ядра.

Общее сообщение GENERIC_MESSAGE используется только для строк, которые
вообще не удалось разобрать (UnrecognizedQuestion) и для ошибок вне таксономии.
"""

from typing import Final

from merchants_guide.core.domain.errors import (
    GuideError,
    InvalidInput,
    InvalidNumeral,
    InvalidSymbol,
    NumberFormat,
    UnrecognizedQuestion,
)

GENERIC_MESSAGE: Final[str] = "I have no idea what you are talking about"


def describe_error(err: BaseException) -> str:
    """Текст для пользователя по виду ошибки."""
    if isinstance(err, UnrecognizedQuestion) or not isinstance(err, GuideError):
        return GENERIC_MESSAGE

    if isinstance(err, InvalidSymbol):
        return f"'{err.token.strip()}' is not a roman numeral (use one of I V X L C D M)"
    if isinstance(err, InvalidNumeral):
        if not err.symbols:
            return "The phrase contains no numeral words"
        return f"'{err.symbols}' is not a valid roman numeral: {err.reason}"
    if isinstance(err, NumberFormat):
        return f"'{err.raw}' is not a whole number of Credits"
    if isinstance(err, InvalidInput):
        return f"Invalid input: {err.detail}"

    return GENERIC_MESSAGE
