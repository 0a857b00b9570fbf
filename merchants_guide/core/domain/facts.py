"""
Facts — Модели фактов, извлекаемых из утверждений

Immutable Pydantic модели:
- NumeralBinding: 'glob is I'                    (слово → Symbol)
- CreditFact:     'glob glob Silver is 34 Credits' (фраза → количество кредитов)
"""

from pydantic import BaseModel, Field, field_validator

from .symbol import Symbol


class NumeralBinding(BaseModel):
    """
    Привязка одного слова к римскому символу.

    Ключ — ровно одно слово без внутренних пробелов (многословные ключи
    зарезервированы за кредитными фразами).
    """

    word: str = Field(..., min_length=1, description="Галактическое слово")
    symbol: Symbol = Field(..., description="Римский символ")

    model_config = {"frozen": True}

    @field_validator("word")
    @classmethod
    def validate_single_word(cls, v: str) -> str:
        """Проверка, что ключ состоит ровно из одного слова"""
        if len(v.split()) != 1 or v != v.strip():
            raise ValueError(f"numeral key must be a single word, got {v!r}")
        return v


class CreditFact(BaseModel):
    """Стоимость фразы в кредитах."""

    phrase: str = Field(..., min_length=1, description="Фраза перед 'is'")
    amount: int = Field(..., description="Количество кредитов")

    model_config = {"frozen": True}

    @field_validator("phrase")
    @classmethod
    def validate_phrase_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("credit phrase must not be blank")
        return v
