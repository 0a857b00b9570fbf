"""Resolver — разбор утверждений и вопросов Merchant's Guide.

- Утверждения: привязка слов к римским символам, стоимость фраз в кредитах
- Вопросы: 'how much is ...' и 'how many Credits is ...'
"""

from .sentence_resolver import (
    ResolverConfig,
    SentenceResolver,
    format_credits,
)

__all__ = [
    "ResolverConfig",
    "SentenceResolver",
    "format_credits",
]
