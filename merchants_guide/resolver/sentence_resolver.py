"""Sentence Resolver — разбор утверждений и ответы на вопросы.

Хранит два отображения, построенных из утверждений:
- WordSymbolMap:   'glob is I'                      → {"glob": Symbol.I}
- PhraseCreditMap: 'glob glob Silver is 34 Credits' → {"glob glob Silver": 34}

Отвечает на две формы вопросов:
- 'how much is <phrase> ?'          → "<phrase> is <integer>"
- 'how many Credits is <phrase> ?'  → "<phrase> is <value> Credits"

Стоимость единицы товара (InferredUnitCredit) выводится на лету из
сохранённых кредитных фраз и не сохраняется между вызовами.
"""

import logging
from dataclasses import dataclass
from fractions import Fraction
from typing import Optional

from pydantic import ValidationError

from merchants_guide.core.domain.errors import (
    InvalidInput,
    InvalidNumeral,
    NumberFormat,
    UnrecognizedQuestion,
    format_split,
)
from merchants_guide.core.domain.facts import CreditFact, NumeralBinding
from merchants_guide.core.domain.symbol import Symbol
from merchants_guide.core.math.numeral_codec import parse_symbol, sum_symbols

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolverConfig:
    """Конфигурация Sentence Resolver.

    Литеральные токены протокола и защита от патологически длинных фраз.
    """

    separator: str = " is "
    credits_keyword: str = "Credits"
    how_much_prefix: str = "how much is "
    how_many_prefix: str = "how many Credits is "
    question_token: str = "how"
    question_marker: str = "?"
    max_phrase_words: int = 64


class SentenceResolver:
    """Sentence Resolver: утверждения изменяют состояние, вопросы только читают его.

    Один экземпляр на сессию. Классификация строки выполняется на каждый вызов:
    - содержит токен 'how' или '?' → вопрос
    - иначе → утверждение
    """

    def __init__(self, config: Optional[ResolverConfig] = None):
        """
        Args:
            config: конфигурация resolver (опционально, используется default)
        """
        self.config = config or ResolverConfig()

        self._word_symbols: dict[str, Symbol] = {}
        self._phrase_credits: dict[str, int] = {}

    @property
    def word_symbols(self) -> dict[str, Symbol]:
        """Копия WordSymbolMap."""
        return dict(self._word_symbols)

    @property
    def phrase_credits(self) -> dict[str, int]:
        """Копия PhraseCreditMap."""
        return dict(self._phrase_credits)

    def handle_input(self, line: str) -> Optional[str]:
        """Обработка одной строки ввода.

        Args:
            line: строка без перевода строки

        Returns:
            Ответ для вопроса, None для успешного утверждения

        Raises:
            InvalidSymbol, InvalidNumeral, InvalidInput, NumberFormat
        """
        if self._is_question(line):
            return self._handle_question(line)

        self._handle_statement(line)
        return None

    def _is_question(self, line: str) -> bool:
        return (
            self.config.question_token in line.split()
            or self.config.question_marker in line
        )

    # -------------------------------------------------------------------------
    # Statements
    # -------------------------------------------------------------------------

    def _handle_statement(self, line: str) -> None:
        parts = line.split(self.config.separator)
        if len(parts) != 2:
            raise InvalidInput(
                line,
                f"a statement needs exactly one '{self.config.separator.strip()}' "
                f"separator, split: {format_split(parts)}",
            )

        key, value = parts[0].strip(), parts[1].strip()
        if not key:
            raise InvalidInput(line, "nothing before the 'is' keyword")

        # '34 Credits' и '34Credits' равнозначны
        if self.config.credits_keyword in value:
            self._store_credits(line, key, value)
        else:
            self._store_numeral(line, key, value)

    def _store_credits(self, line: str, key: str, value: str) -> None:
        raw_amount = value.replace(self.config.credits_keyword, "").strip()
        try:
            amount = int(raw_amount)
        except ValueError as e:
            raise NumberFormat(raw_amount) from e

        try:
            fact = CreditFact(phrase=key, amount=amount)
        except ValidationError as e:
            raise InvalidInput(line, str(e)) from e

        if fact.phrase in self._phrase_credits:
            logger.info(
                "Credit phrase %r restated: %d -> %d",
                fact.phrase, self._phrase_credits[fact.phrase], fact.amount,
            )
        self._phrase_credits[fact.phrase] = fact.amount
        logger.debug("Stored credit fact %r = %d", fact.phrase, fact.amount)

    def _store_numeral(self, line: str, key: str, value: str) -> None:
        symbol = parse_symbol(value)

        if len(key.split()) > 1:
            raise InvalidInput(line, f"numeral key {key!r} must be a single word")

        bound = self._word_symbols.get(key)
        if bound is not None and bound != symbol:
            raise InvalidInput(
                line, f"word {key!r} has already been assigned to {bound.value}"
            )

        try:
            binding = NumeralBinding(word=key, symbol=symbol)
        except ValidationError as e:
            raise InvalidInput(line, str(e)) from e

        self._word_symbols[binding.word] = binding.symbol
        logger.debug("Bound %r to %s", binding.word, binding.symbol.value)

    # -------------------------------------------------------------------------
    # Questions
    # -------------------------------------------------------------------------

    def _handle_question(self, line: str) -> str:
        stripped = line.strip()
        if stripped.startswith(self.config.how_much_prefix):
            return self._handle_how_much(line, stripped)
        if stripped.startswith(self.config.how_many_prefix):
            return self._handle_how_many(line, stripped)
        raise UnrecognizedQuestion(line)

    def _question_phrase(self, line: str, stripped: str, prefix: str) -> tuple[str, list[str]]:
        """Фраза вопроса без префикса и завершающего '?'."""
        phrase = stripped[len(prefix):].rstrip().rstrip(self.config.question_marker).strip()
        words = phrase.split()
        if not words:
            raise InvalidInput(line, "the question does not name anything")
        if len(words) > self.config.max_phrase_words:
            raise InvalidInput(
                line,
                f"phrase has {len(words)} words, limit is {self.config.max_phrase_words}",
            )
        return phrase, words

    def _handle_how_much(self, line: str, stripped: str) -> str:
        phrase, words = self._question_phrase(line, stripped, self.config.how_much_prefix)
        symbols = self._words_to_symbols(words)
        total = sum_symbols(symbols)
        logger.debug("%r sums to %d", phrase, total)
        return f"{phrase} is {total}"

    def _words_to_symbols(self, words: list[str]) -> list[Symbol]:
        symbols = []
        for word in words:
            symbol = self._word_symbols.get(word)
            if symbol is None:
                raise InvalidInput(word, f"word {word!r} is not defined")
            symbols.append(symbol)
        return symbols

    def _handle_how_many(self, line: str, stripped: str) -> str:
        phrase, words = self._question_phrase(line, stripped, self.config.how_many_prefix)

        numeral_symbols = [self._word_symbols[w] for w in words if w in self._word_symbols]
        # dict.fromkeys сохраняет порядок и убирает повторы
        unit_words = list(dict.fromkeys(w for w in words if w not in self._word_symbols))

        inferred: dict[str, Fraction] = {}
        # Слова, для которых сохранённая фраза содержит невалидное число
        broken: dict[str, InvalidNumeral] = {}
        for word in unit_words:
            try:
                credit = self._infer_unit_credit(word)
            except InvalidNumeral as e:
                logger.debug("Cannot infer %r: %s", word, e)
                broken[word] = e
                continue
            if credit is not None:
                inferred[word] = credit

        if not unit_words:
            raise InvalidInput(
                line, f"no credit indicator word found in question: {line!r}"
            )
        if len(unit_words) > 1:
            raise InvalidInput(
                line,
                f"too many credit indicator words found in question {line!r}, "
                f"these words are {','.join(unit_words)!r}",
            )

        unit_word = unit_words[0]
        if unit_word not in inferred:
            raise InvalidInput(
                unit_word, f"word {unit_word!r} is not defined"
            ) from broken.get(unit_word)

        value = sum_symbols(numeral_symbols) * inferred[unit_word]
        logger.debug("%r is worth %s Credits", phrase, value)
        return f"{phrase} is {format_credits(value)} Credits"

    def _infer_unit_credit(self, word: str) -> Optional[Fraction]:
        """Стоимость одной единицы слова-товара.

        Ищется первая сохранённая фраза, содержащая слово как подстроку;
        стоимость = кредиты фразы / сумма её числовых слов.
        """
        for stored_phrase, amount in self._phrase_credits.items():
            if word not in stored_phrase:
                continue
            symbols = [
                self._word_symbols[w] for w in stored_phrase.split() if w in self._word_symbols
            ]
            credit = Fraction(amount, sum_symbols(symbols))
            logger.debug("Inferred %r = %s Credits per unit from %r", word, credit, stored_phrase)
            return credit
        return None


def format_credits(value: Fraction) -> str:
    """Целое значение без дробной части, иначе не более двух знаков после точки."""
    if value.denominator == 1:
        return str(value.numerator)
    return f"{float(value):.2f}".rstrip("0").rstrip(".")
