"""Session Runner — подача строк в SentenceResolver и вывод ответов.

Управляющие строки:
- 'restart': сбросить все факты (новый SentenceResolver)
- 'exit':    завершить сессию

Ошибки ядра (GuideError) превращаются в записи транскрипта с текстом
из session.messages; сессия при этом продолжается.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, TextIO

from pydantic import BaseModel, Field

from merchants_guide.core.contracts import validate_transcript_record
from merchants_guide.core.domain.errors import ErrorKind, GuideError
from merchants_guide.resolver import ResolverConfig, SentenceResolver
from merchants_guide.session.messages import describe_error

logger = logging.getLogger(__name__)


class RecordKind(str, Enum):
    """Тип записи транскрипта"""

    STATEMENT = "statement"
    ANSWER = "answer"
    ERROR = "error"
    CONTROL = "control"


class TranscriptRecord(BaseModel):
    """
    Результат обработки одной строки.

    Соответствует схеме transcript_record.json.
    """

    line: str = Field(..., description="Исходная строка")
    kind: RecordKind = Field(..., description="Тип записи")
    output: str | None = Field(None, description="Ответ или сообщение об ошибке")
    error_kind: ErrorKind | None = Field(None, description="Вид ошибки (только для kind=error)")

    model_config = {"frozen": True}


@dataclass(frozen=True)
class SessionConfig:
    """Конфигурация сессии."""

    restart_command: str = "restart"
    exit_command: str = "exit"
    prompt: str = "> "


class GuideSession:
    """Сессия Merchant's Guide: владеет одним SentenceResolver."""

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        resolver_config: Optional[ResolverConfig] = None,
    ):
        self.config = config or SessionConfig()
        self.resolver_config = resolver_config or ResolverConfig()
        self.resolver = SentenceResolver(self.resolver_config)
        self.finished = False

    def feed(self, line: str) -> Optional[TranscriptRecord]:
        """Обработка одной строки.

        Returns:
            Запись транскрипта, None для пустой строки

        Raises:
            RuntimeError: Если сессия уже завершена командой exit
        """
        if self.finished:
            raise RuntimeError("Session has exited, no further input is accepted")

        line = line.rstrip("\r\n")
        command = line.strip()
        if not command:
            return None

        if command == self.config.restart_command:
            logger.info("Restarting session, all facts discarded")
            self.resolver = SentenceResolver(self.resolver_config)
            return TranscriptRecord(line=line, kind=RecordKind.CONTROL)

        if command == self.config.exit_command:
            self.finished = True
            return TranscriptRecord(line=line, kind=RecordKind.CONTROL)

        try:
            answer = self.resolver.handle_input(line)
        except GuideError as e:
            logger.debug("Rejected %r: %s", line, e)
            return TranscriptRecord(
                line=line,
                kind=RecordKind.ERROR,
                output=describe_error(e),
                error_kind=e.kind,
            )

        if answer is None:
            return TranscriptRecord(line=line, kind=RecordKind.STATEMENT)
        return TranscriptRecord(line=line, kind=RecordKind.ANSWER, output=answer)


def render_record(record: TranscriptRecord, json_output: bool = False) -> Optional[str]:
    """Текст для вывода: ответ/ошибка, либо JSON-запись (проверенная по схеме)."""
    if json_output:
        data = record.model_dump(mode="json")
        validate_transcript_record(data)
        return json.dumps(data, ensure_ascii=False)
    return record.output


def run_lines(
    lines: Iterable[str],
    sink: TextIO,
    session: Optional[GuideSession] = None,
    json_output: bool = False,
) -> list[TranscriptRecord]:
    """Прогон строк через сессию до исчерпания ввода или команды exit.

    Args:
        lines: источник строк (файл, stdin, список)
        sink: куда писать ответы
        session: сессия (по умолчанию новая)
        json_output: писать JSON-записи транскрипта вместо текста

    Returns:
        Все записи транскрипта
    """
    session = session or GuideSession()
    records = []
    for line in lines:
        record = session.feed(line)
        if record is None:
            continue
        records.append(record)

        text = render_record(record, json_output)
        if text is not None:
            sink.write(text + "\n")

        if session.finished:
            break
    return records
