"""Session — подача строк из терминала или файла в SentenceResolver.

Presentation-слой: управляющие команды (restart/exit) и тексты ошибок.
"""

from .messages import GENERIC_MESSAGE, describe_error
from .runner import (
    GuideSession,
    RecordKind,
    SessionConfig,
    TranscriptRecord,
    render_record,
    run_lines,
)

__all__ = [
    "GENERIC_MESSAGE",
    "describe_error",
    "GuideSession",
    "RecordKind",
    "SessionConfig",
    "TranscriptRecord",
    "render_record",
    "run_lines",
]
