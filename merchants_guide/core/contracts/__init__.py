"""
Contract Validation Module

Модуль для валидации JSON контрактов Merchant's Guide.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    TranscriptRecordValidator,
    validate_transcript_record,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "TranscriptRecordValidator",
    # Functions
    "validate_transcript_record",
]
