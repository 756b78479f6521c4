"""Services module for ViralAudit."""

from viralaudit.services.inference import GeminiInferenceClient, IInferenceClient
from viralaudit.services.ingest import FileIngestor
from viralaudit.services.result_schema import RESULT_SCHEMA
from viralaudit.services.validator import ResultValidator

__all__ = [
    "FileIngestor",
    "GeminiInferenceClient",
    "IInferenceClient",
    "RESULT_SCHEMA",
    "ResultValidator",
]
