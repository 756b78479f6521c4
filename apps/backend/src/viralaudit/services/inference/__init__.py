"""Inference clients for video critique."""

from viralaudit.services.inference.base import IInferenceClient
from viralaudit.services.inference.providers.gemini import GeminiInferenceClient

__all__ = ["IInferenceClient", "GeminiInferenceClient"]
