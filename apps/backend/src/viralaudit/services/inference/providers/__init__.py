"""Inference backends."""

from viralaudit.services.inference.providers.gemini import GeminiInferenceClient

__all__ = ["GeminiInferenceClient"]
