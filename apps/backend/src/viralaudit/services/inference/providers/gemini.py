"""Gemini inference client for video critique."""

import asyncio
import base64
import logging

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from viralaudit.config import settings
from viralaudit.errors import EmptyResponseError, MissingAPIKeyError, TransportError
from viralaudit.models.media import AnalysisRequest
from viralaudit.services.result_schema import RESULT_SCHEMA

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = """\
You are a brutal Direct Response Creative Director.

Analyze the video based on these pillars:
1. Visuals
2. Audio
3. Copy

Also check specifically for:
1. Complexity (Keep it 8th grade reading level or lower).
2. Storytelling (Customer=Hero, Provider=Guide, Product=Solution).
3. The Hook (First 3 seconds).
4. Caption visibility and Copy visibility.
5. Technical quality (Audio/Visual).
6. Pacing (Is it boring? Too slow? Too fast?).
7. Pain Point (Does it clearly address a user problem?).
8. CTA (Is the Call to Action clear and strong?).

CRITICAL INSTRUCTIONS:
- Be specific. Reference timestamps (e.g., "At 0:04, the pacing drops").
- Be direct and brutally harsh. Don't sugarcoat.
- Do not use curse words, but be aggressive in your critique.
- Do not give generic advice.
- Be extremely clear with the advice.
- Always maintain a 8th grade reading level in your output.
- **IMPORTANT**: For every specific check (Hook, CTA, etc.), you MUST provide a "fix" field.
  - If status is FAIL or WARN: Provide a brief, simple, and actionable instruction.
  - If status is PASS: Return "None".
- **IMPORTANT**: For the main categories (Visual, Audio, Copy), if the score is below 80, \
you MUST provide a "fix" field with brief, actionable advice. If 80 or above, return "None".
"""

TRIGGER_PROMPT = "Analyze this ad video. Be brutal. Follow the JSON schema strictly."


class GeminiInferenceClient:
    """Inference client backed by the Google Gemini API.

    Holds its own credential and SDK client, so several instances (or a
    fake in tests) can coexist. Sends the video inline together with the
    result schema and returns the raw JSON text.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        client: genai.Client | None = None,
    ) -> None:
        """Initialize the Gemini client.

        Args:
            api_key: Gemini API key. Falls back to the configured key.
            model: Model to use. Falls back to the configured model.
            client: Pre-built SDK client, mainly for tests.

        Raises:
            MissingAPIKeyError: If no key is available and no client was given.
        """
        self._model = model or settings.gemini_model

        if client is not None:
            self._client = client
        else:
            api_key = api_key or settings.gemini_api_key
            if not api_key:
                raise MissingAPIKeyError("gemini")
            self._client = genai.Client(api_key=api_key)

    @property
    def name(self) -> str:
        """Backend name identifier."""
        return "gemini"

    @property
    def model(self) -> str:
        """Model used for analysis."""
        return self._model

    def build_contents(self, payload: AnalysisRequest) -> types.Content:
        """Build the user turn: the inline video followed by the trigger prompt."""
        return types.Content(
            role="user",
            parts=[
                types.Part.from_bytes(
                    data=base64.b64decode(payload.data),
                    mime_type=payload.mime_type,
                ),
                types.Part.from_text(text=TRIGGER_PROMPT),
            ],
        )

    def build_config(self) -> types.GenerateContentConfig:
        """Build the generation config constraining output to the result schema."""
        return types.GenerateContentConfig(
            system_instruction=SYSTEM_INSTRUCTION,
            response_mime_type="application/json",
            response_schema=RESULT_SCHEMA,
        )

    async def analyze(self, payload: AnalysisRequest) -> str:
        """Request a critique of an encoded video.

        Args:
            payload: Encoded video and its MIME type.

        Returns:
            Raw JSON text produced by the engine.

        Raises:
            TransportError: If the API call fails.
            EmptyResponseError: If the response carries no text.
        """
        logger.info(
            "Sending %s (%s, %d bytes) to %s",
            payload.name or "video",
            payload.mime_type,
            payload.size,
            self._model,
        )

        try:
            response = await self._client.aio.models.generate_content(
                model=self._model,
                contents=self.build_contents(payload),
                config=self.build_config(),
            )
        except genai_errors.APIError as exc:
            raise TransportError(f"Gemini API error: {exc}") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"Gemini request failed: {exc}") from exc
        except (OSError, asyncio.TimeoutError) as exc:
            # aiohttp transport when installed
            raise TransportError(f"Gemini connection failed: {exc!r}") from exc

        text = response.text
        if not text:
            raise EmptyResponseError("No response from AI")

        logger.info("Received %d characters from %s", len(text), self._model)
        return text
