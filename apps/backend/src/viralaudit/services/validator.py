"""Validation of raw engine output against the result schema."""

import json
import logging
import re

from pydantic import ValidationError

from viralaudit.errors import SchemaViolationError
from viralaudit.models.analysis import AnalysisResult

logger = logging.getLogger(__name__)

_OPENING_FENCE = re.compile(r"^```[A-Za-z0-9_-]*[ \t]*\n?")


def _strip_code_fence(text: str) -> str:
    """Remove a surrounding Markdown code fence, if any."""
    text = text.strip()
    if text.startswith("```"):
        text = _OPENING_FENCE.sub("", text, count=1)
        if text.rstrip().endswith("```"):
            text = text.rstrip()[:-3]
    return text.strip()


def _format_location(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) or "<root>"


class ResultValidator:
    """Turns raw engine text into an :class:`AnalysisResult`.

    The engine is asked to follow the schema but nothing guarantees it
    did, so every field is checked. Output is either a complete typed
    result or a :class:`SchemaViolationError`; nothing in between.
    """

    def validate(self, raw_text: str) -> AnalysisResult:
        """Parse and validate raw engine output.

        Args:
            raw_text: Text returned by the inference client.

        Returns:
            The validated, immutable AnalysisResult.

        Raises:
            SchemaViolationError: If the text is not JSON or does not match
                the schema. ``problems`` lists each offending field.
        """
        try:
            data = json.loads(_strip_code_fence(raw_text))
        except json.JSONDecodeError as exc:
            raise SchemaViolationError(
                f"Engine returned invalid JSON: {exc}\nRaw response: {raw_text[:500]}",
                problems=[f"<root>: {exc.msg}"],
            ) from exc

        if not isinstance(data, dict):
            raise SchemaViolationError(
                f"Engine returned {type(data).__name__}, expected an object",
                problems=["<root>: expected an object"],
            )

        try:
            result = AnalysisResult.model_validate(data)
        except ValidationError as exc:
            problems = [
                f"{_format_location(err['loc'])}: {err['msg']}" for err in exc.errors()
            ]
            raise SchemaViolationError(
                f"Engine output does not match the result schema ({len(problems)} problem(s)): "
                + "; ".join(problems[:5]),
                problems=problems,
            ) from exc

        missing = result.missing_fixes()
        if missing:
            logger.warning(
                "Engine omitted fixes where they were required: %s", ", ".join(missing)
            )

        return result
