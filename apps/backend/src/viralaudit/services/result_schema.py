"""Output schema the inference engine must follow.

Built once at import time and passed as ``response_schema`` on every
request. Mirrors :class:`viralaudit.models.analysis.AnalysisResult`.
"""

from typing import Any

from google.genai import types

from viralaudit.models.analysis import CHECK_LABELS, CheckStatus

_CHECK_DETAILS: dict[str, str] = {
    "complexity": "Reading level analysis",
    "storytelling": "Hero/Guide/Solution framework check",
    "hook": "Is the first 3s compelling?",
    "captions": "Are captions present and readable?",
    "copyVisibility": "Is on-screen text legible?",
    "visualQuality": "Resolution, lighting, coloring",
    "audioQuality": "Clear voiceover, balanced music",
    "pacing": "Is the flow fast/engaging?",
    "painPoint": "Is the customer problem clear?",
    "cta": "Is the next step clear?",
}

_CATEGORY_FEEDBACK: dict[str, str] = {
    "visual": "Specific critique on visuals",
    "audio": "Specific critique on audio",
    "copy": "Specific critique on copy/script",
}

_CATEGORY_FIX = "Actionable fix if score < 80, else 'None'"
_CHECK_FIX = "Brief actionable fix if status is FAIL/WARN, else 'None'"


def _string(description: str | None = None, enum: list[str] | None = None) -> types.Schema:
    return types.Schema(type=types.Type.STRING, description=description, enum=enum)


def _score(description: str) -> types.Schema:
    return types.Schema(
        type=types.Type.INTEGER,
        description=description,
        minimum=0,
        maximum=100,
    )


def _category(key: str) -> types.Schema:
    return types.Schema(
        type=types.Type.OBJECT,
        properties={
            "score": _score("Score 0-100"),
            "feedback": _string(_CATEGORY_FEEDBACK[key]),
            "fix": _string(_CATEGORY_FIX),
        },
        required=["score", "feedback", "fix"],
    )


def _check(key: str) -> types.Schema:
    return types.Schema(
        type=types.Type.OBJECT,
        properties={
            "label": _string(enum=[CHECK_LABELS[key].value]),
            "status": _string(enum=[status.value for status in CheckStatus]),
            "details": _string(_CHECK_DETAILS[key]),
            "fix": _string(_CHECK_FIX),
        },
        required=["label", "status", "details", "fix"],
    )


def build_result_schema() -> types.Schema:
    """Build the response schema for an analysis request."""
    return types.Schema(
        type=types.Type.OBJECT,
        properties={
            "overallScore": _score("Overall score out of 100"),
            "brutalSummary": _string("A harsh, direct summary of the ad's performance potential."),
            "categories": types.Schema(
                type=types.Type.OBJECT,
                properties={key: _category(key) for key in _CATEGORY_FEEDBACK},
                required=list(_CATEGORY_FEEDBACK),
            ),
            "checks": types.Schema(
                type=types.Type.OBJECT,
                properties={key: _check(key) for key in CHECK_LABELS},
                required=list(CHECK_LABELS),
            ),
            "timestampedNotes": types.Schema(
                type=types.Type.ARRAY,
                items=types.Schema(
                    type=types.Type.OBJECT,
                    properties={
                        "time": _string("Format MM:SS"),
                        "note": _string("The specific critique"),
                    },
                    required=["time", "note"],
                ),
            ),
        },
        required=["overallScore", "brutalSummary", "categories", "checks", "timestampedNotes"],
    )


RESULT_SCHEMA: types.Schema = build_result_schema()


def result_schema_json() -> dict[str, Any]:
    """Return the schema as plain JSON-compatible data."""
    return RESULT_SCHEMA.model_dump(mode="json", exclude_none=True)
