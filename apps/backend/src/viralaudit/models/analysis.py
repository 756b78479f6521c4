"""Analysis result data models.

These models are the typed form of the structure the inference engine is
asked to return. Field names follow the engine's camelCase wire format
through aliases; validation is by alias only, so snake_case keys coming
from the engine are rejected as unknown fields.
"""

from collections.abc import Iterator
from enum import Enum
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StringConstraints,
    model_validator,
)
from pydantic.alias_generators import to_camel

# Literal value the engine uses in place of an absent fix.
FIX_SENTINEL = "None"

# Categories scoring below this must carry a fix.
FIX_REQUIRED_BELOW = 80

NonEmptyStr = Annotated[str, StringConstraints(strict=True, strip_whitespace=True, min_length=1)]
Score = Annotated[int, Field(strict=True, ge=0, le=100)]


class CheckStatus(str, Enum):
    """Outcome of a single diagnostic check."""

    PASS = "PASS"
    FAIL = "FAIL"
    WARN = "WARN"


class CheckLabel(str, Enum):
    """Fixed display label of each diagnostic check."""

    COMPLEXITY = "Complexity"
    STORYTELLING = "Storytelling"
    HOOK = "Hook"
    CAPTIONS = "Captions"
    COPY_VISIBILITY = "Copy Visibility"
    VISUAL_QUALITY = "Visual Quality"
    AUDIO_QUALITY = "Audio Quality"
    PACING = "Pacing"
    PAIN_POINT = "Pain Point"
    CALL_TO_ACTION = "Call to Action"


# Wire key -> label, in canonical order.
CHECK_LABELS: dict[str, CheckLabel] = {
    "complexity": CheckLabel.COMPLEXITY,
    "storytelling": CheckLabel.STORYTELLING,
    "hook": CheckLabel.HOOK,
    "captions": CheckLabel.CAPTIONS,
    "copyVisibility": CheckLabel.COPY_VISIBILITY,
    "visualQuality": CheckLabel.VISUAL_QUALITY,
    "audioQuality": CheckLabel.AUDIO_QUALITY,
    "pacing": CheckLabel.PACING,
    "painPoint": CheckLabel.PAIN_POINT,
    "cta": CheckLabel.CALL_TO_ACTION,
}

CATEGORY_KEYS: tuple[str, ...] = ("visual", "audio", "copy")


def _parse_fix(value: Any) -> str | None:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"fix must be a non-empty string ('{FIX_SENTINEL}' when no fix applies)")
    value = value.strip()
    return None if value == FIX_SENTINEL else value


# Required on the wire; the sentinel is exposed as None.
Fix = Annotated[str | None, BeforeValidator(_parse_fix)]


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        extra="forbid",
        frozen=True,
    )


class CategoryResult(_WireModel):
    """Score and critique for one pillar (visual, audio, copy)."""

    score: Score = Field(..., description="Score 0-100")
    feedback: NonEmptyStr = Field(..., description="Specific critique")
    fix: Fix = Field(..., description="Actionable fix, None when not needed")

    @property
    def needs_fix(self) -> bool:
        """Whether the score is low enough that a fix is expected."""
        return self.score < FIX_REQUIRED_BELOW


class SpecificCheck(_WireModel):
    """One of the ten fixed diagnostic checks."""

    label: CheckLabel = Field(..., description="Fixed label of the check")
    status: CheckStatus = Field(..., description="PASS, FAIL or WARN")
    details: NonEmptyStr = Field(..., description="What the check found")
    fix: Fix = Field(..., description="Actionable fix, None when not needed")

    @property
    def needs_fix(self) -> bool:
        """Whether the status is one that is expected to carry a fix."""
        return self.status is not CheckStatus.PASS


class TimestampedNote(_WireModel):
    """A critique anchored to a point in the video's timeline."""

    time: Annotated[
        str,
        StringConstraints(strict=True, strip_whitespace=True, pattern=r"^\d{1,3}:[0-5]\d$"),
    ] = Field(..., description="Format MM:SS")
    note: NonEmptyStr = Field(..., description="The specific critique")

    @property
    def seconds(self) -> int:
        """Offset of the note from the start of the video."""
        minutes, seconds = self.time.split(":")
        return int(minutes) * 60 + int(seconds)


class Categories(_WireModel):
    """The three pillar evaluations."""

    visual: CategoryResult
    audio: CategoryResult
    copy_: CategoryResult = Field(..., alias="copy")

    def items(self) -> Iterator[tuple[str, CategoryResult]]:
        """Yield (wire key, result) pairs in canonical order."""
        yield "visual", self.visual
        yield "audio", self.audio
        yield "copy", self.copy_


class Checks(_WireModel):
    """The ten fixed diagnostic checks."""

    complexity: SpecificCheck
    storytelling: SpecificCheck
    hook: SpecificCheck
    captions: SpecificCheck
    copy_visibility: SpecificCheck
    visual_quality: SpecificCheck
    audio_quality: SpecificCheck
    pacing: SpecificCheck
    pain_point: SpecificCheck
    cta: SpecificCheck

    @model_validator(mode="after")
    def _labels_match_keys(self) -> "Checks":
        mismatched = [
            f"{key}: expected '{CHECK_LABELS[key].value}', got '{check.label.value}'"
            for key, check in self.items()
            if check.label is not CHECK_LABELS[key]
        ]
        if mismatched:
            raise ValueError("check labels do not match their keys: " + "; ".join(mismatched))
        return self

    def items(self) -> Iterator[tuple[str, SpecificCheck]]:
        """Yield (wire key, check) pairs in canonical order."""
        for key in CHECK_LABELS:
            yield key, getattr(self, _FIELD_BY_KEY[key])

    def __getitem__(self, key: str) -> SpecificCheck:
        return getattr(self, _FIELD_BY_KEY[key])

    def keys(self) -> list[str]:
        return list(CHECK_LABELS)


_FIELD_BY_KEY: dict[str, str] = {
    to_camel(name): name for name in Checks.model_fields
}


class AnalysisResult(_WireModel):
    """Validated critique of one video."""

    overall_score: Score = Field(..., description="Overall score out of 100")
    brutal_summary: NonEmptyStr = Field(..., description="Harsh summary of the ad's potential")
    categories: Categories
    checks: Checks
    timestamped_notes: tuple[TimestampedNote, ...] = Field(
        ..., description="Critiques anchored to timestamps"
    )

    def flagged_checks(self) -> list[tuple[str, SpecificCheck]]:
        """Checks that did not pass, in canonical order."""
        return [(key, check) for key, check in self.checks.items() if check.needs_fix]

    def missing_fixes(self) -> list[str]:
        """Paths of entries that should carry a fix but do not."""
        missing = [
            f"categories.{key}"
            for key, category in self.categories.items()
            if category.needs_fix and category.fix is None
        ]
        missing.extend(
            f"checks.{key}" for key, check in self.checks.items() if check.needs_fix and check.fix is None
        )
        return missing

    def to_wire(self) -> dict[str, Any]:
        """Serialize back to the engine's camelCase shape, restoring the fix sentinel."""
        data = self.model_dump(mode="json", by_alias=True)
        for section in ("categories", "checks"):
            for entry in data[section].values():
                if entry["fix"] is None:
                    entry["fix"] = FIX_SENTINEL
        return data
