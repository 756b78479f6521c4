"""Tests for the result validator."""

import json
import logging
from typing import Any

import pytest

from viralaudit.errors import SchemaViolationError
from viralaudit.models.analysis import AnalysisResult
from viralaudit.services.validator import ResultValidator


@pytest.fixture
def validator() -> ResultValidator:
    return ResultValidator()


def test_valid_output(validator: ResultValidator, raw_result: str) -> None:
    result = validator.validate(raw_result)
    assert isinstance(result, AnalysisResult)
    assert 0 <= result.overall_score <= 100
    assert result.checks.keys() == list(json.loads(raw_result)["checks"])


def test_code_fence_tolerated(validator: ResultValidator, raw_result: str) -> None:
    result = validator.validate(f"```json\n{raw_result}\n```")
    assert result.overall_score == 42


def test_single_line_code_fence(validator: ResultValidator, raw_result: str) -> None:
    result = validator.validate(f"```json {raw_result}```")
    assert result.overall_score == 42


def test_bare_fence_without_newlines(validator: ResultValidator, raw_result: str) -> None:
    assert validator.validate(f"```{raw_result}```").overall_score == 42


def test_empty_notes_allowed(validator: ResultValidator, wire_result: dict[str, Any]) -> None:
    wire_result["timestampedNotes"] = []
    assert validator.validate(json.dumps(wire_result)).timestamped_notes == ()


@pytest.mark.parametrize("raw", ["", "not json", "{\"overallScore\": 4", "```\n```"])
def test_unparseable(validator: ResultValidator, raw: str) -> None:
    with pytest.raises(SchemaViolationError, match="invalid JSON"):
        validator.validate(raw)


@pytest.mark.parametrize("raw", ["[]", "42", "null", "\"text\""])
def test_not_an_object(validator: ResultValidator, raw: str) -> None:
    with pytest.raises(SchemaViolationError, match="expected an object"):
        validator.validate(raw)


def test_missing_top_level_field(validator: ResultValidator, wire_result: dict[str, Any]) -> None:
    del wire_result["brutalSummary"]
    with pytest.raises(SchemaViolationError) as exc_info:
        validator.validate(json.dumps(wire_result))
    assert any(p.startswith("brutalSummary") for p in exc_info.value.problems)


def test_out_of_range_score(validator: ResultValidator, wire_result: dict[str, Any]) -> None:
    wire_result["categories"]["audio"]["score"] = 140
    with pytest.raises(SchemaViolationError) as exc_info:
        validator.validate(json.dumps(wire_result))
    assert any(p.startswith("categories.audio.score") for p in exc_info.value.problems)


def test_unknown_status(validator: ResultValidator, wire_result: dict[str, Any]) -> None:
    wire_result["checks"]["cta"]["status"] = "MAYBE"
    with pytest.raises(SchemaViolationError) as exc_info:
        validator.validate(json.dumps(wire_result))
    assert any(p.startswith("checks.cta.status") for p in exc_info.value.problems)


def test_missing_check(validator: ResultValidator, wire_result: dict[str, Any]) -> None:
    del wire_result["checks"]["painPoint"]
    with pytest.raises(SchemaViolationError) as exc_info:
        validator.validate(json.dumps(wire_result))
    assert any(p.startswith("checks.painPoint") for p in exc_info.value.problems)


def test_extra_check(validator: ResultValidator, wire_result: dict[str, Any]) -> None:
    wire_result["checks"]["music"] = dict(wire_result["checks"]["pacing"])
    with pytest.raises(SchemaViolationError) as exc_info:
        validator.validate(json.dumps(wire_result))
    assert any(p.startswith("checks.music") for p in exc_info.value.problems)


def test_missing_fix_field(validator: ResultValidator, wire_result: dict[str, Any]) -> None:
    del wire_result["checks"]["hook"]["fix"]
    with pytest.raises(SchemaViolationError):
        validator.validate(json.dumps(wire_result))


def test_wrong_type(validator: ResultValidator, wire_result: dict[str, Any]) -> None:
    wire_result["timestampedNotes"] = {"time": "00:01", "note": "x"}
    with pytest.raises(SchemaViolationError):
        validator.validate(json.dumps(wire_result))


def test_missing_required_fix_is_only_logged(
    validator: ResultValidator,
    wire_result: dict[str, Any],
    caplog: pytest.LogCaptureFixture,
) -> None:
    wire_result["checks"]["hook"]["fix"] = "None"
    with caplog.at_level(logging.WARNING, logger="viralaudit.services.validator"):
        result = validator.validate(json.dumps(wire_result))
    assert result.checks.hook.fix is None
    assert "checks.hook" in caplog.text
