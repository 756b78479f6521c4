"""Shared fixtures for ViralAudit tests."""

from __future__ import annotations

import asyncio
import json
from typing import Any

import pytest

from viralaudit.models.analysis import CHECK_LABELS
from viralaudit.models.media import AnalysisRequest, SelectedFile

MiB = 1024 * 1024


class FakeInferenceClient:
    """Inference backend that records requests and replays a canned answer."""

    def __init__(
        self,
        response: str | Exception | None = None,
        gate: asyncio.Event | None = None,
    ) -> None:
        self.response = response
        self.gate = gate
        self.calls: list[AnalysisRequest] = []
        self.model = "fake-model"

    @property
    def name(self) -> str:
        return "fake"

    async def analyze(self, payload: AnalysisRequest) -> str:
        self.calls.append(payload)
        if self.gate is not None:
            await self.gate.wait()
        if isinstance(self.response, Exception):
            raise self.response
        return self.response  # type: ignore[return-value]


def make_wire_result(**overrides: Any) -> dict[str, Any]:
    """Build a well-formed engine response as decoded JSON."""
    checks = {
        key: {
            "label": label.value,
            "status": "PASS",
            "details": f"{label.value} looks fine",
            "fix": "None",
        }
        for key, label in CHECK_LABELS.items()
    }
    checks["hook"] = {
        "label": "Hook",
        "status": "FAIL",
        "details": "Nothing happens in the first 3 seconds.",
        "fix": "Open on the product in use.",
    }
    data: dict[str, Any] = {
        "overallScore": 42,
        "brutalSummary": "This ad is forgettable.",
        "categories": {
            "visual": {
                "score": 30,
                "feedback": "Dark, muddy footage.",
                "fix": "Add a 3-second branded intro",
            },
            "audio": {"score": 85, "feedback": "Clear voiceover.", "fix": "None"},
            "copy": {"score": 55, "feedback": "Too many big words.", "fix": "Cut every sentence in half."},
        },
        "checks": checks,
        "timestampedNotes": [
            {"time": "00:04", "note": "The pacing drops here."},
            {"time": "00:12", "note": "The CTA is buried under music."},
        ],
    }
    data.update(overrides)
    return data


@pytest.fixture
def wire_result() -> dict[str, Any]:
    return make_wire_result()


@pytest.fixture
def raw_result(wire_result: dict[str, Any]) -> str:
    return json.dumps(wire_result)


@pytest.fixture
def video_file() -> SelectedFile:
    return SelectedFile.from_bytes(b"\x00\x00\x00\x18ftypmp42", name="ad.mp4", mime_type="video/mp4")


@pytest.fixture
def fake_client_cls() -> type[FakeInferenceClient]:
    return FakeInferenceClient


@pytest.fixture
def fake_client(raw_result: str) -> FakeInferenceClient:
    return FakeInferenceClient(raw_result)
