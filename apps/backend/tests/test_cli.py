"""Tests for the command-line interface."""

import json
import sys
from pathlib import Path

import pytest

from viralaudit import cli
from viralaudit.config import settings
from viralaudit.services import inference


@pytest.fixture
def video(tmp_path: Path) -> Path:
    path = tmp_path / "ad.mp4"
    path.write_bytes(b"\x00\x00\x00\x18ftypmp42")
    return path


@pytest.fixture
def use_fake(monkeypatch: pytest.MonkeyPatch, fake_client):
    monkeypatch.setattr(inference, "GeminiInferenceClient", lambda model=None: fake_client)
    return fake_client


def _run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
    monkeypatch.setattr(sys, "argv", ["viralaudit-cli", *argv])
    with pytest.raises(SystemExit) as exc_info:
        cli.main()
    return exc_info.value.code


class TestSchemaCommand:
    def test_prints_schema(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run(monkeypatch, "schema") == 0
        schema = json.loads(capsys.readouterr().out)
        assert "overallScore" in schema["required"]


class TestAnalyzeCommand:
    def test_missing_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run(monkeypatch, "analyze", str(tmp_path / "nope.mp4")) == 1
        assert "file not found" in capsys.readouterr().err

    def test_missing_api_key(
        self,
        monkeypatch: pytest.MonkeyPatch,
        video: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr(settings, "gemini_api_key", None)
        assert _run(monkeypatch, "analyze", str(video)) == 1
        assert "API key" in capsys.readouterr().err

    def test_markdown_to_stdout(
        self,
        monkeypatch: pytest.MonkeyPatch,
        video: Path,
        use_fake,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert _run(monkeypatch, "analyze", str(video)) == 0
        out = capsys.readouterr().out
        assert out.startswith("# ad.mp4")
        assert "**Overall score**: 42/100" in out
        assert len(use_fake.calls) == 1

    def test_json_to_file(
        self,
        monkeypatch: pytest.MonkeyPatch,
        video: Path,
        tmp_path: Path,
        use_fake,
    ) -> None:
        output = tmp_path / "report.json"
        assert _run(monkeypatch, "analyze", str(video), "--json", "-o", str(output)) == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["overallScore"] == 42

    def test_rejected_upload(
        self,
        monkeypatch: pytest.MonkeyPatch,
        tmp_path: Path,
        use_fake,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        doc = tmp_path / "notes.txt"
        doc.write_text("hello")
        assert _run(monkeypatch, "analyze", str(doc)) == 1
        assert "Unsupported file type" in capsys.readouterr().err
        assert use_fake.calls == []
