"""Request and response schemas for the ViralAudit API."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from viralaudit.export.report import generate_report_json
from viralaudit.session.machine import AnalysisStateMachine


class SessionStateResponse(BaseModel):
    session_id: str
    phase: str
    can_submit: bool
    file_name: str | None = None
    error: str | None = None
    result: dict[str, Any] | None = Field(
        None, description="Critique in camelCase form; fixes are null when not needed"
    )
    updated_at: datetime

    @classmethod
    def from_machine(cls, session_id: str, machine: AnalysisStateMachine) -> SessionStateResponse:
        state = machine.state
        return cls(
            session_id=session_id,
            phase=state.phase.value,
            can_submit=machine.can_submit,
            file_name=state.file_name,
            error=state.error,
            result=generate_report_json(state.result) if state.result is not None else None,
            updated_at=state.updated_at,
        )
