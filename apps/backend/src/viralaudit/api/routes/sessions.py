"""Analysis session endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile

from viralaudit.api.deps import get_session_registry
from viralaudit.api.schemas import SessionStateResponse
from viralaudit.errors import InvalidTransitionError
from viralaudit.models.media import SelectedFile
from viralaudit.session.machine import AnalysisStateMachine
from viralaudit.session.registry import SessionRegistry

router = APIRouter(prefix="/api/v1/sessions", tags=["sessions"])


def _get_machine(registry: SessionRegistry, session_id: str) -> AnalysisStateMachine:
    """Raise 404 if the session does not exist."""
    machine = registry.get(session_id)
    if machine is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return machine


@router.post("", response_model=SessionStateResponse, status_code=201)
async def create_session(
    registry: SessionRegistry = Depends(get_session_registry),
) -> SessionStateResponse:
    session_id, machine = registry.create()
    return SessionStateResponse.from_machine(session_id, machine)


@router.get("/{session_id}", response_model=SessionStateResponse)
async def get_session(
    session_id: str,
    registry: SessionRegistry = Depends(get_session_registry),
) -> SessionStateResponse:
    machine = _get_machine(registry, session_id)
    return SessionStateResponse.from_machine(session_id, machine)


@router.post("/{session_id}/submit", response_model=SessionStateResponse, status_code=202)
async def submit_video(
    session_id: str,
    file: UploadFile = File(..., description="Video to critique"),
    registry: SessionRegistry = Depends(get_session_registry),
) -> SessionStateResponse:
    machine = _get_machine(registry, session_id)
    if not machine.can_submit:
        raise HTTPException(
            status_code=409, detail=f"Session is {machine.phase.value}; reset it first"
        )

    # One byte past the limit is enough to trip the size check.
    data = await file.read(machine.max_upload_bytes + 1)
    selected = SelectedFile.from_bytes(
        data,
        name=file.filename or "upload",
        mime_type=file.content_type,
    )

    try:
        machine.start(selected)
    except InvalidTransitionError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc

    return SessionStateResponse.from_machine(session_id, machine)


@router.post("/{session_id}/cancel", response_model=SessionStateResponse)
async def cancel_analysis(
    session_id: str,
    registry: SessionRegistry = Depends(get_session_registry),
) -> SessionStateResponse:
    machine = _get_machine(registry, session_id)
    try:
        machine.cancel()
    except InvalidTransitionError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return SessionStateResponse.from_machine(session_id, machine)


@router.post("/{session_id}/reset", response_model=SessionStateResponse)
async def reset_session(
    session_id: str,
    registry: SessionRegistry = Depends(get_session_registry),
) -> SessionStateResponse:
    machine = _get_machine(registry, session_id)
    try:
        machine.reset()
    except InvalidTransitionError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return SessionStateResponse.from_machine(session_id, machine)


@router.delete("/{session_id}", status_code=204)
async def delete_session(
    session_id: str,
    registry: SessionRegistry = Depends(get_session_registry),
) -> Response:
    if not registry.remove(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return Response(status_code=204)
