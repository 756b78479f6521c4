"""Analysis session state machine."""

from viralaudit.session.machine import (
    GENERIC_FAILURE_MESSAGE,
    SIZE_EXCEEDED_MESSAGE,
    UNSUPPORTED_TYPE_MESSAGE,
    AnalysisStateMachine,
)
from viralaudit.session.models import AnalysisPhase, AnalysisState

__all__ = [
    "AnalysisPhase",
    "AnalysisState",
    "AnalysisStateMachine",
    "GENERIC_FAILURE_MESSAGE",
    "SIZE_EXCEEDED_MESSAGE",
    "UNSUPPORTED_TYPE_MESSAGE",
]
