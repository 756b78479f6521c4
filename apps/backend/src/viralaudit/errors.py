"""Custom exceptions for ViralAudit."""


class ViralAuditError(Exception):
    """Base exception for ViralAudit."""

    pass


class FileIngestError(ViralAuditError):
    """Selected file cannot be submitted for analysis."""

    pass


class SizeExceededError(FileIngestError):
    """File is larger than the upload limit."""

    def __init__(self, size: int, limit: int):
        super().__init__(f"File is {size} bytes; the limit is {limit} bytes")
        self.size = size
        self.limit = limit


class UnsupportedTypeError(FileIngestError):
    """File is not a video."""

    def __init__(self, mime_type: str | None):
        super().__init__(f"Unsupported file type: {mime_type or 'unknown'}")
        self.mime_type = mime_type


class InferenceError(ViralAuditError):
    """Inference engine call failed."""

    pass


class MissingAPIKeyError(InferenceError):
    """Raised when no inference API key is configured."""

    def __init__(self, provider: str = "gemini"):
        super().__init__(
            f"API key for '{provider}' not found. Set the VIRALAUDIT_GEMINI_API_KEY "
            "environment variable or pass api_key parameter."
        )
        self.provider = provider


class TransportError(InferenceError):
    """Network or service-level failure while calling the engine."""

    pass


class EmptyResponseError(InferenceError):
    """Engine answered without any text."""

    pass


class SchemaViolationError(ViralAuditError):
    """Engine output does not match the result schema."""

    def __init__(self, message: str, problems: list[str] | None = None):
        super().__init__(message)
        self.problems = problems or []


class InvalidTransitionError(ViralAuditError):
    """Action is not allowed in the current analysis phase."""

    def __init__(self, action: str, phase: str):
        super().__init__(f"Cannot {action} while {phase}")
        self.action = action
        self.phase = phase
