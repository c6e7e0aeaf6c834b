"""
Error kinds raised by the analysis core.

InputError is raised before any network call. EncodingError, ServiceError and
ParseError are collapsed by the orchestrators into AnalysisFailedError, which
carries only the generic user-facing message; the underlying kind stays on
`__cause__` and in the logs.
"""

from typing import Optional

from veritas.config import settings


class VeritasError(Exception):
    """Base class for every error raised by the core."""


class InputError(VeritasError):
    """Nothing usable to send (empty text, no file)."""


class EncodingError(VeritasError):
    """A file or video frame could not be converted into a payload."""


class ServiceError(VeritasError):
    """The model service rejected the call or errored."""


class ParseError(VeritasError):
    """Model output did not conform to the expected schema."""


class AnalysisFailedError(VeritasError):
    def __init__(self, message: Optional[str] = None):
        super().__init__(message or settings.analysis_failed_message)


class ActionBusyError(VeritasError):
    """An invocation of the same action is already in flight for this client."""
