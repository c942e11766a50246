"""Exception taxonomy for the audit pipeline.

Every error carries the HTTP status it is reported with, so the API layer
can render any of them through one handler.
"""

from __future__ import annotations

from dataclasses import dataclass


class AuditError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(AuditError):
    status_code = 500


class EmptySubmissionError(AuditError):
    status_code = 400


class FetchError(AuditError):
    status_code = 400

    def __init__(self, message: str, http_status: int | None = None):
        super().__init__(message)
        self.http_status = http_status


class FetchTimeoutError(FetchError):
    pass


class ExtractionError(AuditError):
    status_code = 400


@dataclass(frozen=True)
class ModelAttempt:
    """One backend call inside a single orchestration run."""

    model_id: str
    text: str | None = None
    reason: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.text is not None


class ModelExhaustionError(AuditError):
    status_code = 429

    def __init__(self, attempts: list[ModelAttempt]):
        log = " ".join(f"[{a.model_id}]: {a.reason}." for a in attempts)
        super().__init__(f"All inference models failed. {log}".strip())
        self.attempts = list(attempts)


class MalformedResponseError(AuditError):
    status_code = 502
