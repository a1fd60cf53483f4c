"""Custom exception classes for Dancer.

Every error raised while serving a workspace artifact carries the HTTP status
and a stable machine-readable code. Rendering happens in one place, the
exception handler installed by ``dancer.serve.app.create_app``.
"""

from typing import Optional


class DancerError(Exception):
    """Base class for errors surfaced at the HTTP boundary.

    Attributes:
        status_code: HTTP status to respond with
        message: Human-readable message
        code: Stable machine-readable error code
    """

    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, status_code: Optional[int] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}


class WorkspaceNotFoundError(DancerError):
    """Raised when an identifier does not resolve, or resolves to no workspace."""

    status_code = 404
    code = "WORKSPACE_NOT_FOUND"

    def __init__(self, message: str = "Workspace not found"):
        super().__init__(message)


class AbsentArtifactError(DancerError):
    """Raised when a workspace exists but the requested artifact has no content."""

    status_code = 404
    code = "NO_STARTING_POINTS"


class GenerationFailedError(DancerError):
    """Raised when a generator fails while producing an artifact.

    The failure is never cached, so the next request retries generation.
    """

    status_code = 500
    code = "SERVE_FAILED"
