"""Fatal build errors for the publishing context."""

from pathlib import Path
from typing import Optional


class VitaeBuildError(Exception):
    """Base class for errors that abort a build."""


class ResumeLoadError(VitaeBuildError):
    """
    Exception raised when the resume data file cannot be read or parsed.

    Attributes:
        message: Error description
        resume_path: Path of the resume file that failed to load
        original_error: The underlying OSError / JSONDecodeError, if any
    """

    def __init__(
        self,
        message: str,
        resume_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.resume_path = resume_path
        self.original_error = original_error

        parts = [message]

        if resume_path:
            parts.append(f"File: {resume_path}")

        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))


class RenderError(VitaeBuildError):
    """
    Exception raised when the primary HTML render fails.

    Attributes:
        message: Error description
        result: RenderResult from the renderer with its diagnostics
    """

    def __init__(self, message: str, result=None):  # RenderResult
        self.message = message
        self.result = result

        parts = [message]
        if result is not None:
            parts.extend(f"  - {err}" for err in result.errors)

        super().__init__("\n".join(parts))
