"""
goskeleton.errors - Exception Hierarchy
=======================================

All failures raised by goskeleton derive from :class:`GoSkeletonError` so the
CLI can report them uniformly.

Hierarchy
---------
    GoSkeletonError
    ├── InvalidNameError
    └── MaterializeError
        ├── DirectoryCreateError
        ├── FileReadError
        ├── TemplateParseError
        ├── FileCreateError
        ├── TemplateExecuteError
        └── CleanupError

Every :class:`MaterializeError` carries the offending path and the
underlying cause. Generation never retries and never rolls back: files
written before the failure stay on disk.
"""

from __future__ import annotations

from pathlib import Path


class GoSkeletonError(Exception):
    """Base class for all goskeleton errors."""


class InvalidNameError(GoSkeletonError, ValueError):
    """
    Raised when a project name contains a disallowed character.

    Subclasses ValueError so pydantic validators can raise it directly.

    Attributes
    ----------
    name : str
        The rejected project name.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Invalid project name '{name}': project name cannot contain "
            "spaces or path separators"
        )


class MaterializeError(GoSkeletonError):
    """
    A step of project materialization failed.

    Attributes
    ----------
    path : str | Path
        The template entry or output path that failed.

    cause : BaseException | None
        The underlying exception.
    """

    action = "materialize"

    def __init__(self, path: str | Path, cause: BaseException | None = None) -> None:
        self.path = path
        self.cause = cause
        message = f"failed to {self.action} {path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class DirectoryCreateError(MaterializeError):
    action = "create directory"


class FileReadError(MaterializeError):
    action = "read template"


class TemplateParseError(MaterializeError):
    action = "parse template"


class FileCreateError(MaterializeError):
    action = "create file"


class TemplateExecuteError(MaterializeError):
    action = "execute template"


class CleanupError(MaterializeError):
    action = "remove staging directory"
