"""
goskeleton.models - Project Configuration and Render Context
============================================================

Pydantic models used throughout goskeleton.

    ProjectConfig
    ├── name: str          (checked by validate_project_name)
    ├── output_dir: Path   (default: current directory)
    └── template_dir: Path | None

    RenderContext
    └── Name: str          (the only value templates can reference)

Name Validation
---------------
The name check is deliberately narrow: it rejects spaces and the two path
separators and nothing else. Names such as ``..``, names starting with
``-`` and control characters are accepted. Hardening the check is out of
scope for this tool.

Usage Example
-------------
>>> from goskeleton.models import ProjectConfig
>>> config = ProjectConfig(name="shop")
>>> config.project_dir.name
'shop'
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from goskeleton.errors import InvalidNameError


# Characters a project name may not contain
DISALLOWED_NAME_CHARS = frozenset(" /\\")


# =============================================================================
# Name Validation
# =============================================================================

def validate_project_name(name: str) -> str:
    """
    Check that a project name is usable as a single directory name.

    Parameters
    ----------
    name : str
        The project name supplied by the user.

    Returns
    -------
    str
        The name, unchanged.

    Raises
    ------
    InvalidNameError
        If the name contains a space, ``/`` or ``\\``.

    Examples
    --------
    >>> validate_project_name("shop")
    'shop'
    >>> validate_project_name("my app")
    Traceback (most recent call last):
    ...
    goskeleton.errors.InvalidNameError: Invalid project name 'my app': ...
    """
    if any(ch in DISALLOWED_NAME_CHARS for ch in name):
        raise InvalidNameError(name)
    return name


# =============================================================================
# Render Context
# =============================================================================

class RenderContext(BaseModel):
    """
    Values exposed to every template during rendering.

    The field is named ``Name`` so templates read ``{{ Name }}``.
    """

    model_config = ConfigDict(frozen=True)

    Name: str


# =============================================================================
# Project Configuration
# =============================================================================

class ProjectConfig(BaseModel):
    """
    Configuration for a single generation run.

    Attributes
    ----------
    name : str
        Project name; also the name of the output directory.

    output_dir : Path
        Directory the project directory is created in.

    template_dir : Path | None
        On-disk directory holding a ``template/`` tree to use instead of
        the bundled one.
    """

    model_config = ConfigDict(frozen=True)

    name: Annotated[str, Field(
        min_length=1,
        description="Project name (no spaces or path separators)",
    )]
    output_dir: Path = Field(
        default_factory=Path.cwd,
        description="Directory where the project will be created",
    )
    template_dir: Path | None = Field(
        default=None,
        description="Directory containing a template/ tree (default: bundled)",
    )

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        return validate_project_name(v)

    @property
    def project_dir(self) -> Path:
        """Full path to the project directory (output_dir / name)."""
        return self.output_dir / self.name
