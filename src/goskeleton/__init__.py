"""
goskeleton - Go REST API Project Generator
==========================================

A CLI tool that creates a ready-to-run Go REST API project from a bundled
template tree.

Quick Start
-----------
```bash
pip install goskeleton
goskeleton new --name myservice
```

Example
-------
>>> from goskeleton import ProjectConfig, create_project
>>> result = create_project(ProjectConfig(name="myservice"), verbose=False)
>>> result.project_path.name
'myservice'

Architecture
------------
- ``cli``: Typer-based command line interface
- ``generator``: Template tree materialization
- ``tree``: Read-only template tree providers
- ``models``: Pydantic configuration and name validation
- ``errors``: Exception hierarchy
- ``templates``: The bundled Go project template tree
"""

# =============================================================================
# Package Metadata
# =============================================================================
__version__ = "1.0.7"

# =============================================================================
# Public API Exports
# =============================================================================

from goskeleton.errors import GoSkeletonError, InvalidNameError, MaterializeError
from goskeleton.generator import GenerationResult, create_project, materialize
from goskeleton.models import ProjectConfig, RenderContext, validate_project_name
from goskeleton.tree import (
    DirectoryTemplateTree,
    MappingTemplateTree,
    PackageTemplateTree,
    TemplateTree,
)


__all__ = [
    "DirectoryTemplateTree",
    "GenerationResult",
    "GoSkeletonError",
    "InvalidNameError",
    "MappingTemplateTree",
    "MaterializeError",
    "PackageTemplateTree",
    "ProjectConfig",
    "RenderContext",
    "TemplateTree",
    "__version__",
    "create_project",
    "materialize",
    "validate_project_name",
]
