"""
goskeleton.generator - Project Materialization
==============================================

This module turns a template tree into a real project directory.

Pipeline
--------
    1. Create the project root ``<output_dir>/<name>/``
    2. Walk the template tree depth-first, pre-order
    3. Create a directory for every directory entry
    4. Render every file entry through Jinja2 and write it out
    5. Remove the staging directory ``<name>/template/``

Path Rules
----------
- The ``template/`` prefix is stripped from every entry path.
- The tree's root entry ``template`` has no trailing slash, so it maps to
  ``<name>/template``. That staging directory is removed in step 5.
- A file whose relative path ends with ``.tmpl`` is written without the
  suffix. Content is always read from the original path.

Rendering
---------
Templates see a single variable, ``Name``, the project name::

    package main // {{ Name }}

EVERY file is rendered, not only ``.tmpl`` files. A non-template file that
happens to contain ``{{`` or ``{%`` is evaluated as Jinja2. This is
intentional: the suffix controls the output name, not whether rendering
happens. Undefined variables are errors (StrictUndefined).

The placeholder is Jinja2's ``{{ Name }}``, not Go text/template's
``{{.Name}}``. A template written for Go's syntax fails with
:class:`~goskeleton.errors.TemplateParseError`; port it by rewriting
``{{.Name}}`` as ``{{ Name }}``.

Failure Semantics
-----------------
The first failure aborts generation with a
:class:`~goskeleton.errors.MaterializeError` subclass naming the failing
path. Nothing is rolled back: files written before the failure stay on disk.

Usage Example
-------------
>>> from goskeleton.generator import materialize
>>> from goskeleton.tree import PackageTemplateTree
>>> result = materialize(PackageTemplateTree(), "shop")
>>> result.project_path.name
'shop'
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import Environment, StrictUndefined, Template, TemplateSyntaxError
from rich.console import Console
from rich.panel import Panel

from goskeleton.errors import (
    CleanupError,
    DirectoryCreateError,
    FileCreateError,
    FileReadError,
    TemplateExecuteError,
    TemplateParseError,
)
from goskeleton.models import ProjectConfig, RenderContext
from goskeleton.tree import (
    TEMPLATE_ROOT,
    DirectoryTemplateTree,
    PackageTemplateTree,
    walk_tree,
)


if TYPE_CHECKING:
    from goskeleton.tree import TemplateTree


# =============================================================================
# Module-Level Configuration
# =============================================================================

console = Console()

# Files ending with this suffix lose it in the output tree
MARKER_SUFFIX = ".tmpl"


# =============================================================================
# Result Data Classes
# =============================================================================

@dataclass
class GenerationResult:
    """
    Outcome of a successful materialization.

    Attributes
    ----------
    project_path : Path
        The project root directory.

    directories_created : list[Path]
        Directories created for template directory entries, in traversal
        order. The staging directory is not included.

    files_created : list[Path]
        Files written, in traversal order.
    """

    project_path: Path
    directories_created: list[Path] = field(default_factory=list)
    files_created: list[Path] = field(default_factory=list)


# =============================================================================
# Template Engine Setup
# =============================================================================

def create_jinja_env() -> Environment:
    """
    Create the Jinja2 environment used for every template file.

    Autoescaping is off since the output is source code, not HTML, and
    trailing newlines are preserved so rendered files match their
    templates byte for byte outside of substitutions.
    """
    return Environment(
        autoescape=False,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


# =============================================================================
# Path Helpers
# =============================================================================

def relative_template_path(path: str) -> str:
    """
    Strip the ``template/`` prefix from a tree path.

    >>> relative_template_path("template/cmd/main.go.tmpl")
    'cmd/main.go.tmpl'
    >>> relative_template_path("template")
    'template'
    """
    return path.removeprefix(f"{TEMPLATE_ROOT}/")


def get_output_path(project_path: Path, relative_path: str) -> Path:
    """
    Map a relative template path to its location in the output tree.

    >>> get_output_path(Path("shop"), "cmd/main.go.tmpl")
    PosixPath('shop/cmd/main.go')
    """
    relative_path = relative_path.removesuffix(MARKER_SUFFIX)
    return project_path.joinpath(*relative_path.split("/"))


def _make_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreateError(path, e) from e


# =============================================================================
# File Rendering
# =============================================================================

def render_file(
    env: Environment,
    tree: TemplateTree,
    template_path: str,
    output_path: Path,
    context: RenderContext,
) -> None:
    """
    Render one template file from the tree to ``output_path``.

    The output file is opened (and truncated) before rendering starts, so a
    rendering failure leaves an incomplete file behind.

    Raises
    ------
    FileReadError
        The content could not be read or is not UTF-8.
    DirectoryCreateError
        The output file's parent directory could not be created.
    TemplateParseError
        The content is not valid template syntax.
    FileCreateError
        The output file could not be opened for writing.
    TemplateExecuteError
        Rendering or writing the output failed.
    """
    try:
        source = tree.read_bytes(template_path).decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(template_path, e) from e

    _make_dir(output_path.parent)

    try:
        template: Template = env.from_string(source)
    except TemplateSyntaxError as e:
        raise TemplateParseError(template_path, e) from e

    try:
        handle = output_path.open("w", encoding="utf-8", newline="")
    except OSError as e:
        raise FileCreateError(output_path, e) from e

    with handle:
        try:
            template.stream(context.model_dump()).dump(handle)
        except Exception as e:
            raise TemplateExecuteError(template_path, e) from e


# =============================================================================
# Materialization
# =============================================================================

def materialize(
    tree: TemplateTree,
    name: str,
    *,
    output_dir: Path | None = None,
    verbose: bool = False,
) -> GenerationResult:
    """
    Materialize a template tree into ``<output_dir>/<name>/``.

    The name is used as given; validate it first with
    :func:`~goskeleton.models.validate_project_name`.

    Parameters
    ----------
    tree : TemplateTree
        Source of directories and template files.

    name : str
        Project name, used for the directory and as ``Name`` in templates.

    output_dir : Path | None
        Parent of the project directory. Defaults to the current directory.

    verbose : bool, default=False
        Print each created directory and file.

    Returns
    -------
    GenerationResult
        Paths of everything created.

    Raises
    ------
    MaterializeError
        On the first failure. Partial output is left on disk.
    """
    project_path = (output_dir if output_dir is not None else Path.cwd()) / name
    staging_path = project_path / TEMPLATE_ROOT
    result = GenerationResult(project_path=project_path)

    _make_dir(project_path)

    try:
        has_root = tree.is_dir(TEMPLATE_ROOT)
    except OSError as e:
        raise FileReadError(TEMPLATE_ROOT, e) from e
    if not has_root:
        missing = FileNotFoundError(f"No template directory: {TEMPLATE_ROOT}")
        raise FileReadError(TEMPLATE_ROOT, missing)

    env = create_jinja_env()
    context = RenderContext(Name=name)

    for entry in walk_tree(tree):
        relative_path = relative_template_path(entry.path)
        if not relative_path:
            continue

        if entry.is_dir:
            dir_path = project_path.joinpath(*relative_path.split("/"))
            _make_dir(dir_path)
            result.directories_created.append(dir_path)
            if verbose and dir_path != staging_path:
                console.print(f"  Created {dir_path.relative_to(project_path.parent)}/")
            continue

        output_path = get_output_path(project_path, relative_path)
        render_file(env, tree, entry.path, output_path, context)
        result.files_created.append(output_path)
        if verbose:
            console.print(f"  Created {output_path.relative_to(project_path.parent)}")

    try:
        if staging_path.is_dir():
            shutil.rmtree(staging_path)
    except OSError as e:
        raise CleanupError(staging_path, e) from e

    # Drop anything that lived under the staging directory
    result.directories_created = [
        p for p in result.directories_created if not p.is_relative_to(staging_path)
    ]
    result.files_created = [
        p for p in result.files_created if not p.is_relative_to(staging_path)
    ]

    return result


# =============================================================================
# Main Generation Function
# =============================================================================

def resolve_template_tree(config: ProjectConfig) -> TemplateTree:
    """Return the configured on-disk tree, or the bundled one."""
    if config.template_dir is not None:
        return DirectoryTemplateTree(config.template_dir)
    return PackageTemplateTree()


def create_project(
    config: ProjectConfig,
    *,
    verbose: bool = True,
) -> GenerationResult:
    """
    Create a new Go REST API project from the given configuration.

    Parameters
    ----------
    config : ProjectConfig
        Validated project configuration.

    verbose : bool, default=True
        Display progress and a summary panel on the console.

    Returns
    -------
    GenerationResult
        Paths of everything created.

    Raises
    ------
    MaterializeError
        If any step fails. See :func:`materialize`.
    """
    tree = resolve_template_tree(config)

    if verbose:
        console.print()
        console.print(
            Panel(
                f"[bold blue]Creating project:[/] [green]{config.name}[/]\n"
                f"[dim]Location: {config.project_dir}[/]",
                title="[bold]goskeleton[/]",
                border_style="blue",
            )
        )
        console.print()
        console.print("[bold]📝 Rendering templates...[/]")

    result = materialize(
        tree,
        config.name,
        output_dir=config.output_dir,
        verbose=verbose,
    )

    if verbose:
        console.print()
        console.print(
            Panel(
                f"[bold green]✨ Project created successfully![/]\n\n"
                f"[dim]Project:[/] {config.name}\n"
                f"[dim]Location:[/] {result.project_path}\n\n"
                f"[bold]Next steps:[/]\n"
                f"  1. cd {config.name}\n"
                f"  2. go mod tidy\n"
                f"  3. cp .env.example .env\n"
                f"  4. go run cmd/app/main.go",
                title="[bold green]Success[/]",
                border_style="green",
            )
        )

    return result
