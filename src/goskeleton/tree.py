"""
goskeleton.tree - Read-Only Template Tree Providers
===================================================

The materializer never touches template storage directly. It talks to a
:class:`TemplateTree`, a read-only hierarchy of directories and files
addressed by slash-separated paths under a fixed root (``template``).

Providers
---------
PackageTemplateTree
    The tree bundled with goskeleton as package data, read through
    ``importlib.resources`` so it works from wheels and zip imports.

DirectoryTemplateTree
    An on-disk directory that contains a ``template/`` subdirectory.

MappingTemplateTree
    An in-memory tree built from ``{path: bytes}``. Handy for tests and
    for callers that assemble templates programmatically.

Traversal
---------
:func:`walk_tree` yields every entry depth-first in pre-order, so a
directory always comes before anything beneath it. Siblings come out in
lexicographic order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from importlib.resources import files
from pathlib import Path
from typing import TYPE_CHECKING

from goskeleton.errors import FileReadError


if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping
    from importlib.resources.abc import Traversable


# Root segment every template path starts with
TEMPLATE_ROOT = "template"


@dataclass(frozen=True)
class TemplateEntry:
    """A single node of a template tree."""

    path: str
    is_dir: bool


# =============================================================================
# Provider Interface
# =============================================================================

class TemplateTree(ABC):
    """
    Abstract read-only hierarchical file provider.

    Paths are slash-separated and relative to the provider, e.g.
    ``template/cmd/app/main.go.tmpl``. Missing paths raise
    FileNotFoundError.
    """

    @abstractmethod
    def list_entries(self, path: str) -> list[str]:
        """Return the sorted child names of the directory at ``path``."""

    @abstractmethod
    def read_bytes(self, path: str) -> bytes:
        """Return the raw content of the file at ``path``."""

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """Return True if ``path`` names a directory."""


def walk_tree(tree: TemplateTree, root: str = TEMPLATE_ROOT) -> Iterator[TemplateEntry]:
    """
    Walk a template tree depth-first in pre-order.

    Anything that is not a directory is yielded as a file without being
    read; a missing file surfaces when its content is read.

    Parameters
    ----------
    tree : TemplateTree
        The provider to walk.

    root : str
        Path to start from. It is yielded first.

    Yields
    ------
    TemplateEntry
        Every entry under ``root``, each directory before its children.

    Raises
    ------
    FileReadError
        If the provider fails while inspecting or listing a directory.
    """
    try:
        is_dir = tree.is_dir(root)
        children = tree.list_entries(root) if is_dir else []
    except OSError as e:
        raise FileReadError(root, e) from e

    yield TemplateEntry(root, is_dir=is_dir)
    for child in children:
        yield from walk_tree(tree, f"{root}/{child}")


# =============================================================================
# Traversable-backed Providers
# =============================================================================

class _TraversableTree(TemplateTree):
    """Shared implementation over a Traversable or Path base."""

    def __init__(self, base: Traversable | Path) -> None:
        self._base = base

    def _resolve(self, path: str) -> Traversable | Path:
        node = self._base
        for part in path.split("/"):
            if part:
                node = node.joinpath(part)
        return node

    def list_entries(self, path: str) -> list[str]:
        node = self._resolve(path)
        if not node.is_dir():
            raise FileNotFoundError(f"No template directory: {path}")
        return sorted(child.name for child in node.iterdir())

    def read_bytes(self, path: str) -> bytes:
        node = self._resolve(path)
        if not node.is_file():
            raise FileNotFoundError(f"No template file: {path}")
        return node.read_bytes()

    def is_dir(self, path: str) -> bool:
        return self._resolve(path).is_dir()


class PackageTemplateTree(_TraversableTree):
    """The template tree bundled in ``goskeleton/templates/``."""

    def __init__(self, package: str = "goskeleton.templates") -> None:
        super().__init__(files(package))


class DirectoryTemplateTree(_TraversableTree):
    """
    A template tree stored on disk.

    ``base`` must contain the ``template/`` root directory.
    """

    def __init__(self, base: Path | str) -> None:
        super().__init__(Path(base))


# =============================================================================
# In-memory Provider
# =============================================================================

class MappingTemplateTree(TemplateTree):
    """
    A template tree held in memory.

    Parameters
    ----------
    entries : Mapping[str, bytes | str | None]
        Map of path to file content. A value of None declares a directory.
        Parent directories of every path are implied.

    Examples
    --------
    >>> tree = MappingTemplateTree({"template/cmd/main.go.tmpl": b"package main"})
    >>> [e.path for e in walk_tree(tree)]
    ['template', 'template/cmd', 'template/cmd/main.go.tmpl']
    """

    def __init__(self, entries: Mapping[str, bytes | str | None]) -> None:
        self._files: dict[str, bytes] = {}
        self._dirs: set[str] = set()

        for raw_path, content in entries.items():
            path = raw_path.strip("/")
            parts = path.split("/")
            for i in range(1, len(parts)):
                self._dirs.add("/".join(parts[:i]))

            if content is None:
                self._dirs.add(path)
            elif isinstance(content, str):
                self._files[path] = content.encode("utf-8")
            else:
                self._files[path] = bytes(content)

        clash = self._dirs & self._files.keys()
        if clash:
            msg = f"Paths declared as both file and directory: {sorted(clash)}"
            raise ValueError(msg)

    def list_entries(self, path: str) -> list[str]:
        path = path.strip("/")
        if path not in self._dirs:
            raise FileNotFoundError(f"No template directory: {path}")
        prefix = f"{path}/"
        children = {
            p[len(prefix):].split("/", 1)[0]
            for p in (*self._dirs, *self._files)
            if p.startswith(prefix)
        }
        return sorted(children)

    def read_bytes(self, path: str) -> bytes:
        try:
            return self._files[path.strip("/")]
        except KeyError:
            raise FileNotFoundError(f"No template file: {path}") from None

    def is_dir(self, path: str) -> bool:
        return path.strip("/") in self._dirs
