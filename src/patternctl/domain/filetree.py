"""File/folder tree (Composite pattern).

Files and folders share the :class:`FileSystemComponent` interface, so a
folder renders its children without knowing which kind each one is.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

CHILD_INDENT = "  "


class FileSystemComponent(ABC):
    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def render(self, indent: str = " ") -> list[str]:
        """Return one display line per node in this subtree."""

    @abstractmethod
    def count(self) -> tuple[int, int]:
        """Return ``(folders, files)`` in this subtree, self included."""


class FileNode(FileSystemComponent):
    def render(self, indent: str = " ") -> list[str]:
        return [f"{indent} -File: {self.name}"]

    def count(self) -> tuple[int, int]:
        return 0, 1


class FolderNode(FileSystemComponent):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.children: list[FileSystemComponent] = []

    def add(self, component: FileSystemComponent) -> FolderNode:
        self.children.append(component)
        return self

    def render(self, indent: str = " ") -> list[str]:
        lines = [f"{indent} +Folder: {self.name}"]
        for child in self.children:
            lines.extend(child.render(indent + CHILD_INDENT))
        return lines

    def count(self) -> tuple[int, int]:
        folders, files = 1, 0
        for child in self.children:
            sub_folders, sub_files = child.count()
            folders += sub_folders
            files += sub_files
        return folders, files


def demo_tree() -> FolderNode:
    """The sample hierarchy from the classic Composite walkthrough."""
    folder1 = FolderNode("Folder 1").add(FileNode("file1.txt")).add(FileNode("file2.txt"))
    folder3 = FolderNode("Folder 3").add(FileNode("file4.txt"))
    folder2 = (
        FolderNode("Folder 2")
        .add(FileNode("file3.txt"))
        .add(folder3)
        .add(FolderNode("Folder 5"))
    )
    return FolderNode("ROOT").add(folder1).add(folder2)


def tree_from_path(
    path: Path,
    *,
    max_depth: int | None = None,
    show_hidden: bool = False,
) -> FolderNode:
    """Build a composite from a directory on disk.

    Folders come before files, each group sorted by name.  Folders deeper
    than *max_depth* are listed without their contents.

    Raises:
        NotADirectoryError: *path* is not a directory.
    """
    if not path.is_dir():
        raise NotADirectoryError(str(path))
    return _walk(path, path.name or str(path), 0, max_depth, show_hidden)


def _walk(
    directory: Path,
    name: str,
    depth: int,
    max_depth: int | None,
    show_hidden: bool,
) -> FolderNode:
    folder = FolderNode(name)
    if max_depth is not None and depth >= max_depth:
        return folder
    entries = [p for p in directory.iterdir() if show_hidden or not p.name.startswith(".")]
    entries.sort(key=lambda p: (not p.is_dir(), p.name))
    for entry in entries:
        if entry.is_dir():
            folder.add(_walk(entry, entry.name, depth + 1, max_depth, show_hidden))
        else:
            folder.add(FileNode(entry.name))
    return folder
