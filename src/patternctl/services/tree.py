"""TreeService — renders the composite file tree."""

from __future__ import annotations

from pathlib import Path

from patternctl.domain.filetree import FolderNode, demo_tree, tree_from_path
from patternctl.services.base import BaseService
from patternctl.services.result import ServiceResult


def _tree_result(root: FolderNode, source: str) -> ServiceResult:
    folders, files = root.count()
    return ServiceResult(
        ok=True,
        op="show_tree",
        data={
            "root": root.name,
            "source": source,
            "folders": folders,
            "files": files,
            "lines": root.render(),
        },
    )


class TreeService(BaseService):
    def demo(self) -> ServiceResult:
        return _tree_result(demo_tree(), "demo")

    def from_path(
        self,
        path: Path,
        *,
        max_depth: int | None = None,
        show_hidden: bool | None = None,
    ) -> ServiceResult:
        """Build the tree for *path*; CLI arguments override ``[tree]``."""
        cfg = self._settings.tree
        depth = max_depth if max_depth is not None else cfg.max_depth
        hidden = show_hidden if show_hidden is not None else cfg.show_hidden
        try:
            root = tree_from_path(path, max_depth=depth, show_hidden=hidden)
        except NotADirectoryError:
            return ServiceResult.failure(
                "show_tree",
                "NOT_A_DIRECTORY",
                f"Not a directory: {path}",
                path=str(path),
            )
        return _tree_result(root, str(path))
