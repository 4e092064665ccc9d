# codedrop/resolve/paths.py
"""
Map a block's filename onto a concrete path inside a ProjectTree.

Resolution is an ordered list of strategies; the first one that returns a
path wins. Reusing an existing member always outranks placement heuristics so
that a response never creates a duplicate of a file the tree already has.
"""
import os
import re
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from ..errors import PathResolutionError
from ..project.tree import Project, ProjectTree

Strategy = Callable[[str, ProjectTree], Optional[str]]


@dataclass(frozen=True)
class ResolvedPath:
    path: str
    exists: bool
    strategy: str


def _has_separator(filename: str) -> bool:
    return "/" in filename or "\\" in filename


def _extension(path: str) -> str:
    return os.path.splitext(os.path.basename(path.replace("\\", "/")))[1].lower()


def absolute_path(filename: str, tree: ProjectTree) -> Optional[str]:
    if os.path.isabs(filename):
        return filename
    return None


def existing_member(filename: str, tree: ProjectTree) -> Optional[str]:
    return tree.find_by_name(filename)


def relative_to_root(filename: str, tree: ProjectTree) -> Optional[str]:
    if not _has_separator(filename) or not tree.root_dir:
        return None
    parts = [p for p in re.split(r"[\\/]+", filename) if p and p != "."]
    path = os.path.normpath(os.path.join(tree.root_dir, *parts))
    if not _contains(tree.root_dir, path):
        raise PathResolutionError(f"Path '{filename}' escapes the tree root")
    return path


def _owns_extension(tree: ProjectTree, project: Project, extension: str) -> bool:
    return any(_extension(m) == extension for m in tree.readable_members(project))


def find_project_for_extension(filename: str, tree: ProjectTree) -> Optional[Project]:
    """
    First non-folder project, in tree order, that already holds a file with
    the same extension as `filename`; else the first non-folder project.
    """
    extension = _extension(filename)
    candidates = [p for p in tree.walk_projects() if not p.is_folder]
    for project in candidates:
        if _owns_extension(tree, project, extension):
            return project
    return candidates[0] if candidates else None


def project_affinity(filename: str, tree: ProjectTree) -> Optional[str]:
    project = find_project_for_extension(filename, tree)
    if project is None:
        return None
    return os.path.join(project.root_dir, filename)


def tree_root(filename: str, tree: ProjectTree) -> Optional[str]:
    if not tree.root_dir:
        return None
    return os.path.join(tree.root_dir, filename)


DEFAULT_STRATEGIES: Tuple[Strategy, ...] = (
    absolute_path,
    existing_member,
    relative_to_root,
    project_affinity,
    tree_root,
)


def resolve_path(
    filename: str,
    tree: ProjectTree,
    *,
    strategies: Sequence[Strategy] = DEFAULT_STRATEGIES,
) -> ResolvedPath:
    """
    Resolve `filename` against `tree` with the first strategy that yields a path.

    Raises PathResolutionError when the filename is empty, a root-relative
    name climbs out of the tree root, or no strategy applies.
    """
    filename = (filename or "").strip()
    if not filename:
        raise PathResolutionError("Cannot resolve an empty filename")

    for strategy in strategies:
        path = strategy(filename, tree)
        if path:
            return ResolvedPath(path=path, exists=os.path.exists(path), strategy=strategy.__name__)
    raise PathResolutionError(f"No location found for '{filename}'")


def _fold(path: str) -> str:
    return os.path.normcase(os.path.abspath(path)).lower()


def _contains(root: str, path: str) -> bool:
    """Case-insensitive, component-wise containment of `path` in `root`."""
    root_n = _fold(root)
    path_n = _fold(path)
    try:
        return os.path.commonpath([root_n, path_n]) == root_n
    except ValueError:
        # Different drives on Windows.
        return False


def find_best_owner(path: str, tree: ProjectTree) -> Optional[Project]:
    """
    The non-folder project whose root directory most specifically contains
    `path` (the longest matching root), or None.
    """
    best: Optional[Project] = None
    best_score = -1
    for project in tree.walk_projects():
        if project.is_folder or not project.root_dir:
            continue
        if _contains(project.root_dir, path):
            score = len(os.path.abspath(project.root_dir))
            if score > best_score:
                best, best_score = project, score
    return best
