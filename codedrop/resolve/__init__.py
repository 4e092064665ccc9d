from .paths import (
    DEFAULT_STRATEGIES,
    ResolvedPath,
    absolute_path,
    existing_member,
    find_best_owner,
    find_project_for_extension,
    project_affinity,
    relative_to_root,
    resolve_path,
    tree_root,
)

__all__ = [
    "resolve_path",
    "find_best_owner",
    "find_project_for_extension",
    "ResolvedPath",
    "DEFAULT_STRATEGIES",
    "absolute_path",
    "existing_member",
    "relative_to_root",
    "project_affinity",
    "tree_root",
]
