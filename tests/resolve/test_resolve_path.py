import os

import pytest

from codedrop.errors import PathResolutionError
from codedrop.project import FOLDER, Project, ProjectTree
from codedrop.resolve import (
    DEFAULT_STRATEGIES,
    find_best_owner,
    find_project_for_extension,
    project_affinity,
    resolve_path,
)


def test_absolute_path_is_used_verbatim(solution, tmp_path):
    target = str(tmp_path / "elsewhere" / "x.py")
    resolved = resolve_path(target, solution)
    assert resolved.path == target
    assert resolved.strategy == "absolute_path"
    assert resolved.exists is False


def test_existing_member_is_reused(solution):
    resolved = resolve_path("Models.py", solution)
    assert resolved.path == os.path.join(solution.root_dir, "core", "models.py")
    assert resolved.exists is True
    assert resolved.strategy == "existing_member"


def test_existing_member_outranks_affinity_placement(solution):
    # Affinity alone would have placed a new helpers.py at core's root.
    resolved = resolve_path("helpers.py", solution)
    assert resolved.path == os.path.join(solution.root_dir, "core", "util", "helpers.py")
    assert resolved.strategy == "existing_member"


def test_separator_resolves_relative_to_root(solution):
    resolved = resolve_path("shared/config/settings.py", solution)
    assert resolved.path == os.path.join(solution.root_dir, "shared", "config", "settings.py")
    assert resolved.strategy == "relative_to_root"


def test_windows_separators_are_normalized(solution):
    resolved = resolve_path("shared\\x.py", solution)
    assert resolved.path == os.path.join(solution.root_dir, "shared", "x.py")


def test_affinity_picks_project_holding_extension(solution):
    resolved = resolve_path("views.py", solution)
    assert resolved.path == os.path.join(solution.root_dir, "core", "views.py")
    assert resolved.strategy == "project_affinity"
    assert resolved.exists is False

    resolved = resolve_path("style.CSS", solution)
    # No project has .css files: first non-folder project in tree order.
    assert resolved.path == os.path.join(solution.root_dir, "web", "style.CSS")


def test_affinity_skips_folder_nodes():
    folder = Project(name="assets", root_dir="/r/assets", kind=FOLDER, members=["/r/assets/a.py"])
    app = Project(name="app", root_dir="/r/app")
    tree = ProjectTree("/r", [folder, app])
    assert find_project_for_extension("b.py", tree) is app


def test_tree_root_fallback_without_projects(tmp_path):
    tree = ProjectTree(str(tmp_path), [])
    resolved = resolve_path("lonely.txt", tree)
    assert resolved.path == os.path.join(str(tmp_path), "lonely.txt")
    assert resolved.strategy == "tree_root"


def test_resolution_is_deterministic(solution):
    first = resolve_path("new_module.py", solution)
    second = resolve_path("new_module.py", solution)
    assert first == second


def test_empty_filename_and_nowhere_to_go():
    with pytest.raises(PathResolutionError):
        resolve_path("", ProjectTree("/r", []))
    with pytest.raises(PathResolutionError):
        resolve_path("x.py", ProjectTree("", []))


def test_strategies_are_pluggable(solution):
    resolved = resolve_path("Models.py", solution, strategies=[project_affinity])
    assert resolved.path == os.path.join(solution.root_dir, "core", "Models.py")
    assert DEFAULT_STRATEGIES[1].__name__ == "existing_member"


def test_best_owner_prefers_longest_root():
    outer = Project(name="outer", root_dir="/r/app")
    inner = Project(name="inner", root_dir="/r/app/plugins/inner")
    sibling = Project(name="sibling", root_dir="/r/app2")
    group = Project(name="group", root_dir="/r/app/plugins", kind=FOLDER)
    tree = ProjectTree("/r", [outer, group, inner, sibling])

    assert find_best_owner("/r/app/plugins/inner/x.py", tree) is inner
    assert find_best_owner("/r/app/plugins/y.py", tree) is outer
    assert find_best_owner("/r/app2/z.py", tree) is sibling
    assert find_best_owner("/elsewhere/z.py", tree) is None


def test_best_owner_ignores_case_of_project_root():
    app = Project(name="app", root_dir="/r/App")
    tree = ProjectTree("/r", [app])
    assert find_best_owner("/r/app/x.py", tree) is app
    assert find_best_owner("/R/APP/sub/y.py", tree) is app


def test_root_relative_name_cannot_escape_tree(solution):
    with pytest.raises(PathResolutionError):
        resolve_path("../../outside.py", solution)
    resolved = resolve_path("shared/../inside.py", solution)
    assert resolved.path == os.path.join(solution.root_dir, "inside.py")
