import os

import pytest

from codedrop.project import FOLDER, Project, ProjectTree


def test_find_by_name_is_case_insensitive(solution):
    found = solution.find_by_name("MODELS.PY")
    assert found is not None
    assert found.endswith(os.path.join("core", "models.py"))


def test_find_by_name_matches_trailing_components(solution):
    found = solution.find_by_name("util/helpers.py")
    assert found.endswith(os.path.join("util", "helpers.py"))
    assert solution.find_by_name("other/helpers.py") is None
    assert solution.find_by_name("missing.py") is None
    assert solution.find_by_name("") is None


def test_walk_projects_is_preorder_through_children():
    inner = Project(name="inner", root_dir="/r/group/inner")
    group = Project(name="group", root_dir="/r/group", kind=FOLDER, children=[inner])
    last = Project(name="last", root_dir="/r/last")
    tree = ProjectTree("/r", [group, last])
    assert [p.name for p in tree.walk_projects()] == ["group", "inner", "last"]


def test_unreadable_project_is_skipped():
    class FlakyTree(ProjectTree):
        def members(self, project):
            if project.name == "broken":
                raise PermissionError("denied")
            return super().members(project)

    broken = Project(name="broken", root_dir="/r/broken", members=["/r/broken/target.py"])
    ok = Project(name="ok", root_dir="/r/ok", members=["/r/ok/target.py"])
    tree = FlakyTree("/r", [broken, ok])
    assert tree.find_by_name("target.py") == "/r/ok/target.py"


def test_register_file_appends_once():
    project = Project(name="p", root_dir="/r/p")
    tree = ProjectTree("/r", [project])
    tree.register_file(project, "/r/p/new.py")
    tree.register_file(project, "/r/p/new.py")
    assert project.members == ["/r/p/new.py"]


def test_register_file_rejects_folder_nodes():
    folder = Project(name="f", root_dir="/r/f", kind=FOLDER)
    with pytest.raises(ValueError):
        ProjectTree("/r", [folder]).register_file(folder, "/r/f/x.py")
