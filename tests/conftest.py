# conftest.py - shared fixtures
import os

import pytest

from codedrop.project import FOLDER, Project, ProjectTree


def _touch(path, content=""):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    return str(path)


@pytest.fixture
def touch():
    return _touch


@pytest.fixture
def solution(tmp_path):
    """
    A two-project layout on disk plus a folder node:

        <root>/
          web/      index.html, app.js
          core/     models.py, util/helpers.py
          docs      (folder node, no files)
    """
    root = tmp_path / "solution"
    web_dir = str(root / "web")
    core_dir = str(root / "core")
    web = Project(
        name="web",
        root_dir=web_dir,
        members=[
            _touch(os.path.join(web_dir, "index.html"), "<html></html>\n"),
            _touch(os.path.join(web_dir, "app.js"), "console.log(1);\n"),
        ],
    )
    core = Project(
        name="core",
        root_dir=core_dir,
        members=[
            _touch(os.path.join(core_dir, "models.py"), "class Model:\n    pass\n"),
            _touch(os.path.join(core_dir, "util", "helpers.py"), "def help():\n    pass\n"),
        ],
    )
    docs = Project(name="docs", root_dir=str(root / "docs"), kind=FOLDER)
    return ProjectTree(str(root), [docs, web, core])
