import os
import textwrap

from codedrop import CREATED, ERROR, UPDATED, process_response
from codedrop.core import NO_COMPLETE_FILES, parse_response
from codedrop.project import Project, ProjectTree


def test_demo_scenario_creates_file_in_project_with_matching_extension(tmp_path, touch):
    demo_dir = str(tmp_path / "demo")
    other_dir = str(tmp_path / "other")
    other = Project(name="other", root_dir=other_dir, members=[touch(os.path.join(other_dir, "a.txt"))])
    demo = Project(name="demo", root_dir=demo_dir, members=[touch(os.path.join(demo_dir, "existing.demo"))])
    tree = ProjectTree(str(tmp_path), [other, demo])

    text = "...```lang=demo // File: foo.demo\nfunction foo(){}\nfunction bar(){}\nfunction baz(){}\n```..."
    report = process_response(text, tree)

    assert len(report.blocks) == 1
    assert report.blocks[0].filename == "foo.demo"
    assert report.blocks[0].is_complete
    [result] = report.results
    assert result.outcome == CREATED
    assert result.target_path == os.path.join(demo_dir, "foo.demo")
    assert result.backup_path is None
    assert result.project == "demo"


def test_snippets_and_unnamed_blocks_are_silently_dropped(solution):
    text = textwrap.dedent(
        """\
        Run this:
        ```bash
        pip install codedrop
        ```
        And here is the module:
        ```python // core/reports.py
        import json

        def render(data):
            return json.dumps(data)
        ```
        """
    )
    report = process_response(text, solution)

    assert len(report.blocks) == 2
    assert [r.outcome for r in report.results] == [CREATED]
    assert report.summary == "Created: core/reports.py (added to core)"


def test_summary_when_nothing_qualifies(solution):
    report = process_response("```python\nx = 1\n```", solution)
    assert report.results == []
    assert report.summary == NO_COMPLETE_FILES


def test_empty_report_without_fences(solution):
    report = process_response("No code today.", solution)
    assert report.blocks == []
    assert report.results == []
    assert report.summary == ""


def test_report_keeps_block_order_and_isolates_failures(solution, touch):
    touch(os.path.join(solution.root_dir, "blocker"), "file in the way")
    body = "import os\nimport sys\nprint(os, sys)"
    text = "\n".join(
        f"```python // {name}\n{body}\n```"
        for name in ("first.py", "blocker/second.py", "models.py")
    )

    report = process_response(text, solution)

    assert [r.outcome for r in report.results] == [CREATED, ERROR, UPDATED]
    lines = report.summary.splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("Created: first.py")
    assert lines[1].startswith("Failed to create blocker/second.py")
    assert lines[2].startswith("Updated: models.py")
    assert len(report.errors) == 1


def test_inferred_filename_reuses_existing_file(solution):
    text = "```python\nclass Models:\n    name = 'm'\n    def save(self):\n        pass\n```"
    report = process_response(text, solution)
    [result] = report.results
    assert result.outcome == UPDATED
    assert result.target_path == os.path.join(solution.root_dir, "core", "models.py")


def test_parse_response_classifies_without_touching_disk():
    blocks = parse_response("```js // a.js\nexport const a = 1;\nexport const b = 2;\nexport const c = 3;\n```")
    assert blocks[0].is_complete
    assert blocks[0].is_materializable
