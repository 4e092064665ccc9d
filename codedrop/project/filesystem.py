# codedrop/project/filesystem.py
import logging
import os
from typing import Dict, Iterator, List, Optional, Tuple

import pathspec

from ..utils.gitignore import get_gitignore, is_ignored
from .tree import Project, ProjectTree

log = logging.getLogger(__name__)

# A directory holding any of these is the root of a project.
PROJECT_MARKERS = (
    "pyproject.toml",
    "setup.py",
    "package.json",
    "Cargo.toml",
    "go.mod",
    "pom.xml",
    "build.gradle",
    "build.gradle.kts",
    "CMakeLists.txt",
)
PROJECT_MARKER_SUFFIXES = (".csproj", ".vbproj", ".fsproj", ".vcxproj", ".sln")


def _is_project_dir(filenames: List[str]) -> bool:
    return any(f in PROJECT_MARKERS or f.endswith(PROJECT_MARKER_SUFFIXES) for f in filenames)


class FileSystemProjectTree(ProjectTree):
    """
    A ProjectTree discovered from a directory on disk.

    Projects are the directories holding a project marker, in sorted walk
    order. A project's members are the files beneath its root that are not
    owned by a nested project and not matched by the nearest .gitignore.
    When nothing under the root carries a marker, the root itself is the
    single project.
    """

    def __init__(self, root_dir: str, *, spec: Optional[pathspec.PathSpec] = None):
        super().__init__(os.path.abspath(root_dir))
        self._spec = spec if spec is not None else get_gitignore(self.root_dir)
        self._members: Dict[str, List[str]] = {}
        self._projects = self._discover()

    def _skip(self, err: OSError) -> None:
        log.debug("Skipping unreadable directory %s: %s", getattr(err, "filename", "?"), err)

    def _walk(self, top: str) -> Iterator[Tuple[str, List[str], List[str]]]:
        for dirpath, dirnames, filenames in os.walk(top, onerror=self._skip):
            dirnames[:] = sorted(
                d for d in dirnames
                if not is_ignored(self._spec, self.root_dir, os.path.join(dirpath, d), is_dir=True)
            )
            files = sorted(
                f for f in filenames
                if not is_ignored(self._spec, self.root_dir, os.path.join(dirpath, f))
            )
            yield dirpath, dirnames, files

    def _discover(self) -> List[Project]:
        projects = [
            Project(name=os.path.basename(dirpath) or dirpath, root_dir=dirpath)
            for dirpath, _dirs, files in self._walk(self.root_dir)
            if _is_project_dir(files)
        ]
        if not projects:
            projects = [Project(name=os.path.basename(self.root_dir) or self.root_dir, root_dir=self.root_dir)]
        return projects

    def _nested_roots(self, project: Project) -> set:
        return {
            os.path.normcase(p.root_dir)
            for p in self._projects
            if p is not project
            and os.path.commonpath([p.root_dir, project.root_dir]) == project.root_dir
        }

    def _members_for(self, project: Project) -> List[str]:
        cached = self._members.get(project.root_dir)
        if cached is not None:
            return cached

        nested = self._nested_roots(project)
        found: List[str] = []
        for dirpath, dirnames, files in self._walk(project.root_dir):
            dirnames[:] = [d for d in dirnames if os.path.normcase(os.path.join(dirpath, d)) not in nested]
            found.extend(os.path.join(dirpath, f) for f in files)
        project.members = found
        self._members[project.root_dir] = found
        return found

    def members(self, project: Project) -> List[str]:
        return list(self._members_for(project))

    def register_file(self, project: Project, path: str) -> None:
        members = self._members_for(project)
        if os.path.normcase(path) not in {os.path.normcase(m) for m in members}:
            members.append(path)
