# codedrop/project/tree.py
import logging
import os
import re
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

log = logging.getLogger(__name__)

# Project.kind values. Folder nodes only group other projects and never own files.
PROJECT = "project"
FOLDER = "folder"


@dataclass
class Project:
    """A node of the project forest."""

    name: str
    root_dir: str
    members: List[str] = field(default_factory=list)
    kind: str = PROJECT
    children: List["Project"] = field(default_factory=list)

    @property
    def is_folder(self) -> bool:
        return self.kind == FOLDER


def _path_parts(path: str) -> List[str]:
    return [p for p in re.split(r"[\\/]+", path) if p and p != "."]


class ProjectTree:
    """
    Read-mostly view of a multi-project source layout.

    Callers that own a project model (an IDE, a build graph) hand one of these
    to codedrop on every call. The only mutation codedrop performs is
    `register_file`. Subclasses override `members` to enumerate lazily; an
    `OSError` from one project's enumeration skips that project.
    """

    def __init__(self, root_dir: str, projects: Optional[List[Project]] = None):
        self.root_dir = root_dir
        self._projects: List[Project] = list(projects or [])

    def projects(self) -> List[Project]:
        """Top-level projects in tree order."""
        return list(self._projects)

    def walk_projects(self) -> Iterator[Project]:
        """Depth-first, pre-order walk over every project, folders included."""
        stack = list(reversed(self.projects()))
        while stack:
            project = stack.pop()
            yield project
            stack.extend(reversed(project.children))

    def members(self, project: Project) -> List[str]:
        return list(project.members)

    def readable_members(self, project: Project) -> List[str]:
        """`members(project)`, or [] when the project cannot be enumerated."""
        try:
            return self.members(project)
        except OSError as e:
            log.debug("Skipping unreadable project %s: %s", project.name, e)
            return []

    def find_by_name(self, name: str) -> Optional[str]:
        """
        Return the first member whose trailing path components equal `name`,
        compared case-insensitively. A bare name is compared with basenames.
        """
        wanted = [p.lower() for p in _path_parts(name)]
        if not wanted:
            return None
        for project in self.walk_projects():
            for member in self.readable_members(project):
                parts = [p.lower() for p in _path_parts(member)]
                if parts[-len(wanted):] == wanted:
                    return member
        return None

    def register_file(self, project: Project, path: str) -> None:
        """Record a newly created file as a member of `project`."""
        if project.is_folder:
            raise ValueError(f"Cannot add files to folder node '{project.name}'")
        if os.path.normcase(path) not in {os.path.normcase(m) for m in project.members}:
            project.members.append(path)
