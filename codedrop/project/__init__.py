from .filesystem import PROJECT_MARKERS, FileSystemProjectTree
from .tree import FOLDER, PROJECT, Project, ProjectTree

__all__ = [
    "Project",
    "ProjectTree",
    "FileSystemProjectTree",
    "PROJECT",
    "FOLDER",
    "PROJECT_MARKERS",
]
