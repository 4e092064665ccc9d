# codedrop/utils/gitignore.py
import os
import pathspec
from typing import List

def get_gitignore(path: str) -> pathspec.PathSpec:
    """
    Return a PathSpec compiled from the nearest .gitignore found by walking
    upward from `path` (file or directory). Always ignores '.git/' by default.
    An unreadable or missing .gitignore still yields a spec ignoring '.git/'.
    """
    defaults: List[str] = ['.git/']
    lines: List[str] = list(defaults)

    base = os.path.abspath(path or ".")
    if os.path.isfile(base):
        base = os.path.dirname(base)

    cur = base
    while True:
        gi = os.path.join(cur, ".gitignore")
        try:
            if os.path.exists(gi):
                with open(gi, "r", encoding="utf-8", errors="ignore") as f:
                    lines.extend(f.read().splitlines())
                break
        except OSError:
            pass
        parent = os.path.dirname(cur)
        if parent == cur:
            break
        cur = parent

    return pathspec.PathSpec.from_lines("gitwildmatch", lines)


def is_ignored(spec: pathspec.PathSpec, root: str, full_path: str, is_dir: bool = False) -> bool:
    """Match `full_path` against `spec` using a POSIX path relative to `root`."""
    relative_path = os.path.relpath(full_path, root).replace(os.sep, '/')
    if relative_path == ".":
        return False
    # A trailing '/' lets directory patterns such as 'build/' match.
    probe = relative_path + ("/" if is_dir else "")
    return spec.match_file(probe)
