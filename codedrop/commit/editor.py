# codedrop/commit/editor.py


class EditorState:
    """
    The editor that may hold open copies of files codedrop rewrites.

    Integrations subclass this. The base implementation reports nothing open
    and ignores reload requests.
    """

    def is_open(self, path: str) -> bool:
        return False

    def reload(self, path: str) -> None:
        """Discard the in-memory copy of `path` and read it again from disk."""
        return None


class NullEditor(EditorState):
    """Used when the caller supplies no editor."""
