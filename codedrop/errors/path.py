from .base import CodeDropError


class PathResolutionError(CodeDropError):
    """Raised when a filename cannot be mapped to a concrete path."""
