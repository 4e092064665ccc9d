class CodeDropError(Exception):
    """Base class for every error raised by codedrop."""
