from .base import CodeDropError


class MaterializeError(CodeDropError):
    """Raised when writing a block to disk fails."""


class BackupError(MaterializeError):
    """Raised when the pre-update backup cannot be written."""

    def __init__(self, backup_path: str, message: str):
        super().__init__(message)
        self.backup_path = backup_path


class RegistrationError(MaterializeError):
    """Raised when a created file cannot be registered with its project."""
