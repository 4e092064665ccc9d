from .base import CodeDropError
from .materialize import BackupError, MaterializeError, RegistrationError
from .path import PathResolutionError

__all__ = [
    "CodeDropError",
    "PathResolutionError",
    "MaterializeError",
    "BackupError",
    "RegistrationError",
]
