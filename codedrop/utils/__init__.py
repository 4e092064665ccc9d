# codedrop/utils/__init__.py
from .gitignore import get_gitignore
from .language import default_extension, language_from_path, normalize_language

__all__ = [
    "get_gitignore",
    "default_extension",
    "language_from_path",
    "normalize_language",
]
