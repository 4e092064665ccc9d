# codedrop/utils/language.py
import os

# Fence tags as people actually write them, folded onto one canonical name.
_ALIASES = {
    "c#": "csharp",
    "cs": "csharp",
    "csharp": "csharp",
    "vb": "vbnet",
    "vbnet": "vbnet",
    "vb.net": "vbnet",
    "c++": "cpp",
    "cpp": "cpp",
    "cc": "cpp",
    "cxx": "cpp",
    "hpp": "cpp",
    "c": "c",
    "h": "c",
    "js": "javascript",
    "jsx": "javascript",
    "javascript": "javascript",
    "mjs": "javascript",
    "ts": "typescript",
    "tsx": "typescript",
    "typescript": "typescript",
    "py": "python",
    "python": "python",
    "python3": "python",
    "java": "java",
    "kt": "kotlin",
    "kotlin": "kotlin",
    "go": "go",
    "golang": "go",
    "rs": "rust",
    "rust": "rust",
    "rb": "ruby",
    "ruby": "ruby",
    "php": "php",
    "swift": "swift",
    "lua": "lua",
    "sh": "shell",
    "bash": "shell",
    "shell": "shell",
    "zsh": "shell",
    "ps1": "powershell",
    "powershell": "powershell",
    "sql": "sql",
    "html": "html",
    "htm": "html",
    "xhtml": "html",
    "xml": "xml",
    "xaml": "xml",
    "svg": "xml",
    "css": "css",
    "scss": "scss",
    "less": "less",
    "json": "json",
    "yaml": "yaml",
    "yml": "yaml",
    "toml": "toml",
    "md": "markdown",
    "markdown": "markdown",
}

_DEFAULT_EXTENSIONS = {
    "csharp": ".cs",
    "vbnet": ".vb",
    "cpp": ".cpp",
    "c": ".c",
    "javascript": ".js",
    "typescript": ".ts",
    "python": ".py",
    "java": ".java",
    "kotlin": ".kt",
    "go": ".go",
    "rust": ".rs",
    "ruby": ".rb",
    "php": ".php",
    "swift": ".swift",
    "lua": ".lua",
    "shell": ".sh",
    "powershell": ".ps1",
    "sql": ".sql",
    "html": ".html",
    "xml": ".xml",
    "css": ".css",
    "scss": ".scss",
    "less": ".less",
    "json": ".json",
    "yaml": ".yaml",
    "toml": ".toml",
    "markdown": ".md",
}

GENERIC_EXTENSION = ".txt"


def normalize_language(language: str) -> str:
    """Fold a fence tag onto its canonical language name ('' when unknown)."""
    tag = (language or "").strip().lower()
    return _ALIASES.get(tag, tag)


def default_extension(language: str) -> str:
    """Extension given to an inferred bare identifier; '.txt' for unknown languages."""
    return _DEFAULT_EXTENSIONS.get(normalize_language(language), GENERIC_EXTENSION)


def language_from_path(file_path: str) -> str:
    """Gets a canonical language name from a file path extension."""
    extension = os.path.splitext(file_path or "")[1].lstrip(".").lower()
    if not extension:
        return ""
    return _ALIASES.get(extension, "")
