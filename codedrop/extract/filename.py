# codedrop/extract/filename.py
import dataclasses
import os
import re
from typing import List, Optional, Pattern

from ..models.blocks import CodeBlock
from ..utils.language import default_extension, normalize_language

# Languages whose files are commonly named after a top-level function.
FUNCTION_STYLE_LANGUAGES = frozenset(
    {"javascript", "typescript", "python", "php", "ruby", "lua", "shell"}
)

_FILE_MARKER_RE = re.compile(r"\bFile:\s*[`'\"]?(?P<name>[\w./\\-]+)", re.IGNORECASE)

# A comment line whose entire content is a filename, e.g. `// utils/strings.ts`.
_COMMENT_FILENAME_RE = re.compile(
    r"^\s*(?://|#|--|/\*|<!--)\s*(?P<name>[\w./\\-]+\.\w+)\s*(?:\*/|-->)?\s*$",
    re.MULTILINE,
)

_DECLARATION_PATTERNS: List[Pattern[str]] = [
    re.compile(r"\bnamespace\s+[\w.]+.*?\bclass\s+(?P<name>\w+)", re.DOTALL | re.IGNORECASE),
    re.compile(
        r"\bpublic\s+(?:(?:static|sealed|abstract|partial|final|notinheritable|mustinherit)\s+)*"
        r"(?:class|interface|struct|enum|record|module|structure)\s+(?P<name>\w+)",
        re.IGNORECASE,
    ),
    re.compile(r"^\s*class\s+(?P<name>\w+)\s*[:(]", re.MULTILINE | re.IGNORECASE),
]

_FUNCTION_PATTERNS: List[Pattern[str]] = [
    re.compile(r"\bfunction\s+(?P<name>\w+)\s*\(", re.IGNORECASE),
    re.compile(r"^\s*(?:async\s+)?def\s+(?P<name>\w+)\s*\(", re.MULTILINE | re.IGNORECASE),
]


def _with_extension(name: str, language: str) -> str:
    name = name.strip().rstrip(".,;:")
    if not os.path.splitext(name)[1]:
        name += default_extension(language)
    return name


def _first_match(patterns: List[Pattern[str]], code: str) -> Optional[str]:
    for pattern in patterns:
        m = pattern.search(code)
        if m:
            return m.group("name")
    return None


def infer_filename(code: str, language: str) -> str:
    """
    Derive a filename from a block body when the fence did not declare one.

    Tried in order, first match wins:
      1. an explicit `File: <name>` marker,
      2. a comment line that is itself a filename with an extension,
      3. a namespace/class/public type declaration, then a function or def
         declaration for function-style languages.
    A bare identifier gets the language's default extension. Returns ""
    when nothing matches.
    """
    if not code:
        return ""

    m = _FILE_MARKER_RE.search(code)
    if m:
        return _with_extension(m.group("name"), language)

    m = _COMMENT_FILENAME_RE.search(code)
    if m:
        return m.group("name").strip()

    name = _first_match(_DECLARATION_PATTERNS, code)
    if name is None and normalize_language(language) in FUNCTION_STYLE_LANGUAGES:
        name = _first_match(_FUNCTION_PATTERNS, code)
    if name:
        return _with_extension(name, language)
    return ""


def resolve_filename(block: CodeBlock) -> CodeBlock:
    """Return `block` with its declared filename, or an inferred one when it has none."""
    if block.filename:
        return block
    return dataclasses.replace(block, filename=infer_filename(block.code, block.language))
