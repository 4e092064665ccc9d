# codedrop/extract/completeness.py
"""
Heuristics deciding whether a code block is a whole file or a fragment.

This is deliberately not a parser. Keyword languages are judged by the
presence of structural markers in a case-folded copy of the body, with an
optional line-count fallback for languages whose lexical signals are weak.
Markup and data languages are judged by syntactic completeness instead.
"""
from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from ..models.blocks import CodeBlock
from ..utils.language import language_from_path, normalize_language


@dataclass(frozen=True)
class Thresholds:
    """Non-blank line counts used by the classifier."""

    # Fewer non-blank lines than this is never a complete file.
    min_lines: int = 3
    # Fallback for keyword languages whose markers are absent.
    weak_signal_lines: int = 10
    # Fallback for languages without a rule.
    unknown_language_lines: int = 5


DEFAULT_THRESHOLDS = Thresholds()

# Line fallbacks for keyword rules: thresholds.weak_signal_lines or
# thresholds.unknown_language_lines.
WEAK = "weak"
GENERIC = "generic"

# canonical language -> (marker groups, line fallback). A block is complete when
# every marker of any one group occurs in the folded body.
_KEYWORD_RULES: Dict[str, Tuple[Tuple[Tuple[str, ...], ...], Optional[str]]] = {
    "csharp": ((("namespace",), ("using ",), ("class", "{", "}")), None),
    "vbnet": ((("namespace",), ("imports ",), ("module ",), ("class ", "end class")), GENERIC),
    "java": ((("package ",), ("import ",), ("class", "{", "}")), GENERIC),
    "kotlin": ((("package ",), ("import ",), ("fun ",), ("class ",)), WEAK),
    "cpp": ((("#include",), ("namespace",), ("class", "{", "}")), WEAK),
    "c": ((("#include",), ("int main",)), WEAK),
    "javascript": ((("function",), ("const ",), ("export",)), WEAK),
    "typescript": ((("function",), ("const ",), ("export",)), WEAK),
    "python": ((("def ",), ("class ",), ("import ",)), WEAK),
    "go": ((("package ",),), WEAK),
    "rust": ((("fn ",), ("use ",), ("mod ",), ("struct ",)), WEAK),
    "ruby": ((("def ",), ("class ",), ("module ",), ("require",)), WEAK),
    "php": ((("<?php",), ("function",), ("class ",)), WEAK),
    "swift": ((("import ",), ("func ",), ("class ",), ("struct ",)), WEAK),
    "shell": ((("#!",),), WEAK),
    "sql": ((("create ",), ("alter ",), ("insert into",)), WEAK),
}

# Markers strong enough to accept a block whose language has no rule of its own.
_GENERIC_MARKERS: Tuple[Tuple[str, ...], ...] = (
    ("function ",),
    ("class ",),
    ("def ",),
    ("import ",),
    ("namespace ",),
    ("package ",),
)

_XML_ROOT_RE = re.compile(r"<\?xml|<[a-z][\w:.-]*[\s>/]")


def _balanced(text: str, opener: str, closer: str) -> bool:
    return text.count(opener) > 0 and text.count(opener) == text.count(closer)


def _html_complete(folded: str) -> bool:
    return "<!doctype" in folded or "<html" in folded or "<body" in folded


def _xml_complete(folded: str) -> bool:
    return _XML_ROOT_RE.search(folded) is not None


def _stylesheet_complete(folded: str) -> bool:
    return _balanced(folded, "{", "}")


def _json_complete(folded: str) -> bool:
    stripped = folded.strip()
    if stripped.startswith("{"):
        return stripped.endswith("}") and _balanced(stripped, "{", "}")
    if stripped.startswith("["):
        return stripped.endswith("]") and _balanced(stripped, "[", "]")
    return False


_SYNTAX_RULES: Dict[str, Callable[[str], bool]] = {
    "html": _html_complete,
    "xml": _xml_complete,
    "css": _stylesheet_complete,
    "scss": _stylesheet_complete,
    "less": _stylesheet_complete,
    "json": _json_complete,
}


def _count_lines(code: str) -> int:
    return sum(1 for line in code.split("\n") if line.strip())


def is_complete_file(
    code: str, language: str, thresholds: Thresholds = DEFAULT_THRESHOLDS
) -> bool:
    """Return True when `code` looks like a whole file rather than a snippet."""
    if not isinstance(code, str):
        return False

    lines = _count_lines(code)
    if lines < thresholds.min_lines:
        return False

    folded = code.lower()
    lang = normalize_language(language if isinstance(language, str) else "")

    syntax_rule = _SYNTAX_RULES.get(lang)
    if syntax_rule is not None:
        return syntax_rule(folded)

    keyword_rule = _KEYWORD_RULES.get(lang)
    if keyword_rule is not None:
        groups, fallback = keyword_rule
        if any(all(marker in folded for marker in group) for group in groups):
            return True
        if fallback == WEAK:
            return lines > thresholds.weak_signal_lines
        if fallback == GENERIC:
            return lines > thresholds.unknown_language_lines
        return False

    if any(all(marker in folded for marker in group) for group in _GENERIC_MARKERS):
        return True
    return lines > thresholds.unknown_language_lines


def classify_block(block: CodeBlock, thresholds: Thresholds = DEFAULT_THRESHOLDS) -> CodeBlock:
    """
    Return `block` with `is_complete` set.

    An untagged block falls back to the language implied by its filename's
    extension; the block's own `language` is left as written.
    """
    language = block.language or language_from_path(block.filename)
    complete = is_complete_file(block.code, language, thresholds)
    return dataclasses.replace(block, is_complete=complete)
