# codedrop/extract/extract.py

from __future__ import annotations
import re
from typing import List, Tuple

from ..models.blocks import CodeBlock


# An opener is three backticks plus an info string on the same line; the body
# runs up to the first line that starts with a bare closing fence.
_FENCE_RE = re.compile(
    r"```(?P<info>[^`\n]*)\n"
    r"(?:(?P<body>.*?)\n)??"
    r"[ \t]*```(?![`\w])",
    re.DOTALL | re.MULTILINE | re.IGNORECASE,
)

# `// path`, `# path` or `-- path` annotation after the language tag.
_ANNOTATION_RE = re.compile(r"(?:^|\s)(?://|#|--)\s*(?P<note>\S.*)$")
_FILE_ATTR_RE = re.compile(
    r"(?:^|\s)file(?:name|path)?=(?P<q>[\"']?)(?P<path>[^\s\"']+)(?P=q)", re.IGNORECASE
)
_LANG_PREFIX_RE = re.compile(r"^lang(?:uage)?=", re.IGNORECASE)
_FILE_LABEL_RE = re.compile(r"^file(?:name)?\s*:\s*", re.IGNORECASE)
_COMMENT_CLOSER_RE = re.compile(r"\s*(?:\*/|-->)\s*$")


def _preprocess_fences(text: str) -> str:
    """
    Split a closing fence glued to the next opening fence onto two lines.
    Example: '``````python' becomes '```\n```python'.
    """
    return re.sub(r"(```)[ \t]*(```[^`\n]+)", r"\1\n\2", text.replace("\r\n", "\n"))


def _clean_annotation(note: str) -> str:
    note = _COMMENT_CLOSER_RE.sub("", note.strip())
    note = _FILE_LABEL_RE.sub("", note)
    return note.strip().strip("`'\"")


def _split_info_string(info: str) -> Tuple[str, str]:
    """
    Split the text after an opening fence into (language, declared filename).

    Accepted shapes:
        python
        python // src/app.py
        lang=python // File: app.py
        python file=app.py
        // app.py
    """
    info = info.strip()
    filename = ""

    m = _FILE_ATTR_RE.search(info)
    if m:
        filename = m.group("path")
        info = (info[: m.start()] + info[m.end():]).strip()
    else:
        m = _ANNOTATION_RE.search(info)
        if m:
            filename = _clean_annotation(m.group("note"))
            info = info[: m.start()].strip()

    parts = info.split()
    language = _LANG_PREFIX_RE.sub("", parts[0]) if parts else ""
    return language, filename


def extract_code_blocks(text: str) -> List[CodeBlock]:
    """
    Extract every fenced code section of `text`, in order of appearance.

    Each block carries its language tag and declared filename exactly as
    written, and the body verbatim. Filename inference and classification
    happen later; a block returned here is always `is_complete=False`.
    Unterminated fences are skipped and text without fences gives [].
    """
    if not text:
        return []

    normalized = _preprocess_fences(text)
    blocks: List[CodeBlock] = []
    for m in _FENCE_RE.finditer(normalized):
        language, filename = _split_info_string(m.group("info"))
        blocks.append(
            CodeBlock(
                language=language,
                filename=filename,
                code=m.group("body") or "",
                declared_filename=filename,
            )
        )
    return blocks
