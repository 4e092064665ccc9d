# codedrop/core.py
import logging
from typing import List, Optional, Sequence

from ._logging import resolve_logger
from .commit import EditorState, materialize_block
from .extract import DEFAULT_THRESHOLDS, Thresholds, classify_block, extract_code_blocks, resolve_filename
from .models.blocks import CodeBlock, FileOperationResult, ProcessReport
from .project.tree import ProjectTree

NO_COMPLETE_FILES = "Code blocks detected but no complete files to create/update."


def parse_response(text: str, thresholds: Optional[Thresholds] = None) -> List[CodeBlock]:
    """
    Extract every code block of `text`, fill in missing filenames and
    classify each one. All blocks are returned, materializable or not.
    """
    thresholds = thresholds or DEFAULT_THRESHOLDS
    return [classify_block(resolve_filename(b), thresholds) for b in extract_code_blocks(text)]


def select_materializable(blocks: Sequence[CodeBlock]) -> List[CodeBlock]:
    """Blocks with a filename that were judged complete files, in order."""
    return [b for b in blocks if b.is_materializable]


def format_report(results: Sequence[FileOperationResult], *, detected: int = 0) -> str:
    """
    One line per result. When blocks were found but none qualified the
    report is a single notice; with nothing found it is empty.
    """
    if results:
        return "\n".join(r.message for r in results)
    if detected:
        return NO_COMPLETE_FILES
    return ""


def process_response(
    text: str,
    tree: ProjectTree,
    *,
    editor: Optional[EditorState] = None,
    dry_run: bool = False,
    thresholds: Optional[Thresholds] = None,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> ProcessReport:
    """
    Turn a generative-text response into file creations and updates.

    Blocks are extracted, named, classified and filtered, then written one
    at a time in the order they appear. A failure on one block becomes an
    "error" result and does not stop the blocks after it.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    blocks = parse_response(text, thresholds)
    selected = select_materializable(blocks)
    lg.info(f"Found {len(blocks)} code block(s), {len(selected)} to materialize")

    results = [
        materialize_block(block, tree, editor=editor, dry_run=dry_run, logger=lg)
        for block in selected
    ]
    return ProcessReport(
        blocks=blocks,
        results=results,
        summary=format_report(results, detected=len(blocks)),
    )
