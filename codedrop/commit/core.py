# codedrop/commit/core.py
import logging
import os
import shutil
from datetime import datetime
from typing import Callable, List, Optional, Sequence

from .._logging import resolve_logger
from ..errors import BackupError, RegistrationError
from ..models.blocks import CREATED, ERROR, UPDATED, CodeBlock, FileOperationResult
from ..project.tree import ProjectTree
from ..resolve.paths import DEFAULT_STRATEGIES, ResolvedPath, Strategy, find_best_owner, resolve_path
from .editor import EditorState, NullEditor

BACKUP_INFIX = ".backup_"
BACKUP_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

Clock = Callable[[], datetime]


def backup_path_for(path: str, now: Optional[datetime] = None) -> str:
    """`<path>.backup_<YYYYMMDD_HHMMSS>` for the given moment (default: now)."""
    stamp = (now or datetime.now()).strftime(BACKUP_TIMESTAMP_FORMAT)
    return f"{path}{BACKUP_INFIX}{stamp}"


def _reload_if_open(path: str, editor: EditorState, log) -> None:
    try:
        if editor.is_open(path):
            editor.reload(path)
            log.debug(f"Reloaded open editor copy of {path}")
    except Exception as e:
        # The file on disk is already correct; a stale editor buffer is not fatal.
        log.warning(f"Could not reload {path} in the editor: {e}")


def _update_file(
    path: str, block: CodeBlock, editor: EditorState, dry_run: bool, clock: Clock, log
) -> FileOperationResult:
    backup = backup_path_for(path, clock())
    if os.path.exists(backup):
        raise BackupError(backup, f"Backup '{backup}' already exists")

    if dry_run:
        return FileOperationResult(
            outcome=UPDATED,
            target_path=path,
            backup_path=backup,
            filename=block.filename,
            message=f"DRY RUN: Would update {block.filename} (backup: {os.path.basename(backup)})",
            dry_run=True,
        )

    try:
        shutil.copy2(path, backup)
    except OSError as e:
        raise BackupError(backup, f"Could not back up '{path}': {e}") from e
    with open(path, "w", encoding="utf-8") as f:
        f.write(block.code)
    log.info(f"Updated {path} (backup {backup})")

    _reload_if_open(path, editor, log)
    return FileOperationResult(
        outcome=UPDATED,
        target_path=path,
        backup_path=backup,
        filename=block.filename,
        message=f"Updated: {block.filename} (backup: {os.path.basename(backup)})",
    )


def _create_file(path: str, block: CodeBlock, tree: ProjectTree, dry_run: bool, log) -> FileOperationResult:
    owner = find_best_owner(path, tree)

    if dry_run:
        where = f" in {owner.name}" if owner is not None else ""
        return FileOperationResult(
            outcome=CREATED,
            target_path=path,
            filename=block.filename,
            project=owner.name if owner is not None else None,
            message=f"DRY RUN: Would create {block.filename}{where}",
            dry_run=True,
        )

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(block.code)
    log.info(f"Created {path}")

    if owner is None:
        return FileOperationResult(
            outcome=CREATED,
            target_path=path,
            filename=block.filename,
            message=f"Created: {block.filename} (not added to project - no suitable project found)",
        )

    try:
        tree.register_file(owner, path)
    except Exception as e:
        raise RegistrationError(f"created but could not be added to {owner.name}: {e}") from e
    return FileOperationResult(
        outcome=CREATED,
        target_path=path,
        filename=block.filename,
        project=owner.name,
        message=f"Created: {block.filename} (added to {owner.name})",
    )


def write_block(
    block: CodeBlock,
    target: ResolvedPath,
    tree: ProjectTree,
    *,
    editor: Optional[EditorState] = None,
    dry_run: bool = False,
    clock: Optional[Clock] = None,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> FileOperationResult:
    """
    Create or update the file at an already resolved `target`.

    An existing file is first copied to a timestamped backup, then
    overwritten, then reloaded in the editor if it is open there. A new file
    gets its parent directories and is registered with the project that
    most specifically contains it. Never raises: every failure is returned
    as an "error" result.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    editor = editor or NullEditor()
    clock = clock or datetime.now
    path = target.path
    exists = os.path.exists(path)
    try:
        if exists:
            return _update_file(path, block, editor, dry_run, clock, lg)
        return _create_file(path, block, tree, dry_run, lg)
    except Exception as e:
        verb = "update" if exists else "create"
        lg.error(f"Failed to {verb} {path}: {e}")
        return FileOperationResult(
            outcome=ERROR,
            target_path=path,
            filename=block.filename,
            message=f"Failed to {verb} {block.filename}: {e}",
            dry_run=dry_run,
        )


def materialize_block(
    block: CodeBlock,
    tree: ProjectTree,
    *,
    editor: Optional[EditorState] = None,
    dry_run: bool = False,
    clock: Optional[Clock] = None,
    strategies: Sequence[Strategy] = DEFAULT_STRATEGIES,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> FileOperationResult:
    """Resolve `block.filename` against `tree` and write the block there."""
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    try:
        target = resolve_path(block.filename, tree, strategies=strategies)
    except Exception as e:
        lg.error(f"Could not resolve {block.filename!r}: {e}")
        return FileOperationResult(
            outcome=ERROR,
            target_path="",
            filename=block.filename,
            message=f"Error processing {block.filename}: {e}",
            dry_run=dry_run,
        )
    lg.debug(f"Resolved {block.filename} -> {target.path} via {target.strategy}")
    return write_block(
        block,
        target,
        tree,
        editor=editor,
        dry_run=dry_run,
        clock=clock,
        logger=lg,
    )


def materialize_blocks(
    blocks: Sequence[CodeBlock],
    tree: ProjectTree,
    **kwargs,
) -> List[FileOperationResult]:
    """Materialize `blocks` one after another, preserving their order."""
    return [materialize_block(block, tree, **kwargs) for block in blocks]
