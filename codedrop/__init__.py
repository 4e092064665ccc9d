from .commit import EditorState, NullEditor, backup_path_for, materialize_block, materialize_blocks
from .core import format_report, parse_response, process_response, select_materializable
from .errors import (
    BackupError,
    CodeDropError,
    MaterializeError,
    PathResolutionError,
    RegistrationError,
)
from .extract import (
    DEFAULT_THRESHOLDS,
    Thresholds,
    classify_block,
    extract_code_blocks,
    infer_filename,
    is_complete_file,
    resolve_filename,
)
from .models import CREATED, ERROR, UPDATED, CodeBlock, FileOperationResult, ProcessReport
from .project import FileSystemProjectTree, Project, ProjectTree
from .resolve import ResolvedPath, find_best_owner, resolve_path

__all__ = [
    "process_response",
    "parse_response",
    "select_materializable",
    "format_report",
    "extract_code_blocks",
    "infer_filename",
    "resolve_filename",
    "is_complete_file",
    "classify_block",
    "Thresholds",
    "DEFAULT_THRESHOLDS",
    "resolve_path",
    "find_best_owner",
    "ResolvedPath",
    "materialize_block",
    "materialize_blocks",
    "backup_path_for",
    "EditorState",
    "NullEditor",
    "Project",
    "ProjectTree",
    "FileSystemProjectTree",
    "CodeBlock",
    "FileOperationResult",
    "ProcessReport",
    "CREATED",
    "UPDATED",
    "ERROR",
    "CodeDropError",
    "PathResolutionError",
    "MaterializeError",
    "BackupError",
    "RegistrationError",
]
