from .completeness import DEFAULT_THRESHOLDS, Thresholds, classify_block, is_complete_file
from .extract import extract_code_blocks
from .filename import infer_filename, resolve_filename

__all__ = [
    "extract_code_blocks",
    "infer_filename",
    "resolve_filename",
    "is_complete_file",
    "classify_block",
    "Thresholds",
    "DEFAULT_THRESHOLDS",
]
