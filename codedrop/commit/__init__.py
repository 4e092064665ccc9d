from .core import backup_path_for, materialize_block, materialize_blocks, write_block
from .editor import EditorState, NullEditor

__all__ = [
    "materialize_block",
    "materialize_blocks",
    "write_block",
    "backup_path_for",
    "EditorState",
    "NullEditor",
]
