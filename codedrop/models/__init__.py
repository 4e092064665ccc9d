from .blocks import (
    CREATED,
    ERROR,
    UPDATED,
    CodeBlock,
    FileOperationResult,
    ProcessReport,
)

__all__ = [
    "CREATED",
    "UPDATED",
    "ERROR",
    "CodeBlock",
    "FileOperationResult",
    "ProcessReport",
]
