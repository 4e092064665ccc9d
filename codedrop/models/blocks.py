from dataclasses import dataclass, field
from typing import List, Optional

# Outcome tags carried by FileOperationResult.outcome
CREATED = "created"
UPDATED = "updated"
ERROR = "error"


@dataclass(frozen=True)
class CodeBlock:
    """One fenced code section lifted out of a response."""

    language: str
    filename: str
    code: str
    is_complete: bool = False
    # The filename exactly as the fence annotated it, before inference.
    declared_filename: str = ""

    @property
    def is_materializable(self) -> bool:
        return bool(self.filename) and self.is_complete


@dataclass
class FileOperationResult:
    """Outcome of writing a single block to disk."""

    outcome: str  # "created", "updated" or "error"
    target_path: str
    message: str
    filename: str = ""
    backup_path: Optional[str] = None
    project: Optional[str] = None
    dry_run: bool = False

    @property
    def ok(self) -> bool:
        return self.outcome != ERROR


@dataclass
class ProcessReport:
    """Everything one response-processing pass produced."""

    blocks: List[CodeBlock] = field(default_factory=list)
    results: List[FileOperationResult] = field(default_factory=list)
    summary: str = ""

    @property
    def created(self) -> List[FileOperationResult]:
        return [r for r in self.results if r.outcome == CREATED]

    @property
    def updated(self) -> List[FileOperationResult]:
        return [r for r in self.results if r.outcome == UPDATED]

    @property
    def errors(self) -> List[FileOperationResult]:
        return [r for r in self.results if r.outcome == ERROR]
