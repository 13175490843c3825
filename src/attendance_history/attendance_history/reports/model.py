from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..core.constants import REPORT_MIMETYPE


class ExportError(str, Enum):
    """Expected export outcomes that are not a file. Returned, never raised."""

    EMPTY_DATASET = "empty_dataset"


@dataclass(frozen=True)
class FileArtifact:
    filename: str
    content: bytes
    mimetype: str = REPORT_MIMETYPE


@dataclass(frozen=True)
class ExportResult:
    artifact: Optional[FileArtifact] = None
    error: Optional[ExportError] = None

    @property
    def ok(self) -> bool:
        return self.artifact is not None and self.error is None

    @classmethod
    def success(cls, artifact: FileArtifact) -> "ExportResult":
        return cls(artifact=artifact)

    @classmethod
    def failure(cls, error: ExportError) -> "ExportResult":
        return cls(error=error)
