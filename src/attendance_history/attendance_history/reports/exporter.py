from __future__ import annotations

import csv
import io
import logging
from datetime import date
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import now_local
from ..core.constants import REPORT_DELIMITER, REPORT_ENCODING, REPORT_FILENAME_PREFIX, REPORT_LINE_TERMINATOR
from ..core.enums import Role
from .model import ExportError, ExportResult, FileArtifact
from .schema import ExportSchema, schema_for

logger = logging.getLogger(__name__)


def report_filename(today: date) -> str:
    return f"{REPORT_FILENAME_PREFIX}_{today.isoformat()}.csv"


def render_csv(records: Sequence[AttendanceRecord], schema: ExportSchema) -> bytes:
    """Serialize with RFC-4180 quoting; identical input gives identical bytes."""

    out = io.StringIO()
    writer = csv.writer(
        out,
        delimiter=REPORT_DELIMITER,
        quotechar='"',
        quoting=csv.QUOTE_MINIMAL,
        doublequote=True,
        lineterminator=REPORT_LINE_TERMINATOR,
    )
    writer.writerow(schema.headers)
    for record in records:
        writer.writerow(schema.row(record))
    return out.getvalue().encode(REPORT_ENCODING)


def export_csv(
    filtered: Sequence[AttendanceRecord],
    viewer_role: Role,
    *,
    today: Optional[date] = None,
) -> ExportResult:
    """Build the CSV artifact for the currently visible records.

    An empty selection is an expected outcome, reported as EMPTY_DATASET.
    """

    if not filtered:
        logger.info("Export skipped: no records to export")
        return ExportResult.failure(ExportError.EMPTY_DATASET)

    schema = schema_for(viewer_role)
    today = today or now_local().date()
    artifact = FileArtifact(filename=report_filename(today), content=render_csv(filtered, schema))
    logger.info("Exported %d attendance rows (%s schema) as %s", len(filtered), schema.name, artifact.filename)
    return ExportResult.success(artifact)
