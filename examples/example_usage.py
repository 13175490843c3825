"""Example: use the service layer without Flask.

Loads a viewer's history, narrows it to the current month and writes the CSV
report next to this script.
"""

import asyncio
import importlib
import sys
from pathlib import Path

from config import get_settings_module

from src.attendance_history.attendance_history.attendance.model import FilterCriteria
from src.attendance_history.attendance_history.common.datetime_utils import now_local
from src.attendance_history.attendance_history.container import build_container


def main(viewer_id: str):
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    today = now_local().date()
    criteria = FilterCriteria(start_date=today.replace(day=1).isoformat(), end_date=today.isoformat())
    view = asyncio.run(container.attendance_history_service.load(viewer_id, criteria))

    for notice in view.notices:
        print(f"[{notice.level}] {notice.title}: {notice.message}")
    for row in view.rows():
        print(row.date_text, row.time_text, row.kind_label, row.category, row.lateness_text)

    result = view.export()
    if not result.ok:
        print("Nothing to export")
        return
    out = Path(__file__).resolve().parent / result.artifact.filename
    out.write_bytes(result.artifact.content)
    print(f"Wrote {out}")


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "")
