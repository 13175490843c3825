from __future__ import annotations

from typing import Iterable, Optional

from ..core.enums import Role
from .factory import RecordFilterFactory
from .model import AttendanceRecord, FilterCriteria

_DEFAULT_FACTORY = RecordFilterFactory()


def filter_records(
    records: Iterable[AttendanceRecord],
    criteria: FilterCriteria,
    viewer_role: Role,
    *,
    factory: Optional[RecordFilterFactory] = None,
) -> list[AttendanceRecord]:
    """Visible subset of `records`, in input order.

    Pure: returns a new list and never re-sorts, so the store's
    newest-first order is preserved.
    """

    filters = (factory or _DEFAULT_FACTORY).for_criteria(criteria, viewer_role)
    return [r for r in records if all(f.matches(r) for f in filters)]
