from __future__ import annotations

import logging
from dataclasses import dataclass

from ..common.datetime_utils import try_parse_iso_date
from ..core.constants import EMPLOYEE_SELECTOR_ALL
from ..core.enums import Role
from .filters.base import RecordFilter
from .filters.date_filters import EndDateFilter, StartDateFilter
from .filters.field_filters import EmployeeFilter, KindFilter, ReportableKindFilter, StatusFilter
from .model import FilterCriteria

logger = logging.getLogger(__name__)


@dataclass
class RecordFilterFactory:
    """Factory Pattern: turn filter criteria into an ordered list of predicates."""

    def for_criteria(self, criteria: FilterCriteria, viewer_role: Role) -> list[RecordFilter]:
        filters: list[RecordFilter] = [ReportableKindFilter()]

        selector = (criteria.employee_selector or "").strip()
        if viewer_role == Role.ADMIN and selector and selector != EMPLOYEE_SELECTOR_ALL:
            filters.append(EmployeeFilter(selector))

        start = try_parse_iso_date(criteria.start_date)
        if start is not None:
            filters.append(StartDateFilter(start))
        elif criteria.start_date:
            logger.debug("Ignoring malformed start date %r", criteria.start_date)

        end = try_parse_iso_date(criteria.end_date)
        if end is not None:
            filters.append(EndDateFilter(end))
        elif criteria.end_date:
            logger.debug("Ignoring malformed end date %r", criteria.end_date)

        if criteria.kind:
            filters.append(KindFilter(criteria.kind))
        if criteria.status:
            filters.append(StatusFilter(criteria.status))
        return filters
