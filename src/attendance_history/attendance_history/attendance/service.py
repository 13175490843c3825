from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Callable, Optional, Sequence, TypeVar

from ..core.constants import ADMIN_RECORD_LIMIT, EMPLOYEE_SELECTOR_ALL
from ..core.enums import AttendanceKind, AttendanceStatus, Role
from ..core.exceptions import AuthenticationMissing, RetrievalFailure
from ..reports.exporter import export_csv
from ..reports.model import ExportResult
from ..users.model import Profile
from ..users.repository import ProfileRepository
from .classifier import CATEGORY_LABELS, KIND_LABELS, RecordPresentation, classify
from .filter_engine import filter_records
from .model import AttendanceRecord, FilterCriteria
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")

KIND_OPTIONS = ("", AttendanceKind.CHECK_IN.value, AttendanceKind.CHECK_OUT.value)
STATUS_OPTIONS = (
    "",
    AttendanceStatus.SUCCESS.value,
    AttendanceStatus.FACE_INVALID.value,
    AttendanceStatus.LOCATION_INVALID.value,
)


@dataclass(frozen=True)
class Notice:
    """Non-fatal, user-facing message (the controller decides how to show it)."""

    level: str
    title: str
    message: str


@dataclass(frozen=True)
class HistoryView:
    """State of one history view session.

    `filtered` is always derived from `records` and `criteria`; every change
    goes through `apply()`/`with_records()` and returns a new view.
    """

    viewer: Profile
    records: tuple[AttendanceRecord, ...] = ()
    profiles: tuple[Profile, ...] = ()
    criteria: FilterCriteria = FilterCriteria()
    filtered: tuple[AttendanceRecord, ...] = ()
    notices: tuple[Notice, ...] = ()

    @property
    def role(self) -> Role:
        return self.viewer.role

    @property
    def is_admin(self) -> bool:
        return self.viewer.is_admin

    def apply(self, criteria: FilterCriteria) -> "HistoryView":
        filtered = filter_records(self.records, criteria, self.role)
        return replace(self, criteria=criteria, filtered=tuple(filtered))

    def reset_filters(self) -> "HistoryView":
        return self.apply(FilterCriteria())

    def with_records(self, records: Sequence[AttendanceRecord]) -> "HistoryView":
        return replace(self, records=tuple(records)).apply(self.criteria)

    def with_notice(self, notice: Notice) -> "HistoryView":
        return replace(self, notices=self.notices + (notice,))

    def rows(self) -> list[RecordPresentation]:
        return [classify(r, include_employee=self.is_admin) for r in self.filtered]

    def selected_employee_label(self) -> Optional[str]:
        if not self.is_admin:
            return None
        selector = self.criteria.employee_selector
        if not selector or selector == EMPLOYEE_SELECTOR_ALL:
            return "All employees"
        for profile in self.profiles:
            if profile.profile_id == selector:
                return profile.name
        return "Employee"

    def summary(self) -> dict:
        return {
            "visible": len(self.filtered),
            "total": len(self.records),
            "employee": self.selected_employee_label(),
        }

    def filter_options(self) -> dict:
        """Values for the filter controls shown by the rendering layer."""

        options = {
            "kinds": [{"value": v, "label": KIND_LABELS.get(v, "All")} for v in KIND_OPTIONS],
            "statuses": [{"value": v, "label": CATEGORY_LABELS.get(v, "All")} for v in STATUS_OPTIONS],
        }
        if self.is_admin:
            options["employees"] = [{"value": EMPLOYEE_SELECTOR_ALL, "label": "All employees"}] + [
                {"value": p.profile_id, "label": p.name} for p in self.profiles
            ]
        return options

    def export(self, *, today: Optional[date] = None) -> ExportResult:
        return export_csv(self.filtered, self.role, today=today)


class AttendanceHistoryService:
    """Use case: load, refresh and filter a viewer's attendance history.

    Store failures stop here: they become notices and the view keeps the data
    it already had.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        profiles: ProfileRepository,
        *,
        admin_record_limit: int = ADMIN_RECORD_LIMIT,
    ):
        self._attendance = attendance
        self._profiles = profiles
        self._admin_record_limit = int(admin_record_limit)

    async def _call(self, what: str, fn: Callable[..., T], *args) -> T:
        try:
            return await asyncio.to_thread(fn, *args)
        except Exception as exc:
            logger.exception("Failed to load %s", what)
            if isinstance(exc, RetrievalFailure):
                raise
            raise RetrievalFailure(f"Failed to load {what}") from exc

    async def _resolve_viewer(self, viewer_id: Optional[str]) -> Profile:
        if not viewer_id:
            raise AuthenticationMissing("No active viewer")
        try:
            viewer = await self._call("viewer profile", self._profiles.get_viewer_profile, str(viewer_id))
        except RetrievalFailure as exc:
            raise AuthenticationMissing("Viewer profile could not be loaded") from exc
        if viewer is None:
            raise AuthenticationMissing(f"Unknown viewer {viewer_id}")
        return viewer

    def _fetch_records(self, viewer: Profile):
        if viewer.is_admin:
            return self._call("attendance records", self._attendance.list_recent, self._admin_record_limit)
        return self._call("attendance history", self._attendance.list_for_user, viewer.profile_id)

    async def load(self, viewer_id: Optional[str], criteria: Optional[FilterCriteria] = None) -> HistoryView:
        """Initial load. Raises AuthenticationMissing; never RetrievalFailure."""

        viewer = await self._resolve_viewer(viewer_id)
        view = HistoryView(viewer=viewer, criteria=criteria or FilterCriteria())

        if viewer.is_admin:
            records, profiles = await asyncio.gather(
                self._fetch_records(viewer),
                self._call("employees", self._profiles.list_profiles),
                return_exceptions=True,
            )
            if isinstance(profiles, BaseException):
                view = view.with_notice(Notice("error", "Load failed", "Could not load the employee list."))
            else:
                view = replace(view, profiles=tuple(profiles))
        else:
            try:
                records = await self._fetch_records(viewer)
            except RetrievalFailure as exc:
                records = exc

        if isinstance(records, BaseException):
            view = view.with_notice(Notice("error", "Load failed", "Could not load attendance data."))
            records = ()

        return view.with_records(records)

    async def refresh(self, view: HistoryView) -> HistoryView:
        """Re-fetch records; on failure keep what the view already shows."""

        try:
            records = await self._fetch_records(view.viewer)
        except RetrievalFailure:
            return view.with_notice(Notice("error", "Refresh failed", "Could not refresh attendance data."))
        return view.with_records(records)

    async def load_options(self, viewer_id: Optional[str]) -> HistoryView:
        """Viewer and, for admins, the employee list; attendance is not fetched."""

        viewer = await self._resolve_viewer(viewer_id)
        view = HistoryView(viewer=viewer)
        if not viewer.is_admin:
            return view
        try:
            profiles = await self._call("employees", self._profiles.list_profiles)
        except RetrievalFailure:
            return view.with_notice(Notice("error", "Load failed", "Could not load the employee list."))
        return replace(view, profiles=tuple(profiles))
