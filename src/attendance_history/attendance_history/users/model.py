from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Profile:
    """Employee identity as owned by the record store.

    Read-only here: the history view never writes profiles back.
    """

    profile_id: str
    name: str
    email: str
    employee_code: Optional[str] = None
    department: Optional[str] = None
    role: Role = Role.EMPLOYEE

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
