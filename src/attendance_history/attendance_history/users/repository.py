from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Profile


class ProfileRepository(Protocol):
    """Read side of the record store for employee profiles.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def get_viewer_profile(self, viewer_id: str) -> Optional[Profile]:
        raise NotImplementedError

    def list_profiles(self) -> Sequence[Profile]:
        """All profiles ordered by name (admin only)."""

        raise NotImplementedError
