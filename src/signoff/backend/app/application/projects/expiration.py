from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from signoff.backend.app.domain.common import utcnow, ensure_utc
from signoff.backend.app.domain.projects import Project


class ExpirationPolicy:
    def __init__(self, default_days: int = 30) -> None:
        self._default_days = default_days

    def default_expiry(self, now: Optional[datetime] = None) -> datetime:
        return (now or utcnow()) + timedelta(days=self._default_days)

    def extended(self, days: int, now: Optional[datetime] = None) -> datetime:
        # bounds on days belong to the input layer
        return (now or utcnow()) + timedelta(days=days)

    def is_expired(self, project: Project, now: Optional[datetime] = None) -> bool:
        expires_at = ensure_utc(project.expires_at)
        if expires_at is None:
            return False
        return expires_at < (now or utcnow())
