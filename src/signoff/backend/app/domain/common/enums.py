from __future__ import annotations

from enum import StrEnum


class ActorRole(StrEnum):
    ADMIN = "ADMIN"
    CLIENT = "CLIENT"
