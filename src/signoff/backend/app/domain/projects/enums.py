from __future__ import annotations

from enum import StrEnum


class ProjectStatus(StrEnum):
    PENDING = "PENDING"
    CHANGES_REQUESTED = "CHANGES_REQUESTED"
    APPROVED = "APPROVED"

    @property
    def is_terminal(self) -> bool:
        return self is ProjectStatus.APPROVED

    def can_transition_to(self, target: "ProjectStatus") -> bool:
        return target in _TRANSITIONS[self]


_TRANSITIONS: dict[ProjectStatus, frozenset[ProjectStatus]] = {
    ProjectStatus.PENDING: frozenset({ProjectStatus.APPROVED, ProjectStatus.CHANGES_REQUESTED}),
    ProjectStatus.CHANGES_REQUESTED: frozenset({ProjectStatus.APPROVED, ProjectStatus.CHANGES_REQUESTED}),
    ProjectStatus.APPROVED: frozenset(),
}


class DecisionType(StrEnum):
    APPROVED = "APPROVED"
    CHANGES_REQUESTED = "CHANGES_REQUESTED"

    @property
    def target_status(self) -> ProjectStatus:
        return ProjectStatus(self.value)
