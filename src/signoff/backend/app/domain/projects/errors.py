from signoff.backend.app.domain.common.errors import (
    NotFoundError,
    LockedError,
    GoneError,
    InvalidInputError,
)


class ProjectNotFound(NotFoundError):
    def __init__(self, reference: str = "") -> None:
        super().__init__("Project not found")
        self.reference = reference


class ProjectLocked(LockedError):
    def __init__(self) -> None:
        super().__init__("Project already approved and locked.")


class ProjectLinkExpired(GoneError):
    def __init__(self) -> None:
        super().__init__("This project link has expired")


class InvalidProjectName(InvalidInputError):
    pass


class InvalidDecision(InvalidInputError):
    def __init__(self, decision: str) -> None:
        super().__init__(
            f"Invalid decision {decision!r}. Must be one of: APPROVED, CHANGES_REQUESTED"
        )
        self.decision = decision


