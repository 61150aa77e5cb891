from __future__ import annotations

from signoff.backend.app.application.audit import AuditTrailRecorder
from signoff.backend.app.application.common.notifications import emit_safely
from signoff.backend.app.application.projects.dto import DecisionResultDTO, SubmitDecisionInputDTO
from signoff.backend.app.application.projects.expiration import ExpirationPolicy
from signoff.backend.app.application.projects.mappers import decision_result_dto
from signoff.backend.app.domain.audit import LogAction
from signoff.backend.app.domain.common.enums import ActorRole
from signoff.backend.app.domain.common.uow import UnitOfWork
from signoff.backend.app.domain.notifications import NotificationSink, ProjectEvent
from signoff.backend.app.domain.projects import Decision, DecisionType
from signoff.backend.app.domain.projects.errors import (
    InvalidDecision,
    ProjectLinkExpired,
    ProjectLocked,
    ProjectNotFound,
)

_AUDIT_ACTIONS: dict[DecisionType, LogAction] = {
    DecisionType.APPROVED: LogAction.CLIENT_APPROVED,
    DecisionType.CHANGES_REQUESTED: LogAction.CLIENT_REQUESTED_CHANGES,
}


def parse_decision_type(raw: str) -> DecisionType:
    try:
        return DecisionType(raw)
    except ValueError:
        raise InvalidDecision(raw) from None


class SubmitDecisionUseCase:
    """
    Client verdict on a project: the approval state machine.

    PENDING and CHANGES_REQUESTED accept either decision; APPROVED accepts
    nothing. The project row is locked for the whole read-check-write, so of
    two racing approvals the second one sees APPROVED and is rejected.
    """

    def __init__(self, uow: UnitOfWork, notifier: NotificationSink, expiration: ExpirationPolicy) -> None:
        self._uow = uow
        self._notifier = notifier
        self._expiration = expiration

    async def execute(self, dto: SubmitDecisionInputDTO) -> DecisionResultDTO:
        decision_type = parse_decision_type(dto.decision)

        async with self._uow:
            project = await self._uow.project_repo.get_by_public_token(dto.public_token, for_update=True)
            if project is None:
                raise ProjectNotFound()
            if self._expiration.is_expired(project):
                raise ProjectLinkExpired()
            if project.is_locked:
                raise ProjectLocked()

            latest = await self._uow.decision_repo.get_latest(project.id)
            if latest is not None and latest.is_retry_of(decision_type, dto.comment):
                # duplicate submission (double click, network retry): nothing to record
                return decision_result_dto(project, latest.comment)

            decision = Decision(
                project_id=project.id,
                type=decision_type,
                comment=dto.comment,
                actor_role=ActorRole.CLIENT,
                ip_address=dto.ip_address,
                user_agent=dto.user_agent,
            )
            project.apply_decision(decision)
            saved = await self._uow.project_repo.update(project)
            await self._uow.decision_repo.add(decision)
            await AuditTrailRecorder(self._uow).record(
                project.id,
                _AUDIT_ACTIONS[decision_type],
                ActorRole.CLIENT,
                ip_address=dto.ip_address,
                user_agent=dto.user_agent,
            )

        await emit_safely(
            self._notifier,
            saved.id,
            ProjectEvent.STATUS_UPDATED,
            {"status": saved.status.value, "latestComment": decision.comment},
        )
        return decision_result_dto(saved, decision.comment)
