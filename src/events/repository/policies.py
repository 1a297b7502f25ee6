"""Row-level authorization for operator actions.

An operator manages the events of every organization where they are an
admin. Superusers manage every event.
"""

from uuid import UUID

from sqlalchemy import Select, select

from src.auth.dtos import CurrentUser
from src.events.repository.orm_models import Event, EventRegistration
from src.models.organization import MemberRole, OrganizationMember


def managed_event_ids(operator: CurrentUser) -> Select:
    return (
        select(Event.uuid)
        .join(OrganizationMember, OrganizationMember.organization_id == Event.organization_id)
        .where(OrganizationMember.user_id == operator.uuid)
        .where(OrganizationMember.role == MemberRole.ADMIN)
    )


def scope_registrations_to_operator(stmt, operator: CurrentUser):
    """Restrict a statement on event_registrations to rows the operator may modify."""
    if operator.is_superuser:
        return stmt
    return stmt.where(EventRegistration.event_id.in_(managed_event_ids(operator)))


async def can_manage_event(session, operator: CurrentUser, event_id: UUID) -> bool:
    if operator.is_superuser:
        return True
    result = await session.execute(managed_event_ids(operator).where(Event.uuid == event_id))
    return result.first() is not None
