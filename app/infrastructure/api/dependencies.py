"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

from zoneinfo import ZoneInfo

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.persistence.database import get_session
from app.adapters.persistence.repositories import (
    SqlAssignmentRepository,
    SqlEmployeeRepository,
    SqlOperationRepository,
    SqlTicketRepository,
)
from app.application.use_cases.assign_ticket import AssignTicketUseCase, CreateTicketUseCase
from app.application.use_cases.queue_views import (
    GetActiveTicketsUseCase,
    GetMonitorQueueUseCase,
)
from app.application.use_cases.staff_actions import (
    ToggleDutyUseCase,
    UpdateAssignmentStatusUseCase,
)
from app.config import settings

_queue_tz = ZoneInfo(settings.queue_timezone)


def get_ticket_repo(session: AsyncSession = Depends(get_session)) -> SqlTicketRepository:
    return SqlTicketRepository(session)


def get_operation_repo(session: AsyncSession = Depends(get_session)) -> SqlOperationRepository:
    return SqlOperationRepository(session)


def get_active_tickets_uc(
    session: AsyncSession = Depends(get_session),
) -> GetActiveTicketsUseCase:
    return GetActiveTicketsUseCase(
        ticket_repo=SqlTicketRepository(session),
        employee_repo=SqlEmployeeRepository(session),
        assignment_repo=SqlAssignmentRepository(session),
        tz=_queue_tz,
        promotion_threshold_minutes=settings.promotion_threshold_minutes,
    )


def get_monitor_queue_uc(
    session: AsyncSession = Depends(get_session),
) -> GetMonitorQueueUseCase:
    return GetMonitorQueueUseCase(
        ticket_repo=SqlTicketRepository(session),
        employee_repo=SqlEmployeeRepository(session),
        tz=_queue_tz,
    )


def get_create_ticket_uc(
    session: AsyncSession = Depends(get_session),
) -> CreateTicketUseCase:
    assign_uc = AssignTicketUseCase(
        employee_repo=SqlEmployeeRepository(session),
        assignment_repo=SqlAssignmentRepository(session),
    )
    return CreateTicketUseCase(
        ticket_repo=SqlTicketRepository(session),
        operation_repo=SqlOperationRepository(session),
        assign_ticket=assign_uc,
    )


def get_update_assignment_uc(
    session: AsyncSession = Depends(get_session),
) -> UpdateAssignmentStatusUseCase:
    return UpdateAssignmentStatusUseCase(assignment_repo=SqlAssignmentRepository(session))


def get_toggle_duty_uc(
    session: AsyncSession = Depends(get_session),
) -> ToggleDutyUseCase:
    return ToggleDutyUseCase(employee_repo=SqlEmployeeRepository(session))
