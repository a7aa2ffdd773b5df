"""Ticket endpoints — issue a ticket and look it up."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field, field_validator
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.persistence.database import get_session
from app.adapters.persistence.repositories import SqlOperationRepository, SqlTicketRepository
from app.application.use_cases.assign_ticket import CreateTicketUseCase
from app.domain.entities.assignment import Assignment
from app.domain.entities.ticket import Ticket
from app.infrastructure.api.dependencies import (
    get_create_ticket_uc,
    get_operation_repo,
    get_ticket_repo,
)

router = APIRouter(prefix="/tickets", tags=["tickets"])


class CreateTicketRequest(BaseModel):
    operation_id: str = Field(alias="operationId")
    appointed_time: datetime | None = Field(default=None, alias="appointedTime")

    model_config = {"populate_by_name": True}

    @field_validator("appointed_time")
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


@router.post("", status_code=201)
async def create_ticket(
    body: CreateTicketRequest,
    operations: SqlOperationRepository = Depends(get_operation_repo),
    uc: CreateTicketUseCase = Depends(get_create_ticket_uc),
    session: AsyncSession = Depends(get_session),
):
    """Issue a ticket and hand it to the first eligible on-duty employee."""
    operation = await operations.get_by_id(body.operation_id)
    if not operation:
        raise HTTPException(status_code=404, detail="Operation not found")

    try:
        created = await uc.execute(operation, appointed_time=body.appointed_time)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    await session.commit()

    return _serialize_ticket(created.ticket, created.assignment)


@router.get("/{ticket_id}")
async def get_ticket(
    ticket_id: str,
    tickets: SqlTicketRepository = Depends(get_ticket_repo),
):
    ticket = await tickets.get_by_id(ticket_id)
    if not ticket:
        raise HTTPException(status_code=404, detail="Ticket not found")
    return _serialize_ticket(ticket, ticket.assignment)


def _serialize_ticket(t: Ticket, assignment: Assignment | None) -> dict:
    data = {
        "id": t.id,
        "operationId": t.operation_id,
        "departmentId": t.department_id,
        "appointedTime": t.appointed_time.isoformat() if t.appointed_time else None,
        "createdAt": t.created_at.isoformat(),
    }
    if assignment:
        data["assignment"] = {
            "employeeId": assignment.employee_id,
            "status": assignment.status.value,
            "notes": assignment.notes,
        }
    else:
        data["assignment"] = None
    return data
