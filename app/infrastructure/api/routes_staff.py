"""Staff endpoints — close served tickets, go on/off duty."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.persistence.database import get_session
from app.application.use_cases.staff_actions import (
    ToggleDutyUseCase,
    UpdateAssignmentStatusUseCase,
)
from app.domain.value_objects.enums import AssignmentStatus
from app.infrastructure.api.dependencies import get_toggle_duty_uc, get_update_assignment_uc

router = APIRouter(tags=["staff"])


class UpdateAssignmentRequest(BaseModel):
    status: AssignmentStatus
    notes: str | None = None


@router.patch("/assignments/{ticket_id}")
async def update_assignment(
    ticket_id: str,
    body: UpdateAssignmentRequest,
    uc: UpdateAssignmentStatusUseCase = Depends(get_update_assignment_uc),
    session: AsyncSession = Depends(get_session),
):
    """Mark the ticket COMPLETE or CANCELLED."""
    if not body.status.is_terminal:
        raise HTTPException(status_code=400, detail="Status must be COMPLETE or CANCELLED")
    try:
        assignment = await uc.execute(ticket_id, body.status, body.notes)
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))
    if not assignment:
        raise HTTPException(status_code=404, detail="Assignment not found")
    await session.commit()

    return {
        "ticketId": assignment.ticket_id,
        "employeeId": assignment.employee_id,
        "status": assignment.status.value,
        "notes": assignment.notes,
    }


@router.patch("/employees/{employee_id}/toggle-duty")
async def toggle_duty(
    employee_id: str,
    uc: ToggleDutyUseCase = Depends(get_toggle_duty_uc),
    session: AsyncSession = Depends(get_session),
):
    employee = await uc.execute(employee_id)
    if not employee:
        raise HTTPException(status_code=404, detail="Employee not found")
    await session.commit()

    return {
        "id": employee.id,
        "name": employee.name,
        "onDuty": employee.on_duty,
        "departmentId": employee.department_id,
    }
