"""Queue endpoints — batch assignment view and monitor board."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from app.application.use_cases.queue_views import (
    GetActiveTicketsUseCase,
    GetMonitorQueueUseCase,
)
from app.infrastructure.api.dependencies import get_active_tickets_uc, get_monitor_queue_uc

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/queue", tags=["queue"])


@router.get("/active-tickets/{department_id}")
async def active_tickets(
    department_id: str,
    uc: GetActiveTicketsUseCase = Depends(get_active_tickets_uc),
):
    """Active tickets per on-duty employee: {employee_id: [ticket_id, ...]}."""
    try:
        return await uc.execute(department_id)
    except Exception:
        logger.exception("Error computing active tickets for department %s", department_id)
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/monitor/{department_id}")
async def monitor_queue(
    department_id: str,
    uc: GetMonitorQueueUseCase = Depends(get_monitor_queue_uc),
):
    """Monitor board: current ticket and upcoming queue per on-duty employee."""
    try:
        view = await uc.execute(department_id)
    except Exception:
        logger.exception("Error building monitor queue for department %s", department_id)
        raise HTTPException(status_code=500, detail="Internal server error")

    return {
        employee_id: {
            "name": entry.name,
            "currentTicket": entry.current_ticket,
            "queue": entry.queue,
        }
        for employee_id, entry in view.items()
    }
