"""Catalogue endpoints — what a kiosk can offer before issuing a ticket."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.adapters.persistence.repositories import SqlOperationRepository
from app.domain.entities.operation import Operation
from app.infrastructure.api.dependencies import get_operation_repo

router = APIRouter(tags=["catalogue"])


@router.get("/departments/{department_id}/operation-groups")
async def department_operation_groups(
    department_id: str,
    operations: SqlOperationRepository = Depends(get_operation_repo),
):
    """Operation groups offered by the department, each with its operations."""
    groups = await operations.list_groups_for_department(department_id)
    if groups is None:
        raise HTTPException(status_code=404, detail="Department not found")

    return [
        {
            "id": g.id,
            "name": g.name,
            "description": g.description,
            "operations": [_serialize_operation(o) for o in await operations.list_operations(g.id)],
        }
        for g in groups
    ]


@router.get("/operation-groups/{group_id}/operations")
async def group_operations(
    group_id: str,
    operations: SqlOperationRepository = Depends(get_operation_repo),
):
    found = await operations.list_operations(group_id)
    if not found:
        raise HTTPException(status_code=404, detail="No operations for this operation group")
    return [_serialize_operation(o) for o in found]


def _serialize_operation(o: Operation) -> dict:
    return {
        "id": o.id,
        "name": o.name,
        "description": o.description,
        "operationGroupId": o.operation_group_id,
    }
