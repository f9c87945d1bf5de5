"""Work Line API Routes

FastAPI routes for recording and editing work lines.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, Response, status

from src.api.schemas.work_line_request import WorkLineRequestSchema, WorkLinePatchSchema
from src.app.use_cases.work_lines import (
    CreateWorkLine,
    UpdateWorkLine,
    DeleteWorkLine,
    ListWorkLines,
    CreateWorkLineCommandDTO,
    UpdateWorkLineCommandDTO,
    WorkLineResponseDTO,
    WorkLineListResponseDTO,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_unit_of_work
from src.api.error import ClientError

router = APIRouter(prefix="/work-lines", tags=["Work Lines"])


@router.get("", response_model=WorkLineListResponseDTO)
async def list_work_lines(
    customer_id: Optional[int] = Query(default=None, description="Filter by customer"),
    invoiced: Optional[bool] = Query(default=None, description="Filter by billing state"),
    uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
):
    """
    List work lines ordered by work date, then creation order.

    **Query parameters:**
    - `customer_id` (optional): Only this customer's lines
    - `invoiced` (optional): true / false

    The response includes `pending_total`, the amount of the listed unbilled lines.
    """
    result = await ListWorkLines(uow.work_lines).execute(
        customer_id=customer_id, invoiced=invoiced
    )
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.post("", response_model=WorkLineResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_work_line(
    request: WorkLineRequestSchema,
    uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
):
    """
    Record a work line.

    **Returns:**
    - 201: Line recorded (unbilled)
    - 404: Customer or item not found
    - 422: Invalid request parameters
    """
    command = CreateWorkLineCommandDTO(**request.model_dump(exclude_unset=True))
    use_case = CreateWorkLine(uow, uow.work_lines, uow.customers, uow.items)
    result = await use_case.execute(command)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.patch("/{line_id}", response_model=WorkLineResponseDTO)
async def update_work_line(
    line_id: int,
    request: WorkLinePatchSchema,
    uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
):
    """
    Edit an unbilled work line.

    **Returns:**
    - 200: Line updated
    - 404: Line not found
    - 409: Line already invoiced
    """
    command = UpdateWorkLineCommandDTO(line_id=line_id, **request.model_dump(exclude_unset=True))
    result = await UpdateWorkLine(uow, uow.work_lines).execute(command)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.delete("/{line_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_work_line(line_id: int, uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work)):
    result = await DeleteWorkLine(uow, uow.work_lines).execute(line_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
