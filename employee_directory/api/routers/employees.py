"""Employee endpoints backed by the record store."""
from typing import Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...config import Settings
from ...core.pagination import paginate
from ...core.security import sanitize_input
from ...errors import EmployeeNotFoundError
from ...schemas import Employee, EmployeeInput, EmployeePage
from ...services.employees_service import SubmissionResult, submit_employee, translate_errors
from ...services.store import RecordStore
from ..dependencies import get_app_settings, get_store, not_found

router = APIRouter(prefix="/employees", tags=["employees"])


def _committed(result: SubmissionResult, store: RecordStore) -> Employee:
    if not result.ok:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "errors": result.errors,
                "messages": translate_errors(result.errors, store.t),
            },
        )
    return result.employee


@router.get("/", response_model=EmployeePage)
async def list_employees(
    q: str = "",
    page: int = 1,
    per_page: Optional[int] = Query(default=None, ge=1),
    view: Literal["table", "grid"] = "table",
    store: RecordStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> EmployeePage:
    """Search employees and return one page of the matches."""

    size = per_page or (settings.grid_items_per_page if view == "grid" else settings.items_per_page)
    result = paginate(store.search(sanitize_input(q)), page, size)
    return EmployeePage(
        items=result.items,
        total_pages=result.total_pages,
        current_page=result.current_page,
        has_next=result.has_next,
        has_prev=result.has_prev,
        total_items=result.total_items,
    )


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(employee_id: int, store: RecordStore = Depends(get_store)) -> Employee:
    """Return a single employee."""

    employee = store.get_by_id(employee_id)
    if employee is None:
        raise not_found(EmployeeNotFoundError(employee_id))
    return employee


@router.post("/", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(payload: EmployeeInput, store: RecordStore = Depends(get_store)) -> Employee:
    """Validate and add an employee; violations come back as a 422."""

    return _committed(submit_employee(store, payload), store)


@router.put("/{employee_id}", response_model=Employee)
async def update_employee(
    employee_id: int,
    payload: EmployeeInput,
    store: RecordStore = Depends(get_store),
) -> Employee:
    """Validate and replace an employee's fields."""

    if store.get_by_id(employee_id) is None:
        raise not_found(EmployeeNotFoundError(employee_id))
    try:
        result = submit_employee(store, payload, employee_id=employee_id)
    except EmployeeNotFoundError as exc:
        raise not_found(exc) from exc
    return _committed(result, store)


@router.delete("/{employee_id}", response_model=Employee)
async def delete_employee(employee_id: int, store: RecordStore = Depends(get_store)) -> Employee:
    """Remove an employee and return the removed record."""

    try:
        return store.delete(employee_id)
    except EmployeeNotFoundError as exc:
        raise not_found(exc) from exc
