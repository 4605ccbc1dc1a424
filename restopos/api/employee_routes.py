from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from restopos.auth.dependencies import get_pos_state, require_view
from restopos.auth.policy import Resource
from restopos.schemas.employee import Employee, EmployeeCreate, EmployeeUpdate
from restopos.schemas.user import Actor
from restopos.services.pos.state import PosState

router = APIRouter(prefix="/employees", tags=["employees"])

admin_view = require_view(Resource.employees)


@router.get("", response_model=List[Employee])
async def list_employees(
    search: Optional[str] = None,
    state: PosState = Depends(get_pos_state),
    user: Actor = Depends(admin_view),
):
    return state.employees.search(search)


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(
    employee_id: int,
    state: PosState = Depends(get_pos_state),
    user: Actor = Depends(admin_view),
):
    employee = state.employees.get(employee_id)
    if not employee:
        raise HTTPException(status_code=404, detail="Employee not found")
    return employee


@router.post("", response_model=Employee, status_code=201)
async def create_employee(
    data: EmployeeCreate,
    state: PosState = Depends(get_pos_state),
    user: Actor = Depends(admin_view),
):
    return state.employees.add(user, data)


@router.patch("/{employee_id}", response_model=Employee)
async def update_employee(
    employee_id: int,
    changes: EmployeeUpdate,
    state: PosState = Depends(get_pos_state),
    user: Actor = Depends(admin_view),
):
    return state.employees.update(user, employee_id, changes)


@router.delete("/{employee_id}")
async def delete_employee(
    employee_id: int,
    confirm: bool = Query(False),
    state: PosState = Depends(get_pos_state),
    user: Actor = Depends(admin_view),
):
    if not state.employees.delete(user, employee_id, confirm=confirm):
        raise HTTPException(status_code=404, detail="Employee not found")
    return {"success": True, "deleted": employee_id}
