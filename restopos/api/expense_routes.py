from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from restopos.auth.dependencies import get_pos_state, require_view
from restopos.auth.policy import Resource
from restopos.schemas.expense import Expense, ExpenseCreate
from restopos.schemas.user import Actor
from restopos.services.pos.state import PosState
from restopos.utils.timezones import parse_month

router = APIRouter(prefix="/expenses", tags=["expenses"])

admin_view = require_view(Resource.expenses)


@router.get("", response_model=List[Expense])
async def list_expenses(
    month: Optional[str] = Query(None, description="YYYY-MM"),
    state: PosState = Depends(get_pos_state),
    user: Actor = Depends(admin_view),
):
    if not month:
        return state.expenses.all()
    try:
        year, month_num = parse_month(month)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return state.expenses.filter_by_month(year, month_num)


@router.post("", response_model=Expense, status_code=201)
async def create_expense(
    data: ExpenseCreate,
    state: PosState = Depends(get_pos_state),
    user: Actor = Depends(admin_view),
):
    return state.expenses.add(user, data)


@router.delete("/{expense_id}")
async def delete_expense(
    expense_id: int,
    confirm: bool = Query(False),
    state: PosState = Depends(get_pos_state),
    user: Actor = Depends(admin_view),
):
    if not state.expenses.delete(user, expense_id, confirm=confirm):
        raise HTTPException(status_code=404, detail="Expense not found")
    return {"success": True, "deleted": expense_id}
