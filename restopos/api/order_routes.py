import os
from datetime import date, datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from restopos.auth.dependencies import get_current_user, get_pos_state
from restopos.schemas.order import (
    CartDiscountUpdate,
    CartItemAdd,
    CartQuantityUpdate,
    CartRead,
    CartServiceChargeUpdate,
    Order,
    OrderTotals,
)
from restopos.schemas.user import Actor
from restopos.services.pos.order_ledger import normalize_order_id
from restopos.services.pos.state import PosState
from restopos.utils.currency import format_currency
from restopos.utils.timezones import to_local

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")

templates = Jinja2Templates(directory=TEMPLATES_DIR)
router = APIRouter(tags=["orders"])


def _cart(state: PosState) -> CartRead:
    builder = state.builder
    return CartRead(
        items=builder.items,
        discount=builder.discount,
        use_service_charge=builder.use_service_charge,
        totals=builder.compute_totals(),
        pending_order=builder.pending,
    )


# -----------------------
# Current order (cart)
# -----------------------

@router.get("/order", response_model=CartRead)
async def view_cart(state: PosState = Depends(get_pos_state), user: Actor = Depends(get_current_user)):
    return _cart(state)


@router.post("/order/items", response_model=CartRead)
async def add_cart_item(
    data: CartItemAdd,
    state: PosState = Depends(get_pos_state),
    user: Actor = Depends(get_current_user),
):
    item = state.catalog.get(data.menu_item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Menu item not found")
    if not item.is_available:
        raise HTTPException(status_code=400, detail=f"{item.name} is not available")

    state.builder.add_item(item)
    return _cart(state)


@router.put("/order/items/{item_id}", response_model=CartRead)
async def update_cart_quantity(
    item_id: int,
    data: CartQuantityUpdate,
    state: PosState = Depends(get_pos_state),
    user: Actor = Depends(get_current_user),
):
    state.builder.set_quantity(item_id, data.quantity)
    return _cart(state)


@router.delete("/order/items/{item_id}", response_model=CartRead)
async def remove_cart_item(
    item_id: int,
    state: PosState = Depends(get_pos_state),
    user: Actor = Depends(get_current_user),
):
    state.builder.set_quantity(item_id, 0)
    return _cart(state)


@router.put("/order/discount", response_model=CartRead)
async def set_cart_discount(
    data: CartDiscountUpdate,
    state: PosState = Depends(get_pos_state),
    user: Actor = Depends(get_current_user),
):
    state.builder.set_discount(data.discount)
    return _cart(state)


@router.put("/order/service-charge", response_model=CartRead)
async def set_cart_service_charge(
    data: CartServiceChargeUpdate,
    state: PosState = Depends(get_pos_state),
    user: Actor = Depends(get_current_user),
):
    state.builder.set_service_charge(data.enabled)
    return _cart(state)


@router.get("/order/totals", response_model=OrderTotals)
async def cart_totals(state: PosState = Depends(get_pos_state), user: Actor = Depends(get_current_user)):
    return state.builder.compute_totals()


@router.post("/order/finalize", response_model=Order)
async def finalize_order(state: PosState = Depends(get_pos_state), user: Actor = Depends(get_current_user)):
    """Build the receipt preview. Nothing is saved until /order/confirm."""
    return state.builder.finalize(state.orders)


@router.post("/order/confirm", response_model=Order, status_code=201)
async def confirm_order(state: PosState = Depends(get_pos_state), user: Actor = Depends(get_current_user)):
    return state.builder.confirm(state.orders)


@router.post("/order/cancel", response_model=CartRead)
async def cancel_order(state: PosState = Depends(get_pos_state), user: Actor = Depends(get_current_user)):
    state.builder.cancel()
    return _cart(state)


# -----------------------
# Order ledger
# -----------------------

@router.get("/orders", response_model=List[Order])
async def list_orders(
    day: Optional[date] = Query(None, description="Local calendar day, YYYY-MM-DD"),
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    state: PosState = Depends(get_pos_state),
    user: Actor = Depends(get_current_user),
):
    if day:
        return state.orders.filter_by_day(day)
    if start or end:
        if not (start and end):
            raise HTTPException(status_code=422, detail="Both start and end are required")
        return state.orders.filter_by_date_range(start, end)
    return state.orders.all()


@router.get("/orders/{order_id}", response_model=Order)
async def get_order(
    order_id: str,
    state: PosState = Depends(get_pos_state),
    user: Actor = Depends(get_current_user),
):
    order = state.orders.find_by_id(normalize_order_id(order_id))
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


@router.get("/orders/{order_id}/receipt", response_class=HTMLResponse)
async def order_receipt(
    request: Request,
    order_id: str,
    state: PosState = Depends(get_pos_state),
    user: Actor = Depends(get_current_user),
):
    order = state.orders.find_by_id(normalize_order_id(order_id))
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")

    currency = state.config.currency
    return templates.TemplateResponse(
        request,
        "receipt.html",
        {
            "order": order,
            "issued_at": to_local(order.date),
            "currency": currency,
            "money": lambda amount: format_currency(amount, currency),
        },
    )


@router.delete("/orders/{order_id}")
async def delete_order(
    order_id: str,
    confirm: bool = Query(False),
    state: PosState = Depends(get_pos_state),
    user: Actor = Depends(get_current_user),
):
    order_id = normalize_order_id(order_id)
    if not state.orders.delete(user, order_id, confirm=confirm):
        raise HTTPException(status_code=404, detail="Order not found")
    return {"success": True, "deleted": order_id}
