from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from restopos.auth.dependencies import get_current_user, get_pos_state
from restopos.schemas.menu_item import Category, MenuItem, MenuItemCreate, MenuItemUpdate
from restopos.schemas.user import Actor
from restopos.services.pos.state import PosState

router = APIRouter(prefix="/menu", tags=["menu"])


@router.get("", response_model=List[MenuItem])
async def list_menu_items(
    category: Optional[Category] = None,
    search: Optional[str] = None,
    available_only: bool = False,
    state: PosState = Depends(get_pos_state),
    user: Actor = Depends(get_current_user),
):
    if available_only:
        return state.catalog.available(category, search)
    return state.catalog.list(category, search)


@router.get("/{item_id}", response_model=MenuItem)
async def get_menu_item(
    item_id: int,
    state: PosState = Depends(get_pos_state),
    user: Actor = Depends(get_current_user),
):
    item = state.catalog.get(item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Menu item not found")
    return item


@router.post("", response_model=MenuItem, status_code=201)
async def create_menu_item(
    data: MenuItemCreate,
    state: PosState = Depends(get_pos_state),
    user: Actor = Depends(get_current_user),
):
    return state.catalog.add(user, data)


@router.patch("/{item_id}", response_model=MenuItem)
async def update_menu_item(
    item_id: int,
    changes: MenuItemUpdate,
    state: PosState = Depends(get_pos_state),
    user: Actor = Depends(get_current_user),
):
    return state.catalog.update(user, item_id, changes)


@router.delete("/{item_id}")
async def delete_menu_item(
    item_id: int,
    confirm: bool = Query(False),
    state: PosState = Depends(get_pos_state),
    user: Actor = Depends(get_current_user),
):
    if not state.catalog.delete(user, item_id, confirm=confirm):
        raise HTTPException(status_code=404, detail="Menu item not found")
    return {"success": True, "deleted": item_id}
