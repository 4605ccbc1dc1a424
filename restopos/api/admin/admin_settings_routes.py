# restopos/api/admin/admin_settings_routes.py
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from restopos.auth.dependencies import get_current_admin_user, get_pos_state
from restopos.auth.policy import Resource, require_mutate
from restopos.crud.settings import save_billing_config
from restopos.db import get_db
from restopos.schemas.settings import BillingConfig, BillingConfigUpdate
from restopos.schemas.user import Actor
from restopos.services.pos.state import PosState

log = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/settings", tags=["settings"])


@router.get("", response_model=BillingConfig)
async def get_settings(
    state: PosState = Depends(get_pos_state),
    user: Actor = Depends(get_current_admin_user),
):
    return state.config


@router.put("", response_model=BillingConfig)
async def update_settings(
    changes: BillingConfigUpdate,
    db: AsyncSession = Depends(get_db),
    state: PosState = Depends(get_pos_state),
    user: Actor = Depends(get_current_admin_user),
):
    """Persist first, then apply in place (the order builder holds the same object)."""
    require_mutate(user, Resource.settings)

    update_data = changes.model_dump(exclude_unset=True, exclude_none=True)
    merged = BillingConfig(**{**state.config.model_dump(), **update_data})

    # A failed save leaves the live config untouched
    await save_billing_config(db, merged)
    for key in update_data:
        setattr(state.config, key, getattr(merged, key))
    log.info("settings updated by=%s fields=%s", user.username, sorted(update_data))
    return state.config
