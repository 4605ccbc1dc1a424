# auth/dependencies.py
from fastapi import Depends, HTTPException, Request

from restopos.auth import policy
from restopos.auth.policy import Resource
from restopos.schemas.user import Actor, Role
from restopos.services.pos.state import PosState


def get_pos_state(request: Request) -> PosState:
    return request.app.state.pos


async def get_current_user(request: Request) -> Actor:
    username = request.session.get("username")
    role = request.session.get("role")
    if not username or role not in {r.value for r in Role}:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return Actor(username=username, role=role)


def require_view(resource: Resource):
    async def _dep(user: Actor = Depends(get_current_user)) -> Actor:
        # PermissionDenied is answered with 403 by restopos.api.errors
        policy.require_view(user, resource)
        return user
    return _dep


get_current_admin_user = require_view(Resource.settings)
