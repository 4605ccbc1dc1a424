import logging

from fastapi import APIRouter, Depends, Form, HTTPException, Request

from restopos.auth.dependencies import get_current_user
from restopos.auth.manager import authenticate
from restopos.schemas.user import Actor

log = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=Actor)
async def login(
    request: Request,
    username: str = Form(...),
    password: str = Form(...),
):
    actor = authenticate(username, password)
    if actor is None:
        log.warning("failed login: username=%s", username)
        raise HTTPException(status_code=401, detail="Invalid username or password")

    request.session["username"] = actor.username
    request.session["role"] = actor.role.value
    log.info("login: username=%s role=%s", actor.username, actor.role.value)
    return actor


@router.post("/logout")
async def logout(request: Request):
    request.session.clear()
    return {"success": True}


@router.get("/me", response_model=Actor)
async def whoami(user: Actor = Depends(get_current_user)):
    return user
