# files_manager/routers/users.py
from typing import Any, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel
from sqlalchemy.orm import Session

from files_manager.models.user import User
from files_manager.routers.deps import get_current_user, get_db
from files_manager.services.users import create_user

router = APIRouter(prefix="/users", tags=["Users"])


class UserCreate(BaseModel):
    email: Any = None
    password: Any = None


@router.post("", status_code=201)
async def post_new(request: Request, payload: Optional[UserCreate] = None, db: Session = Depends(get_db)):
    payload = payload or UserCreate()
    user = await run_in_threadpool(create_user, db, payload.email, payload.password)

    await request.app.state.email_queue.enqueue(user_id=user.id)

    return user.to_dict()


@router.get("/me")
def get_me(user: User = Depends(get_current_user)):
    return user.to_dict()
