# files_manager/routers/auth.py
from typing import Optional

from fastapi import APIRouter, Depends, Header, Response
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from files_manager.core.errors import Unauthorized
from files_manager.routers.deps import get_auth
from files_manager.services.auth import AuthResolver

router = APIRouter(tags=["Auth"])

basic = HTTPBasic(auto_error=False)


@router.get("/connect")
def connect(
    credentials: Optional[HTTPBasicCredentials] = Depends(basic),
    auth: AuthResolver = Depends(get_auth),
):
    if credentials is None:
        raise Unauthorized()

    token = auth.connect(credentials.username, credentials.password)
    return {"token": token}


@router.get("/disconnect", status_code=204)
def disconnect(
    x_token: Optional[str] = Header(default=None),
    auth: AuthResolver = Depends(get_auth),
):
    auth.disconnect(x_token)
    # no body, no content-type, no content-length
    return Response(status_code=204)
