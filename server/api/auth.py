# server/api/auth.py

import logging
from pydantic import BaseModel
from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from config import Settings, get_settings
from core.errors import AuthInvalid, AuthRequired
from core.security import INVALID_TOKEN, issue_token, verify_token
from database import get_db
from models.user import User


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


# -------------------------------
# Authorization Gate
# -------------------------------

# Missing or non-bearer Authorization headers yield None instead of a 401.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/login", auto_error=False)


def resolve_user(
    token: str | None = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> User | None:
    """
    Verifies a presented bearer token and loads its user.
    Returns None when no token was sent; an invalid token fails the request.
    """
    if token is None:
        return None

    user_id = verify_token(token, settings)
    user = db.get(User, user_id)
    if user is None:
        logger.warning("Token for unknown user id %s", user_id)
        raise AuthInvalid(INVALID_TOKEN)
    return user


def require_user(user: User | None = Depends(resolve_user)) -> User:
    if user is None:
        raise AuthRequired(INVALID_TOKEN)
    return user


# -------------------------------
# Login Endpoint
# -------------------------------

class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    token: str
    username: str
    name: str | None = None


@router.post("/login", response_model=LoginResponse)
def login(
    req: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    token, user = issue_token(db, req.username, req.password, settings)
    logger.info("User %s logged in", user.username)
    return {"token": token, "username": user.username, "name": user.name}
