# server/api/users.py

import logging
from pydantic import BaseModel
from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from config import Settings, get_settings
from core.errors import ValidationFailed
from core.security import get_password_hash
from database import get_db
from models.user import USERNAME_MIN_LENGTH, User
from api.auth import require_user


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users")

PASSWORD_MIN_LENGTH = 3
USERNAME_NOT_UNIQUE = "expected `username` to be unique"


class RegisterRequest(BaseModel):
    """
    Registration payload. Fields are optional here so the handler can
    answer with its own messages.
    """
    username: str | None = None
    name: str | None = None
    password: str | None = None


def validate_registration(req: RegisterRequest):
    if not req.password or len(req.password) < PASSWORD_MIN_LENGTH:
        raise ValidationFailed(
            f"password missing or too short, must be at least {PASSWORD_MIN_LENGTH} characters long"
        )
    if not req.username:
        raise ValidationFailed("Username is required")
    if len(req.username) < USERNAME_MIN_LENGTH:
        raise ValidationFailed(
            f"Username too short, must be at least {USERNAME_MIN_LENGTH} characters long"
        )


@router.post("")
def register(
    req: RegisterRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    validate_registration(req)

    if db.query(User).filter(User.username == req.username).first():
        raise ValidationFailed(USERNAME_NOT_UNIQUE)

    new_user = User(
        username=req.username,
        name=req.name,
        password_hash=get_password_hash(req.password, settings),
    )
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValidationFailed(USERNAME_NOT_UNIQUE)

    db.refresh(new_user)
    logger.info("Registered user %s", new_user.username)
    return new_user.to_dict()


@router.get("")
def list_users(db: Session = Depends(get_db)):
    users = db.query(User).order_by(User.username).all()
    return [user.to_dict() for user in users]


@router.get("/me")
def read_users_me(current_user: User = Depends(require_user)):
    return current_user.to_dict()
