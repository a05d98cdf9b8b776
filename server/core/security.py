# server/core/security.py

import logging
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session
from config import Settings
from core.errors import AuthInvalid, AuthRequired
from models.user import User


logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "invalid username or password"
INVALID_TOKEN = "token missing or invalid"


# -------------------------------
# Password Hashing
# -------------------------------

@lru_cache(maxsize=None)
def _pwd_context(rounds: int) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def get_password_hash(password: str, settings: Settings) -> str:
    return _pwd_context(settings.bcrypt_rounds).hash(password)


def verify_password(plain_password: str, hashed_password: str, settings: Settings) -> bool:
    return _pwd_context(settings.bcrypt_rounds).verify(plain_password, hashed_password)


# -------------------------------
# Token Issue / Verify
# -------------------------------

def create_access_token(data: dict, settings: Settings, expires_delta: timedelta | None = None) -> str:
    to_encode = data.copy()
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode.update({"iat": now, "exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def authenticate_user(db: Session, username: str, password: str, settings: Settings) -> User:
    """
    Looks the user up by username and checks the password against its hash.
    Unknown users and wrong passwords fail with the same error.
    """
    user = db.query(User).filter(User.username == username).first()
    if not user or not verify_password(password, user.password_hash, settings):
        logger.info("Failed login attempt for username %r", username)
        raise AuthInvalid(INVALID_CREDENTIALS)
    return user


def issue_token(db: Session, username: str, password: str, settings: Settings) -> tuple[str, User]:
    user = authenticate_user(db, username, password, settings)
    token = create_access_token({"sub": user.id, "username": user.username}, settings)
    return token, user


def verify_token(token: str | None, settings: Settings) -> str:
    """
    Returns the user id embedded in a signed, unexpired token.
    The caller must still check that the user exists.
    """
    if not token:
        raise AuthRequired(INVALID_TOKEN)
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as e:
        logger.info("Rejected token: %s", e)
        raise AuthInvalid(INVALID_TOKEN)
    user_id = payload.get("sub")
    if not user_id:
        raise AuthInvalid(INVALID_TOKEN)
    return user_id
