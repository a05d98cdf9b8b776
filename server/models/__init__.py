# server/models/__init__.py

import uuid
from sqlalchemy.orm import declarative_base


Base = declarative_base()


def new_id() -> str:
    return uuid.uuid4().hex


from .user import User  # noqa: E402,F401
from .blog import Blog  # noqa: E402,F401
