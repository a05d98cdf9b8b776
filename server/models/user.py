# server/models/user.py

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from . import Base, new_id


USERNAME_MIN_LENGTH = 3


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Database model for application users.
    Stores the username, display name and bcrypt hash for authentication.
    Owned blogs are derived from Blog.user_id, so creating or deleting a blog
    updates this list without a second write.
    """
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=new_id)
    username = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=True)
    password_hash = Column(String, nullable=False)

    blogs = relationship(
        "Blog",
        back_populates="user",
        order_by="Blog.created_at",
        cascade="all, delete-orphan",
    )

    def to_summary(self) -> dict:
        return {"id": self.id, "username": self.username, "name": self.name}

    def to_dict(self) -> dict:
        data = self.to_summary()
        data["blogs"] = [blog.to_summary() for blog in self.blogs]
        return data
