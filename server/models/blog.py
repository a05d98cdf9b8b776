# server/models/blog.py

from datetime import datetime
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from . import Base, new_id


class Blog(Base):
    __tablename__ = "blogs"

    id = Column(String(32), primary_key=True, default=new_id)
    title = Column(String, nullable=False)
    author = Column(String, nullable=True)
    url = Column(String, nullable=False)
    likes = Column(Integer, nullable=False, default=0)
    user_id = Column(String(32), ForeignKey("users.id"), index=True, nullable=False)
    created_at = Column(DateTime, default=datetime.now, nullable=False)

    user = relationship("User", back_populates="blogs")

    def to_summary(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "url": self.url,
            "likes": self.likes,
        }

    def to_dict(self, expand_user: bool = True) -> dict:
        data = self.to_summary()
        data["user"] = self.user.to_summary() if expand_user else self.user_id
        return data
