# server/api/blogs.py

import logging
import uuid
from pydantic import BaseModel, Field
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from core.errors import Forbidden, MalformedReference, NotFound, ValidationFailed
from core.stats import favorite_blog, total_likes
from database import get_db
from models.blog import Blog
from models.user import User
from api.auth import require_user


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/blogs")


# -------------------------------
# Request Schemas
# -------------------------------

class BlogCreate(BaseModel):
    """
    Fields accepted when creating a blog. Any client-sent owner is ignored.
    """
    title: str = Field(min_length=1)
    author: str | None = None
    url: str = Field(min_length=1)
    likes: int | None = 0


class BlogUpdate(BaseModel):
    title: str | None = None
    author: str | None = None
    url: str | None = None
    likes: int | None = None


# -------------------------------
# Helpers
# -------------------------------

def parse_blog_id(blog_id: str) -> str:
    try:
        return uuid.UUID(blog_id).hex
    except ValueError:
        raise MalformedReference("malformatted id")


def get_blog_or_404(db: Session, blog_id: str) -> Blog:
    blog = db.get(Blog, parse_blog_id(blog_id))
    if blog is None:
        raise NotFound("blog not found")
    return blog


# -------------------------------
# Blog Endpoints
# -------------------------------

@router.get("")
def list_blogs(db: Session = Depends(get_db)):
    blogs = db.query(Blog).order_by(Blog.created_at).all()
    return [blog.to_dict() for blog in blogs]


@router.get("/stats")
def blog_stats(db: Session = Depends(get_db)):
    """
    Summarizes likes over every stored blog.
    """
    blogs = db.query(Blog).order_by(Blog.created_at).all()
    return {"total_likes": total_likes(blogs), "favorite": favorite_blog(blogs)}


@router.get("/{blog_id}")
def read_blog(blog_id: str, db: Session = Depends(get_db)):
    return get_blog_or_404(db, blog_id).to_dict()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_blog(
    req: BlogCreate,
    current_user: User = Depends(require_user),
    db: Session = Depends(get_db),
):
    fields = req.model_dump()
    if fields["likes"] is None:
        fields["likes"] = 0

    blog = Blog(**fields, user_id=current_user.id)
    db.add(blog)
    db.commit()
    db.refresh(blog)
    logger.info("User %s created blog %s", current_user.username, blog.id)
    return blog.to_dict(expand_user=False)


@router.put("/{blog_id}")
def update_blog(blog_id: str, req: BlogUpdate, db: Session = Depends(get_db)):
    """
    Replaces the given fields of a blog. Any caller may update any blog;
    the owner never changes.
    """
    blog = get_blog_or_404(db, blog_id)
    changes = req.model_dump(exclude_unset=True)

    for field in ("title", "url"):
        if field in changes and not changes[field]:
            raise ValidationFailed(f"{field}: Field required")
    if "likes" in changes and changes["likes"] is None:
        changes["likes"] = 0

    for field, value in changes.items():
        setattr(blog, field, value)
    db.commit()
    db.refresh(blog)
    return blog.to_dict(expand_user=False)


@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_blog(
    blog_id: str,
    current_user: User = Depends(require_user),
    db: Session = Depends(get_db),
):
    blog = get_blog_or_404(db, blog_id)

    if blog.user_id != current_user.id:
        logger.warning("User %s tried to delete blog %s owned by another user", current_user.username, blog.id)
        raise Forbidden("you do not have permission to delete this blog")

    db.delete(blog)
    db.commit()
    logger.info("User %s deleted blog %s", current_user.username, blog_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
