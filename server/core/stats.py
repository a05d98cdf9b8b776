# server/core/stats.py

from typing import Iterable
from models.blog import Blog


def total_likes(blogs: Iterable[Blog]) -> int:
    return sum(blog.likes or 0 for blog in blogs)


def favorite_blog(blogs: Iterable[Blog]) -> dict | None:
    """
    Returns title, author and likes of the most liked blog.
    The latest blog wins a tie; None when there are no blogs.
    """
    favorite = None
    for blog in blogs:
        if favorite is None or (blog.likes or 0) >= (favorite.likes or 0):
            favorite = blog

    if favorite is None:
        return None

    return {
        "title": favorite.title,
        "author": favorite.author,
        "likes": favorite.likes,
    }
