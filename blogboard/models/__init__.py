"""
Models for blogboard.

All models are importable from blogboard.models:

    from blogboard.models import Blog, Post, Comment
"""
from .blogs import Blog
from .posts import Post
from .comments import Comment

__all__ = [
    "Blog",
    "Post",
    "Comment",
]
