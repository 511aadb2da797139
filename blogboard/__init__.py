"""
blogboard - blogs, posts and comments with owner-only editing.

Features:
- Blogs that can be opened or closed for new posts and comments
- Posts and comments editable and deletable by their owner only
- Cascading deletes from blog to posts to comments
- Thin repositories over the Django ORM, injected into the views
- Per-request correlation ids on the error page and in logs
"""

__version__ = "0.1.0"
