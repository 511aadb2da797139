"""
Shared fixtures for blogboard tests.
"""
import pytest
from django.contrib.auth import get_user_model

from blogboard.models import Blog, Post, Comment

User = get_user_model()


@pytest.fixture
def alice(db):
    """Create the user who owns the fixture content."""
    return User.objects.create_user(username="alice", password="alicepass123")


@pytest.fixture
def bob(db):
    """Create a second user who owns nothing."""
    return User.objects.create_user(username="bob", password="bobpass123")


@pytest.fixture
def blog(db):
    """Create an open blog owned by alice."""
    return Blog.objects.create(
        title="Alice's Blog",
        description="Thoughts and notes.",
        owner_id="alice",
    )


@pytest.fixture
def closed_blog(db):
    """Create a closed blog owned by alice."""
    return Blog.objects.create(
        title="Archive",
        owner_id="alice",
        is_open=False,
    )


@pytest.fixture
def post(db, blog):
    """Create a post owned by alice."""
    return Post.objects.create(
        title="First Post",
        content="Hello world.",
        blog=blog,
        owner_id="alice",
    )


@pytest.fixture
def comment(db, post):
    """Create a comment owned by alice."""
    return Comment.objects.create(
        content="Nice post!",
        post=post,
        owner_id="alice",
    )
