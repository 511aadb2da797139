"""
Tests for blogboard models.
"""
import pytest
from django.contrib import admin

from blogboard.models import Blog, Post, Comment


class TestBlog:
    """Tests for Blog model."""

    def test_create_blog(self, db):
        """Test creating a blog."""
        blog = Blog.objects.create(title="My Blog", owner_id="alice")
        assert blog.title == "My Blog"
        assert blog.is_open
        assert str(blog) == "My Blog"

    def test_owner_id_is_nullable(self, db):
        """Test a blog can be stored without an owner."""
        blog = Blog.objects.create(title="Imported")
        blog.refresh_from_db()
        assert blog.owner_id is None

    def test_open_and_close(self, blog):
        """Test the availability flag flips both ways."""
        blog.close()
        assert not blog.accepts_submissions
        blog.close()
        assert not blog.is_open

        blog.open()
        assert blog.accepts_submissions

    def test_open_close_do_not_save(self, blog):
        """Test open/close only change the instance."""
        blog.close()
        blog.refresh_from_db()
        assert blog.is_open

    def test_get_absolute_url(self, blog):
        """Test blog detail url."""
        assert blog.get_absolute_url() == f"/blog/{blog.pk}/"


class TestPost:
    """Tests for Post model."""

    def test_create_post(self, blog):
        """Test creating a post."""
        post = Post.objects.create(
            title="Hello",
            content="World",
            blog=blog,
            owner_id="alice",
        )
        assert post.blog == blog
        assert list(blog.posts.all()) == [post]

    def test_post_preview(self, blog):
        """Test post preview truncation."""
        post = Post.objects.create(title="Long", content="x" * 500, blog=blog)
        assert len(post.preview) == 283  # 280 + "..."

    def test_accepts_comments_follows_blog(self, post):
        """Test comments follow the blog's open flag."""
        assert post.accepts_comments
        post.blog.close()
        assert not post.accepts_comments

    def test_get_absolute_url(self, post):
        assert post.get_absolute_url() == f"/post/{post.pk}/"


class TestComment:
    """Tests for Comment model."""

    def test_create_comment(self, post):
        """Test creating a comment."""
        comment = Comment.objects.create(content="Great post!", post=post, owner_id="bob")
        assert comment.post == post
        assert str(comment) == "Comment by bob on First Post"

    def test_comment_preview(self, post):
        comment = Comment.objects.create(content="y" * 150, post=post)
        assert comment.preview == "y" * 100 + "..."

    def test_comments_ordered_by_creation(self, post):
        """Test comments come back oldest first."""
        first = Comment.objects.create(content="one", post=post)
        second = Comment.objects.create(content="two", post=post)
        assert list(post.comments.all()) == [first, second]


class TestCascade:
    """Tests for deletes through the foreign keys."""

    def test_deleting_blog_removes_posts_and_comments(self, blog, post, comment):
        blog.delete()
        assert not Post.objects.filter(pk=post.pk).exists()
        assert not Comment.objects.filter(pk=comment.pk).exists()

    def test_deleting_post_keeps_blog(self, blog, post, comment):
        post.delete()
        assert Blog.objects.filter(pk=blog.pk).exists()
        assert not Comment.objects.filter(pk=comment.pk).exists()


@pytest.mark.parametrize("model", [Blog, Post, Comment])
def test_models_registered_in_admin(model):
    """Test every model is available in the admin."""
    assert admin.site.is_registered(model)
