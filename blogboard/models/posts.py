"""
Post model for blogboard.
"""
from django.db import models
from django.urls import reverse

from ..conf import blog_settings


class Post(models.Model):
    """
    Entry within a blog.

    Deleting the blog deletes the post, and deleting the post deletes
    its comments.
    """

    title = models.CharField(max_length=blog_settings.TITLE_MAX_LENGTH)
    content = models.TextField()
    blog = models.ForeignKey(
        "blogboard.Blog",
        on_delete=models.CASCADE,
        related_name="posts",
    )
    owner_id = models.CharField(
        max_length=blog_settings.OWNER_ID_MAX_LENGTH,
        null=True,
        blank=True,
        db_index=True,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.title

    def get_absolute_url(self):
        return reverse("blogboard:post_detail", kwargs={"pk": self.pk})

    @property
    def preview(self):
        """Return truncated content for list display."""
        if len(self.content) > 280:
            return self.content[:280] + "..."
        return self.content

    @property
    def accepts_comments(self):
        """Comments follow the open/closed state of the parent blog."""
        return self.blog.accepts_submissions
