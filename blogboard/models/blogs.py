"""
Blog model for blogboard.
"""
from django.db import models
from django.urls import reverse

from ..conf import blog_settings


class Blog(models.Model):
    """
    A container for posts.

    A blog is either open or closed. Closing a blog stops new posts and
    comments from being created beneath it; existing content stays visible
    and editable by its owners.
    """

    title = models.CharField(max_length=blog_settings.TITLE_MAX_LENGTH)
    description = models.TextField(blank=True)
    is_open = models.BooleanField(
        default=True,
        help_text="Whether new posts and comments may be added",
    )

    # Username of the creating user. Nullable for rows imported from
    # systems that allowed anonymous blogs.
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
        return reverse("blogboard:blog_detail", kwargs={"pk": self.pk})

    @property
    def accepts_submissions(self):
        """Check if new posts and comments may be added."""
        return self.is_open

    def open(self):
        """Open the blog for new posts and comments."""
        self.is_open = True

    def close(self):
        """Close the blog for new posts and comments."""
        self.is_open = False
