"""
Comment model for blogboard.
"""
from django.db import models
from django.urls import reverse

from ..conf import blog_settings


class Comment(models.Model):
    """Comment on a post."""

    content = models.TextField()
    post = models.ForeignKey(
        "blogboard.Post",
        on_delete=models.CASCADE,
        related_name="comments",
    )
    owner_id = models.CharField(
        max_length=blog_settings.OWNER_ID_MAX_LENGTH,
        null=True,
        blank=True,
        db_index=True,
    )

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at"]

    def __str__(self):
        return f"Comment by {self.owner_id} on {self.post}"

    def get_absolute_url(self):
        return reverse("blogboard:comment_detail", kwargs={"pk": self.pk})

    @property
    def preview(self):
        """Return truncated content for admin display."""
        if len(self.content) > 100:
            return self.content[:100] + "..."
        return self.content
