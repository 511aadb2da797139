"""Django app configuration for blogboard."""
from django.apps import AppConfig


class BlogboardConfig(AppConfig):
    """Configuration for the blogboard app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "blogboard"
    verbose_name = "Blogboard"
