"""
Configuration settings for blogboard.

Override these in your Django settings.py:

    BLOGBOARD = {
        'RESTRICT_BLOG_CHANGES_TO_OWNER': True,
        'TRACE_HEADER': 'traceparent',
        ...
    }
"""
from django.conf import settings

DEFAULTS = {
    # When False, any authenticated user may edit, delete, open or close
    # any blog. Posts and comments are always owner-only.
    "RESTRICT_BLOG_CHANGES_TO_OWNER": True,

    # Field sizes
    "TITLE_MAX_LENGTH": 200,
    "OWNER_ID_MAX_LENGTH": 150,

    # Request correlation
    "TRACE_HEADER": "traceparent",
    "REQUEST_ID_HEADER": "X-Request-ID",
}


class BlogboardSettings:
    """
    Lazy settings object that reads from Django settings.

    Access via: from blogboard.conf import blog_settings
    """

    def __getattr__(self, name):
        if name not in DEFAULTS:
            raise AttributeError(f"Invalid blogboard setting: {name}")

        user_settings = getattr(settings, "BLOGBOARD", {})
        return user_settings.get(name, DEFAULTS[name])


blog_settings = BlogboardSettings()
