"""
Ownership and lifecycle rules for blogboard.

The policy works on principal ids (usernames) rather than user objects so
it can be used and tested without the auth framework. Every check either
returns normally or raises a PolicyError subclass; the views translate
those into HTTP responses.
"""
import logging

from .conf import blog_settings

logger = logging.getLogger(__name__)


class PolicyError(Exception):
    """Base class for policy outcomes that stop an operation."""


class NotAuthenticated(PolicyError):
    """The caller is anonymous."""


class EntityNotFound(PolicyError):
    """The entity being changed does not exist."""


class NotOwner(PolicyError):
    """The caller is authenticated but does not own the entity."""


class CreationRejected(PolicyError):
    """
    A create request is well formed but not allowed.

    The message is meant to be shown to the user next to the form.
    """


def is_owner(principal_id, owner_id):
    """
    Check whether a principal owns a resource.

    Comparison is exact and case-sensitive. A missing id on either side
    never matches.
    """
    if principal_id is None or owner_id is None:
        return False
    return principal_id == owner_id


def principal_id_for(user):
    """Return the principal id for a Django user, or None if anonymous."""
    if user is None or not user.is_authenticated:
        return None
    return user.get_username()


class OwnershipPolicy:
    """
    Decides who may create, change and delete blogs, posts and comments.

    Args:
        restrict_blog_changes: apply the owner rule to blog edit, delete,
            open and close. Defaults to RESTRICT_BLOG_CHANGES_TO_OWNER.
    """

    def __init__(self, restrict_blog_changes=None):
        self._restrict_blog_changes = restrict_blog_changes

    @property
    def restrict_blog_changes(self):
        if self._restrict_blog_changes is None:
            return blog_settings.RESTRICT_BLOG_CHANGES_TO_OWNER
        return self._restrict_blog_changes

    def require_authenticated(self, principal_id):
        if principal_id is None:
            raise NotAuthenticated("Authentication required")

    def authorize_change(self, principal_id, entity):
        """
        Allow an edit or delete of an existing post or comment.

        Checks run in order: authenticated, exists, owned.
        """
        self.require_authenticated(principal_id)
        if entity is None:
            raise EntityNotFound("Not found")
        if not is_owner(principal_id, entity.owner_id):
            logger.warning(
                "%s denied change to %s %s owned by %s",
                principal_id, type(entity).__name__, entity.pk, entity.owner_id,
            )
            raise NotOwner("You do not own this item")

    def authorize_blog_change(self, principal_id, blog):
        """Allow an edit, delete, open or close of a blog."""
        if self.restrict_blog_changes:
            self.authorize_change(principal_id, blog)
            return
        self.require_authenticated(principal_id)
        if blog is None:
            raise EntityNotFound("Not found")

    def can_change_blog(self, principal_id, blog):
        """Return whether authorize_blog_change would let principal_id through."""
        if principal_id is None:
            return False
        return not self.restrict_blog_changes or is_owner(principal_id, blog.owner_id)

    def authorize_blog_creation(self, principal_id, blog):
        """Stamp a new blog with its owner and open it."""
        self.require_authenticated(principal_id)
        blog.owner_id = principal_id
        blog.open()

    def authorize_post_creation(self, principal_id, post, blog):
        """
        Allow a new post beneath blog and stamp its owner.

        Args:
            principal_id: the caller, or None if anonymous
            post: the unsaved post
            blog: the parent blog, or None if it does not exist
        """
        self.require_authenticated(principal_id)
        if blog is None:
            raise CreationRejected("Blog not found.")
        if not blog.accepts_submissions:
            raise CreationRejected("Cannot add post to a closed blog.")
        post.blog = blog
        post.owner_id = principal_id

    def authorize_comment_creation(self, principal_id, comment, post):
        """Allow a new comment on post and stamp its owner."""
        self.require_authenticated(principal_id)
        if post is None:
            raise CreationRejected("Post not found.")
        if not post.accepts_comments:
            raise CreationRejected("Cannot add comment to a closed blog.")
        comment.post = post
        comment.owner_id = principal_id
