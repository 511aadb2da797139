"""
Repositories for blogboard.

Each repository wraps one model with the same small set of operations:

    repository = PostRepository()
    post = repository.get_by_id(5)   # comments prefetched, or None
    repository.update(post)          # False if the row is gone
    repository.delete(5)             # cascades to comments

Missing rows are never an error here. Anything else the database raises
propagates to the caller.
"""
import logging

from .models import Blog, Post, Comment

logger = logging.getLogger(__name__)


class BaseRepository:
    """
    CRUD access to a single model.

    Subclasses set:
        model: the Django model class
        include: related names to prefetch in get_by_id
        update_fields: fields overwritten by update
    """

    model = None
    include = ()
    update_fields = ()

    def get_all(self):
        return list(self.model.objects.all())

    def get_by_id(self, pk):
        """
        Return the instance with its direct children loaded.

        Returns:
            Model instance, or None when no row matches
        """
        queryset = self.model.objects.prefetch_related(*self.include)
        try:
            return queryset.get(pk=pk)
        except self.model.DoesNotExist:
            return None

    def add(self, instance):
        instance.save(force_insert=True)
        logger.debug("Added %s %s", self.model.__name__, instance.pk)

    def update(self, instance):
        """
        Overwrite the mutable fields of an existing row.

        Does nothing if the row does not exist. If the row disappears
        between the check and the write, Django raises DatabaseError.

        Returns:
            True if a row was written, False if there was nothing to update
        """
        if instance.pk is None or not self.model.objects.filter(pk=instance.pk).exists():
            logger.debug("Skipped update of missing %s %s", self.model.__name__, instance.pk)
            return False

        instance.save(update_fields=[*self.update_fields, "updated_at"])
        logger.debug("Updated %s %s", self.model.__name__, instance.pk)
        return True

    def delete(self, pk):
        """Delete a row and, through the foreign keys, all of its descendants."""
        try:
            instance = self.model.objects.get(pk=pk)
        except self.model.DoesNotExist:
            logger.debug("Skipped delete of missing %s %s", self.model.__name__, pk)
            return

        _, deleted = instance.delete()
        logger.debug("Deleted %s %s: %s", self.model.__name__, pk, deleted)


class BlogRepository(BaseRepository):
    model = Blog
    include = ("posts",)
    update_fields = ("title", "description", "is_open")


class PostRepository(BaseRepository):
    model = Post
    include = ("comments",)
    update_fields = ("title", "content")

    def get_by_id(self, pk):
        queryset = Post.objects.select_related("blog").prefetch_related(*self.include)
        try:
            return queryset.get(pk=pk)
        except Post.DoesNotExist:
            return None


class CommentRepository(BaseRepository):
    model = Comment
    update_fields = ("content",)

    def get_by_id(self, pk):
        try:
            return Comment.objects.select_related("post__blog").get(pk=pk)
        except Comment.DoesNotExist:
            return None
