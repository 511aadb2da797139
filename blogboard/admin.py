"""
Django admin configuration for blogboard.

The admin works on the models directly and is not subject to the
ownership policy; staff can fix up orphaned or ownerless content here.
"""
from django.contrib import admin

from .models import Blog, Post, Comment


class PostInline(admin.TabularInline):
    """Inline for the posts of a blog."""

    model = Post
    extra = 0
    fields = ["title", "owner_id", "created_at"]
    readonly_fields = ["created_at"]
    show_change_link = True


class CommentInline(admin.TabularInline):
    """Inline for the comments on a post."""

    model = Comment
    extra = 0
    fields = ["content", "owner_id", "created_at"]
    readonly_fields = ["created_at"]


@admin.register(Blog)
class BlogAdmin(admin.ModelAdmin):
    list_display = ["title", "owner_id", "is_open", "post_count", "created_at"]
    list_filter = ["is_open", "created_at"]
    search_fields = ["title", "description", "owner_id"]
    readonly_fields = ["created_at", "updated_at"]
    inlines = [PostInline]
    actions = ["open_blogs", "close_blogs"]

    def post_count(self, obj):
        return obj.posts.count()

    post_count.short_description = "Posts"

    @admin.action(description="Open selected blogs")
    def open_blogs(self, request, queryset):
        count = queryset.update(is_open=True)
        self.message_user(request, f"{count} blogs opened.")

    @admin.action(description="Close selected blogs")
    def close_blogs(self, request, queryset):
        count = queryset.update(is_open=False)
        self.message_user(request, f"{count} blogs closed.")


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ["title_preview", "blog", "owner_id", "created_at"]
    list_filter = ["blog", "created_at"]
    search_fields = ["title", "content", "owner_id"]
    raw_id_fields = ["blog"]
    readonly_fields = ["created_at", "updated_at"]
    date_hierarchy = "created_at"
    inlines = [CommentInline]

    def title_preview(self, obj):
        """Truncated title for list display."""
        return obj.title[:60] + "..." if len(obj.title) > 60 else obj.title

    title_preview.short_description = "Title"


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ["preview", "owner_id", "post", "created_at"]
    list_filter = ["created_at"]
    search_fields = ["content", "owner_id", "post__title"]
    raw_id_fields = ["post"]
    readonly_fields = ["created_at", "updated_at"]
