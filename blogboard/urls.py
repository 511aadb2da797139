"""
URL configuration for blogboard.

Include in your project urls.py:

    path('', include('blogboard.urls')),
    handler500 = 'blogboard.views.server_error'

The repositories and the policy are built once here and handed to each
view.
"""
from django.urls import path

from . import views
from .policy import OwnershipPolicy
from .repositories import BlogRepository, PostRepository, CommentRepository

app_name = "blogboard"

blogs = BlogRepository()
posts = PostRepository()
comments = CommentRepository()
policy = OwnershipPolicy()

urlpatterns = [
    path("", views.HomeView.as_view(), name="home"),
    path("privacy/", views.PrivacyView.as_view(), name="privacy"),

    # Blogs
    path("blog/", views.BlogListView.as_view(repository=blogs), name="blog_list"),
    path("blog/new/", views.BlogCreateView.as_view(repository=blogs, policy=policy), name="blog_create"),
    path("blog/<int:pk>/", views.BlogDetailView.as_view(repository=blogs, policy=policy), name="blog_detail"),
    path("blog/<int:pk>/edit/", views.BlogUpdateView.as_view(repository=blogs, policy=policy), name="blog_update"),
    path("blog/<int:pk>/delete/", views.BlogDeleteView.as_view(repository=blogs, policy=policy), name="blog_delete"),
    path(
        "blog/<int:pk>/open/",
        views.BlogAvailabilityView.as_view(repository=blogs, policy=policy, is_open=True),
        name="blog_open",
    ),
    path(
        "blog/<int:pk>/close/",
        views.BlogAvailabilityView.as_view(repository=blogs, policy=policy, is_open=False),
        name="blog_close",
    ),

    # Posts
    path("post/", views.PostListView.as_view(repository=posts), name="post_list"),
    path(
        "post/new/",
        views.PostCreateView.as_view(repository=posts, blog_repository=blogs, policy=policy),
        name="post_create",
    ),
    path("post/<int:pk>/", views.PostDetailView.as_view(repository=posts), name="post_detail"),
    path("post/<int:pk>/edit/", views.PostUpdateView.as_view(repository=posts, policy=policy), name="post_update"),
    path("post/<int:pk>/delete/", views.PostDeleteView.as_view(repository=posts, policy=policy), name="post_delete"),

    # Comments
    path("comment/", views.CommentListView.as_view(repository=comments), name="comment_list"),
    path(
        "comment/new/",
        views.CommentCreateView.as_view(repository=comments, post_repository=posts, policy=policy),
        name="comment_create",
    ),
    path("comment/<int:pk>/", views.CommentDetailView.as_view(repository=comments), name="comment_detail"),
    path(
        "comment/<int:pk>/edit/",
        views.CommentUpdateView.as_view(repository=comments, policy=policy),
        name="comment_update",
    ),
    path(
        "comment/<int:pk>/delete/",
        views.CommentDeleteView.as_view(repository=comments, policy=policy),
        name="comment_delete",
    ),
]
