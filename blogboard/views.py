"""
Views for blogboard.

Views hold no state of their own. The repositories and the ownership
policy are passed in through as_view() in urls.py.
"""
import logging

from django.contrib.auth.mixins import LoginRequiredMixin
from django.contrib.auth.views import redirect_to_login
from django.core.exceptions import PermissionDenied
from django.db import DatabaseError
from django.http import Http404, HttpResponseRedirect, HttpResponseServerError
from django.shortcuts import redirect
from django.template import loader
from django.urls import reverse, reverse_lazy
from django.views import View
from django.views.generic import (
    ListView,
    DetailView,
    CreateView,
    UpdateView,
    DeleteView,
    RedirectView,
    TemplateView,
)

from .forms import (
    BlogForm,
    BlogEditForm,
    PostForm,
    PostCreateForm,
    CommentForm,
    CommentCreateForm,
)
from .middleware import new_request_id
from .policy import (
    CreationRejected,
    EntityNotFound,
    NotAuthenticated,
    NotOwner,
    principal_id_for,
)

logger = logging.getLogger(__name__)


class PolicyMixin:
    """Translate policy outcomes into HTTP responses."""

    repository = None
    policy = None

    def dispatch(self, request, *args, **kwargs):
        try:
            return super().dispatch(request, *args, **kwargs)
        except EntityNotFound as exc:
            raise Http404(str(exc))
        except NotOwner as exc:
            raise PermissionDenied(str(exc))
        except NotAuthenticated:
            return redirect_to_login(request.get_full_path())

    @property
    def principal_id(self):
        return principal_id_for(self.request.user)


class RepositoryObjectMixin(PolicyMixin):
    """Load the object named by the pk in the URL through the repository."""

    def get_queryset(self):
        return self.repository.get_all()

    def get_object(self, queryset=None):
        obj = self.repository.get_by_id(self.kwargs["pk"])
        if obj is None:
            raise Http404(f"No {self.repository.model._meta.verbose_name} found")
        return obj


class OwnerRequiredMixin(RepositoryObjectMixin):
    """Only let the owner load the object for editing or deletion."""

    def get_object(self, queryset=None):
        obj = self.repository.get_by_id(self.kwargs["pk"])
        self.authorize(obj)
        return obj

    def authorize(self, obj):
        self.policy.authorize_change(self.principal_id, obj)


class BlogOwnerRequiredMixin(OwnerRequiredMixin):
    def authorize(self, obj):
        self.policy.authorize_blog_change(self.principal_id, obj)


class RepositoryUpdateView(LoginRequiredMixin, UpdateView):
    """
    Edit an existing object.

    The id in the form must match the id in the URL. The owner id is not a
    form field, so it survives the edit unchanged.
    """

    def post(self, request, *args, **kwargs):
        if request.POST.get("id") != str(kwargs["pk"]):
            raise Http404("Id mismatch")
        return super().post(request, *args, **kwargs)

    def form_valid(self, form):
        # Either branch means the row was deleted after the ownership check
        try:
            updated = self.repository.update(form.instance)
        except DatabaseError:
            if self.repository.get_by_id(form.instance.pk) is None:
                raise Http404("No longer exists")
            raise
        if not updated:
            raise Http404("No longer exists")
        return HttpResponseRedirect(self.get_success_url())


class RepositoryDeleteView(LoginRequiredMixin, DeleteView):
    """Delete an object and everything beneath it."""

    http_method_names = ["get", "post"]

    def form_valid(self, form):
        success_url = self.get_success_url()
        self.repository.delete(self.object.pk)
        logger.info(
            "%s deleted %s %s",
            self.principal_id, type(self.object).__name__, self.object.pk,
        )
        return HttpResponseRedirect(success_url)


# Home


class HomeView(RedirectView):
    pattern_name = "blogboard:blog_list"


class PrivacyView(TemplateView):
    template_name = "blogboard/privacy.html"


# Blogs


class BlogListView(RepositoryObjectMixin, ListView):
    """List every blog."""

    template_name = "blogboard/blog_list.html"
    context_object_name = "blogs"


class BlogDetailView(RepositoryObjectMixin, DetailView):
    """Display a blog with its posts."""

    template_name = "blogboard/blog_detail.html"
    context_object_name = "blog"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["can_change_blog"] = self.policy.can_change_blog(self.principal_id, self.object)
        return context


class BlogCreateView(LoginRequiredMixin, PolicyMixin, CreateView):
    """Create a new blog, open and owned by the current user."""

    form_class = BlogForm
    template_name = "blogboard/blog_form.html"
    success_url = reverse_lazy("blogboard:blog_list")

    def form_valid(self, form):
        self.policy.authorize_blog_creation(self.principal_id, form.instance)
        self.repository.add(form.instance)
        self.object = form.instance
        return HttpResponseRedirect(self.get_success_url())


class BlogUpdateView(BlogOwnerRequiredMixin, RepositoryUpdateView):
    form_class = BlogEditForm
    template_name = "blogboard/blog_form.html"
    context_object_name = "blog"


class BlogDeleteView(BlogOwnerRequiredMixin, RepositoryDeleteView):
    template_name = "blogboard/blog_confirm_delete.html"
    context_object_name = "blog"
    success_url = reverse_lazy("blogboard:blog_list")


class BlogAvailabilityView(LoginRequiredMixin, PolicyMixin, View):
    """Open or close a blog for new posts and comments."""

    http_method_names = ["post"]
    is_open = True

    def post(self, request, pk):
        blog = self.repository.get_by_id(pk)
        self.policy.authorize_blog_change(self.principal_id, blog)

        if self.is_open:
            blog.open()
        else:
            blog.close()
        if not self.repository.update(blog):
            raise Http404("No longer exists")

        logger.info("%s set blog %s is_open=%s", self.principal_id, pk, blog.is_open)
        return redirect(blog)


# Posts


class PostListView(RepositoryObjectMixin, ListView):
    template_name = "blogboard/post_list.html"
    context_object_name = "posts"


class PostDetailView(RepositoryObjectMixin, DetailView):
    """Display a post with its comments."""

    template_name = "blogboard/post_detail.html"
    context_object_name = "post"


class PostCreateView(LoginRequiredMixin, PolicyMixin, CreateView):
    """Add a post to an open blog."""

    form_class = PostCreateForm
    template_name = "blogboard/post_form.html"
    blog_repository = None

    def get_initial(self):
        initial = super().get_initial()
        if "blog" in self.request.GET:
            initial["blog_id"] = self.request.GET["blog"]
        return initial

    def form_valid(self, form):
        blog = self.blog_repository.get_by_id(form.cleaned_data["blog_id"])
        try:
            self.policy.authorize_post_creation(self.principal_id, form.instance, blog)
        except CreationRejected as exc:
            logger.info("Rejected post by %s: %s", self.principal_id, exc)
            form.add_error(None, str(exc))
            return self.form_invalid(form)

        self.repository.add(form.instance)
        self.object = form.instance
        return redirect(blog)


class PostUpdateView(OwnerRequiredMixin, RepositoryUpdateView):
    form_class = PostForm
    template_name = "blogboard/post_form.html"
    context_object_name = "post"

    def get_success_url(self):
        return reverse("blogboard:blog_detail", kwargs={"pk": self.object.blog_id})


class PostDeleteView(OwnerRequiredMixin, RepositoryDeleteView):
    template_name = "blogboard/post_confirm_delete.html"
    context_object_name = "post"

    def get_success_url(self):
        return reverse("blogboard:blog_detail", kwargs={"pk": self.object.blog_id})


# Comments


class CommentListView(RepositoryObjectMixin, ListView):
    template_name = "blogboard/comment_list.html"
    context_object_name = "comments"


class CommentDetailView(RepositoryObjectMixin, DetailView):
    template_name = "blogboard/comment_detail.html"
    context_object_name = "comment"


class CommentCreateView(LoginRequiredMixin, PolicyMixin, CreateView):
    """Add a comment to a post in an open blog."""

    form_class = CommentCreateForm
    template_name = "blogboard/comment_form.html"
    post_repository = None

    def get_initial(self):
        initial = super().get_initial()
        if "post" in self.request.GET:
            initial["post_id"] = self.request.GET["post"]
        return initial

    def form_valid(self, form):
        post = self.post_repository.get_by_id(form.cleaned_data["post_id"])
        try:
            self.policy.authorize_comment_creation(self.principal_id, form.instance, post)
        except CreationRejected as exc:
            logger.info("Rejected comment by %s: %s", self.principal_id, exc)
            form.add_error(None, str(exc))
            return self.form_invalid(form)

        self.repository.add(form.instance)
        self.object = form.instance
        return redirect(post)


class CommentUpdateView(OwnerRequiredMixin, RepositoryUpdateView):
    form_class = CommentForm
    template_name = "blogboard/comment_form.html"
    context_object_name = "comment"

    def get_success_url(self):
        return reverse("blogboard:post_detail", kwargs={"pk": self.object.post_id})


class CommentDeleteView(OwnerRequiredMixin, RepositoryDeleteView):
    template_name = "blogboard/comment_confirm_delete.html"
    context_object_name = "comment"

    def get_success_url(self):
        return reverse("blogboard:post_detail", kwargs={"pk": self.object.post_id})


# Errors


def server_error(request, template_name="blogboard/error.html"):
    """
    500 error handler showing the correlation id of the failed request.

    Use as handler500 in the project's root URLconf.
    """
    request_id = getattr(request, "request_id", None) or new_request_id()
    template = loader.get_template(template_name)
    return HttpResponseServerError(template.render({"request_id": request_id}))
