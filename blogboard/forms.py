"""
Forms for blogboard.

Owner ids are never form fields: they are stamped by the policy on create
and left untouched on edit, so any owner_id in a submitted payload is
ignored.
"""
from django import forms

from .models import Blog, Post, Comment


class BlogForm(forms.ModelForm):
    class Meta:
        model = Blog
        fields = ["title", "description"]


class BlogEditForm(forms.ModelForm):
    class Meta:
        model = Blog
        fields = ["title", "description", "is_open"]


class PostForm(forms.ModelForm):
    class Meta:
        model = Post
        fields = ["title", "content"]


class PostCreateForm(PostForm):
    """Post form carrying the id of the parent blog."""

    blog_id = forms.IntegerField(widget=forms.HiddenInput)


class CommentForm(forms.ModelForm):
    class Meta:
        model = Comment
        fields = ["content"]


class CommentCreateForm(CommentForm):
    """Comment form carrying the id of the parent post."""

    post_id = forms.IntegerField(widget=forms.HiddenInput)
