"""Test configuration and fixtures."""

import pytest
from django.contrib.auth import get_user_model

from blog.models import Post, Tag


@pytest.fixture
def author(db):
    return get_user_model().objects.create_user(username="veelenga", password="test1234")


@pytest.fixture
def make_post(author):
    """Create a post carrying the given tag names (tags are created on demand)."""

    def _make_post(title, *tag_names, published=True):
        post = Post.objects.create(title=title, content=f"{title} content", author=author, published=published)
        post.tags.set([Tag.objects.get_or_create(name=name)[0] for name in tag_names])
        return post

    return _make_post
