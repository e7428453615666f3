"""Tests for tag slug generation."""

import pytest

from blog.models import Tag


@pytest.mark.django_db
class TestTagSlug:
    def test_transliterates_name(self):
        assert Tag.objects.create(name="Технологии").slug == "tekhnologii"

    def test_case_variants_get_distinct_slugs(self):
        upper = Tag.objects.create(name="AI")
        lower = Tag.objects.create(name="ai")
        third = Tag.objects.create(name="Ai")

        assert (upper.slug, lower.slug, third.slug) == ("ai", "ai-2", "ai-3")

    def test_resave_keeps_slug(self):
        tag = Tag.objects.create(name="Ruby")
        Tag.objects.create(name="ruby")

        tag.name = "RUBY"
        tag.save()
        tag.refresh_from_db()

        assert tag.slug == "ruby"

    def test_explicit_slug_is_kept(self):
        assert Tag.objects.create(name="Crystal", slug="crystal-lang").slug == "crystal-lang"

    def test_unsluggable_name(self):
        assert Tag.objects.create(name="+++").slug == "tag"
