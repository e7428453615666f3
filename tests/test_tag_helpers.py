"""Template-level tests for the tag_helpers filter library."""

import pytest
from django.template import Context, Template

from blog.tag_index import InvalidTagTable


def render(source, **context):
    return Template("{% load tag_helpers %}" + source).render(Context(context))


class TestTagHelpersFilters:
    """Filters are callable by name from templates."""

    def test_sort_tag_names(self):
        tags = {"Ruby": ["p1"], "ai": ["p2"], "AWS": ["p3"]}

        assert render('{{ tags|sort_tag_names|join:"," }}', tags=tags) == "ai,AWS,Ruby"

    def test_exclude_bookkeeping_keys(self):
        tags = {"type": "posts", "path": "/tags/", "crystal-lang": ["p1"]}

        out = render('{% for k in tags|exclude_bookkeeping_keys %}{{ k }};{% endfor %}', tags=tags)

        assert out == "crystal-lang;"

    def test_tags_only(self):
        tags = {"type": "posts", "crystal-lang": ["p1"], "infrastructure": ["p2"]}

        out = render('{{ tags|tags_only|sort_tag_names|join:"," }}', tags=tags)

        assert out == "crystal-lang,infrastructure"

    def test_sort_tags_by_name_loop(self):
        tags = {"type": "liquid", "Ruby": ["p1"], "ai": ["p2", "p3"]}

        out = render(
            '{% for name, posts in tags|sort_tags_by_name %}{{ name }}={{ posts|length }};{% endfor %}',
            tags=tags,
        )

        assert out == "ai=2;Ruby=1;"

    def test_empty_table_renders_nothing(self):
        assert render('{% for n in tags|sort_tag_names %}{{ n }}{% endfor %}', tags={}) == ""

    def test_malformed_table_fails_render(self):
        """A bad table must fail the render, not produce an empty index."""
        with pytest.raises(InvalidTagTable, match="sort_tags_by_name"):
            render('{% for n, p in tags|sort_tags_by_name %}{{ n }}{% endfor %}', tags=["ruby"])

    def test_missing_table_fails_render(self):
        with pytest.raises(InvalidTagTable, match="sort_tag_names"):
            render('{{ missing|sort_tag_names }}')
