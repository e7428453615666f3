# blog/utils.py
import logging
from collections.abc import Mapping

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .models import Post

logger = logging.getLogger(__name__)

DEFAULT_TAG_ARCHIVE = {'type': 'liquid', 'path': '/tags/'}


def build_tag_table(posts=None):
    """
    Таблица тегов: { имя тега: [посты с этим тегом] }, посты от новых к старым.
    Теги без опубликованных постов в таблицу не попадают.
    """
    if posts is None:
        posts = Post.objects.all()
    posts = posts.published().prefetch_related('tags').order_by('-created_at', '-id')

    by_tag = {}
    for post in posts:
        for tag in post.tags.all():
            by_tag.setdefault((tag.pk, tag.name), []).append(post)

    # ключи в порядке создания тегов: "AI" и "ai" всегда идут в одном порядке
    table = {name: items for (_, name), items in sorted(by_tag.items())}
    logger.debug("Таблица тегов: %d тегов", len(table))
    return table


def site_tags(posts=None):
    """
    Таблица тегов в том виде, в каком её видят шаблоны сайта:
    вместе со служебными ключами из настройки TAG_ARCHIVE.
    """
    archive = getattr(settings, 'TAG_ARCHIVE', DEFAULT_TAG_ARCHIVE)
    if not isinstance(archive, Mapping):
        raise ImproperlyConfigured(
            f"TAG_ARCHIVE must be a mapping like {DEFAULT_TAG_ARCHIVE!r}, got {type(archive).__name__}"
        )
    table = dict(archive)
    # настоящие теги важнее служебных ключей
    table.update(build_tag_table(posts))
    return table
