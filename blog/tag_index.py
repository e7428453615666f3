# blog/tag_index.py
import logging
from collections.abc import Mapping

logger = logging.getLogger(__name__)

# Служебные ключи из конфигурации сайта, которые попадают в таблицу тегов
BOOKKEEPING_KEYS = frozenset({'type', 'path'})


class InvalidTagTable(TypeError):
    """Таблица тегов не является словарём «имя тега -> посты»."""

    def __init__(self, filter_name, message):
        self.filter_name = filter_name
        super().__init__(f"{filter_name}: {message}")


def _require_mapping(table, filter_name):
    if not isinstance(table, Mapping):
        logger.error("%s получил %s вместо словаря тегов", filter_name, type(table).__name__)
        raise InvalidTagTable(
            filter_name,
            f"expected a mapping of tag name to posts, got {type(table).__name__}"
        )


def _require_str_keys(names, filter_name):
    for name in names:
        if not isinstance(name, str):
            logger.error("%s: имя тега %r не строка", filter_name, name)
            raise InvalidTagTable(
                filter_name,
                f"tag names must be strings, got {type(name).__name__} {name!r}"
            )


def _is_list(value):
    return isinstance(value, (list, tuple))


def sort_tag_names(table: Mapping) -> list:
    """
    Имена тегов по алфавиту без учёта регистра.
    sorted() стабилен, поэтому "Ruby" и "ruby" остаются в исходном порядке.
    """
    _require_mapping(table, 'sort_tag_names')
    names = list(table.keys())
    _require_str_keys(names, 'sort_tag_names')
    logger.debug("sort_tag_names: %d тегов", len(names))
    return sorted(names, key=str.lower)


def exclude_bookkeeping_keys(table: Mapping) -> dict:
    """Убирает служебные ключи "type" и "path" по имени."""
    _require_mapping(table, 'exclude_bookkeeping_keys')
    tags = {k: v for k, v in table.items() if k not in BOOKKEEPING_KEYS}
    logger.debug("exclude_bookkeeping_keys: %d из %d записей", len(tags), len(table))
    return tags


def select_list_valued_tags(table: Mapping) -> dict:
    """
    Оставляет только настоящие теги: записи, у которых значение — список постов.
    Служебные записи вроде {"type": "liquid"} отсеиваются по типу значения.
    """
    _require_mapping(table, 'tags_only')
    tags = {k: v for k, v in table.items() if _is_list(v)}
    logger.debug("tags_only: %d из %d записей", len(tags), len(table))
    return tags


def sort_tags_by_name(table: Mapping) -> list:
    """
    tags_only + сортировка: список пар (имя, посты) для цикла в шаблоне.
    """
    _require_mapping(table, 'sort_tags_by_name')
    tags = select_list_valued_tags(table)
    _require_str_keys(tags, 'sort_tags_by_name')
    logger.debug("sort_tags_by_name: %d из %d записей являются тегами", len(tags), len(table))
    return sorted(tags.items(), key=lambda item: item[0].lower())
