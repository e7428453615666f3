from django import template

from blog.tag_index import (sort_tag_names, exclude_bookkeeping_keys,
                            select_list_valued_tags, sort_tags_by_name)

register = template.Library()

# {% load tag_helpers %} → {% for name, posts in site_tags|sort_tags_by_name %}
register.filter('sort_tag_names', sort_tag_names)
register.filter('exclude_bookkeeping_keys', exclude_bookkeeping_keys)
register.filter('tags_only', select_list_valued_tags)
register.filter('sort_tags_by_name', sort_tags_by_name)
