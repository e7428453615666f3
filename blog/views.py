from rest_framework import viewsets
from rest_framework.permissions import AllowAny
from django.db.models import Count, Q
from django.db.models.functions import Lower
from django.views.generic import TemplateView
from .models import Post, Tag
from .serializers import PostSerializer, TagSerializer
from .utils import site_tags


class TagIndexView(TemplateView):
    """
    Страница «все теги»: GET /tags/
    Таблица тегов передаётся в шаблон явно, сортировку делает фильтр sort_tags_by_name.
    """
    template_name = 'blog/tag_index.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['tags'] = site_tags()
        return context


class TagViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Только для чтения: GET /api/tags/ и GET /api/tags/{slug}/
    """
    serializer_class = TagSerializer
    permission_classes = [AllowAny]
    lookup_field = 'slug'

    def get_queryset(self):
        # только теги с опубликованными постами, по алфавиту без учёта регистра
        return (Tag.objects
                .annotate(posts_count=Count('posts', filter=Q(posts__published=True)))
                .filter(posts_count__gt=0)
                .order_by(Lower('name'), 'id'))


class PostViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = PostSerializer
    permission_classes = [AllowAny]

    def get_queryset(self):
        qs = Post.objects.published().select_related('author').prefetch_related('tags')

        slugs = self.request.query_params.getlist('tag')
        if slugs:
            qs = qs.filter(tags__slug__in=slugs).distinct()

        return qs.order_by('-created_at', '-id')
