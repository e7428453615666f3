from django.db import models
from django.conf import settings
from django.utils.text import slugify
from unidecode import unidecode


class Tag(models.Model):
    name = models.CharField(max_length=50, unique=True)
    slug = models.SlugField(unique=True, blank=True)

    def save(self, *args, **kwargs):
        if not self.slug:
            # сперва транслитерируем, потом делаем латинский slug
            raw = unidecode(self.name)
            self.slug = self.unique_slug(slugify(raw) or 'tag')
        super().save(*args, **kwargs)

    def unique_slug(self, base):
        """
        "AI" и "ai" — разные теги с одинаковым slug'ом: второму добавляем суффикс.
        """
        candidate, n = base, 2
        while Tag.objects.filter(slug=candidate).exclude(pk=self.pk).exists():
            candidate = f"{base}-{n}"
            n += 1
        return candidate

    def __str__(self):
        return self.name


class PublishedQuerySet(models.QuerySet):
    def published(self):
        return self.filter(published=True)


class Post(models.Model):
    title = models.CharField(max_length=200)
    content = models.TextField()
    author = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='posts')
    tags = models.ManyToManyField(Tag, related_name='posts', blank=True)
    published = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = PublishedQuerySet.as_manager()

    class Meta:
        ordering = ('-created_at', '-id')

    def __str__(self):
        return self.title
