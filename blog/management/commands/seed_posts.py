# blog/management/commands/seed_posts.py

import random
from django.core.management.base import BaseCommand
from faker import Faker
from django.contrib.auth import get_user_model

from blog.models import Post, Tag

User = get_user_model()

# разный регистр специально: на /tags/ видно сортировку без учёта регистра
DEFAULT_TAGS = 'Ruby,ai,AWS,crystal-lang,infrastructure,Python'


class Command(BaseCommand):
    help = "Seed the database with fake blog posts and tags"

    def add_arguments(self, parser):
        parser.add_argument(
            '--number',
            type=int,
            default=20,
            help='How many posts to create (default: 20)'
        )
        parser.add_argument(
            '--tags',
            default=DEFAULT_TAGS,
            help='Comma-separated tag names to pick from'
        )

    def handle(self, *args, **options):
        count = options['number']
        names = [n.strip() for n in options['tags'].split(',') if n.strip()]
        if not names:
            self.stdout.write(self.style.ERROR("Список тегов пуст."))
            return

        fake = Faker()
        author, _ = User.objects.get_or_create(username='seed_bot')
        tags = [Tag.objects.get_or_create(name=name)[0] for name in names]

        created = 0
        for _ in range(count):
            post = Post.objects.create(
                title=fake.sentence(nb_words=6),
                content="\n\n".join(fake.paragraphs(nb=3)),
                author=author,
            )
            post.tags.set(random.sample(tags, k=random.randint(1, min(3, len(tags)))))
            created += 1

        self.stdout.write(self.style.SUCCESS(
            f"Successfully created {created} posts."
        ))
