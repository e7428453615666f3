from django.contrib import admin
from django.urls import path, include
from blog.views import TagIndexView

# Стандартные маршруты
urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('blog.urls')),
]

# Страница тегов, как /tags/ в TAG_ARCHIVE
urlpatterns += [
    path('tags/', TagIndexView.as_view(), name='tag-index'),
]
