from django.contrib import admin

from .models import Blog


@admin.register(Blog)
class BlogAdmin(admin.ModelAdmin):
    list_display = ("title", "category", "author_name", "published", "featured", "published_date", "views")
    list_filter = ("category", "published", "featured")
    search_fields = ("title", "excerpt", "author_name")
    prepopulated_fields = {"slug": ("title",)}
    readonly_fields = ("likes", "comments", "bookmarks", "views")
