from django.contrib import admin

from .models import Showcase


@admin.register(Showcase)
class ShowcaseAdmin(admin.ModelAdmin):
    list_display = ("title", "category", "creator", "stars", "tvl_usd", "published", "featured", "trending")
    list_filter = ("category", "published", "featured", "trending", "recently_added")
    search_fields = ("title", "description", "creator")
    prepopulated_fields = {"slug": ("title",)}
