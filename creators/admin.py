from django.contrib import admin

from .models import Creator


@admin.register(Creator)
class CreatorAdmin(admin.ModelAdmin):
    list_display = ("name", "coin_symbol", "coin_price", "followers", "created_at")
    search_fields = ("name", "bio", "coin_symbol")
    ordering = ("-created_at",)
