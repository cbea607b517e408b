"""
Models for the creators app.

A ``Creator`` is a featured community member with a creator coin.  The
coin's figures are stored as flat columns and rendered as the nested
``creatorCoin`` object by the serializer.
"""
from django.db import models


class Creator(models.Model):
    name = models.CharField(max_length=100)
    bio = models.TextField()
    profile_image = models.URLField(max_length=500)
    social_media = models.JSONField(default=list, blank=True)
    coin_symbol = models.CharField(max_length=10)
    coin_market_cap = models.FloatField()
    coin_price = models.FloatField()
    coin_change_24h = models.FloatField()
    # display string such as "12.5K"
    followers = models.CharField(max_length=50)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=["-created_at"], name="creator_created_idx"),
            models.Index(fields=["name"], name="creator_name_idx"),
        ]
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.name} (${self.coin_symbol})"
