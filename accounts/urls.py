"""
URL patterns for the accounts app, included under ``/api/admin/``.
"""
from django.urls import path

from .views import ChangePasswordView, LoginView, MeView, RegisterView

urlpatterns = [
    path("login", LoginView.as_view(), name="admin-login"),
    path("register", RegisterView.as_view(), name="admin-register"),
    path("me", MeView.as_view(), name="admin-me"),
    path("password", ChangePasswordView.as_view(), name="admin-password"),
]
