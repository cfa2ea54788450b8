"""Django ORM models (persistence layer) for bearer-token sessions."""

from django.conf import settings
from django.db import models


class Session(models.Model):
    """A signed-in session; a bearer token is valid only while its row exists."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="auth_sessions"
    )
    token = models.TextField(unique=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"Session for {self.user}"
