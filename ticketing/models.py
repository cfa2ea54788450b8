"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.conf import settings
from django.db import models


class Enrollment(models.Model):
    """Persistence model for event registrations."""

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="enrollment"
    )
    name = models.CharField(max_length=255)
    cpf = models.CharField(max_length=11)
    birthday = models.DateField()
    phone = models.CharField(max_length=20)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return self.name


class Address(models.Model):
    enrollment = models.OneToOneField(
        Enrollment, on_delete=models.CASCADE, related_name="address"
    )
    cep = models.CharField(max_length=9)
    street = models.CharField(max_length=255)
    city = models.CharField(max_length=255)
    state = models.CharField(max_length=2)
    number = models.CharField(max_length=20)
    neighborhood = models.CharField(max_length=255)
    address_detail = models.CharField(max_length=255, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name_plural = "addresses"

    def __str__(self) -> str:
        return f"{self.street}, {self.number} - {self.city}/{self.state}"


class TicketType(models.Model):
    """Persistence model for ticket types."""

    name = models.CharField(max_length=100)
    price = models.PositiveIntegerField(help_text="Price in cents")
    is_remote = models.BooleanField()
    includes_hotel = models.BooleanField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return self.name


class Ticket(models.Model):
    """Persistence model for tickets."""

    class Status(models.TextChoices):
        RESERVED = "RESERVED"
        PAID = "PAID"

    enrollment = models.ForeignKey(
        Enrollment, on_delete=models.CASCADE, related_name="tickets"
    )
    ticket_type = models.ForeignKey(
        TicketType, on_delete=models.PROTECT, related_name="tickets"
    )
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.RESERVED)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.ticket_type.name} - {self.status}"


class Payment(models.Model):
    """Persistence model for ticket payments."""

    ticket = models.ForeignKey(Ticket, on_delete=models.CASCADE, related_name="payments")
    value = models.PositiveIntegerField(help_text="Amount in cents")
    card_issuer = models.CharField(max_length=50)
    card_last_digits = models.CharField(max_length=4)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.card_issuer} **** {self.card_last_digits}"
