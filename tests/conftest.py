"""Pytest configuration and shared fixtures."""

import typing as t

import faker
import pytest
from django.contrib.auth.models import User
from rest_framework.test import APIClient

from accounts.jwt import issue_token
from hotels.models import Hotel, Room
from ticketing.models import Address, Enrollment, Payment, Ticket, TicketType

fake = faker.Faker()


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def user(django_user_model: t.Type[User]) -> User:
    return django_user_model.objects.create_user(
        username=fake.unique.user_name(), email=fake.unique.email(), password="pass"
    )


@pytest.fixture
def auth_client(user: User) -> APIClient:
    """Client carrying a valid bearer token for ``user``."""
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_token(user)}")
    return client


@pytest.fixture
def make_enrollment() -> t.Callable[[User], Enrollment]:
    def _make(user: User) -> Enrollment:
        enrollment = Enrollment.objects.create(
            user=user,
            name=fake.name(),
            cpf=fake.numerify("###########"),
            birthday=fake.date_of_birth(minimum_age=18),
            phone=fake.numerify("(##) 9####-####"),
        )
        Address.objects.create(
            enrollment=enrollment,
            cep=fake.numerify("#####-###"),
            street=fake.street_name(),
            city=fake.city(),
            state=fake.lexify("??").upper(),
            number=fake.building_number(),
            neighborhood=fake.city(),
        )
        return enrollment

    return _make


@pytest.fixture
def make_ticket_type() -> t.Callable[..., TicketType]:
    def _make(is_remote: bool, includes_hotel: bool) -> TicketType:
        return TicketType.objects.create(
            name=fake.word(),
            price=fake.random_int(min=1000, max=90000),
            is_remote=is_remote,
            includes_hotel=includes_hotel,
        )

    return _make


@pytest.fixture
def make_ticket() -> t.Callable[..., Ticket]:
    def _make(enrollment: Enrollment, ticket_type: TicketType, status: str) -> Ticket:
        return Ticket.objects.create(enrollment=enrollment, ticket_type=ticket_type, status=status)

    return _make


@pytest.fixture
def make_payment() -> t.Callable[[Ticket], Payment]:
    def _make(ticket: Ticket) -> Payment:
        return Payment.objects.create(
            ticket=ticket,
            value=ticket.ticket_type.price,
            card_issuer=fake.credit_card_provider(),
            card_last_digits=fake.numerify("####"),
        )

    return _make


@pytest.fixture
def make_hotel() -> t.Callable[[], Hotel]:
    def _make() -> Hotel:
        return Hotel.objects.create(name=fake.company(), image=fake.image_url())

    return _make


@pytest.fixture
def make_room() -> t.Callable[[Hotel], Room]:
    def _make(hotel: Hotel) -> Room:
        return Room.objects.create(
            hotel=hotel, name=fake.numerify("###"), capacity=fake.random_int(min=1, max=4)
        )

    return _make


@pytest.fixture
def eligible_user(
    user: User,
    make_enrollment: t.Callable[[User], Enrollment],
    make_ticket_type: t.Callable[..., TicketType],
    make_ticket: t.Callable[..., Ticket],
    make_payment: t.Callable[[Ticket], Payment],
) -> User:
    """``user`` with a paid, in-person ticket that includes the hotel."""
    enrollment = make_enrollment(user)
    ticket = make_ticket(enrollment, make_ticket_type(is_remote=False, includes_hotel=True), Ticket.Status.PAID)
    make_payment(ticket)
    return user
