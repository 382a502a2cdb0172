"""Pytest fixtures for onboarding tests."""

from datetime import date, timedelta
from unittest.mock import MagicMock

import pytest

from config import Settings
from main import create_app
from onboarding.client import OnboardingClient
from onboarding.schema import FormInput, ServiceType

TODAY = date(2026, 10, 19)
ENDPOINT = 'https://onboard.example.test/api/clients'


def make_response(status_code: int = 200, text: str = '') -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    return response


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def valid_form() -> FormInput:
    """Input that satisfies every rule on TODAY."""
    return FormInput(
        full_name='Jane Doe',
        email='jane@acme.com',
        company_name='Acme Co',
        services=frozenset({ServiceType.WEB_DEV}),
        start_date=TODAY.isoformat(),
        terms=True,
    )


@pytest.fixture
def session() -> MagicMock:
    session = MagicMock()
    session.post.return_value = make_response(200, '{"id": "abc"}')
    return session


@pytest.fixture
def client(session: MagicMock) -> OnboardingClient:
    return OnboardingClient(ENDPOINT, session=session)


@pytest.fixture
def app(session: MagicMock):
    app = create_app(Settings(onboard_url=ENDPOINT, secret_key='test-secret'))
    app.config['TESTING'] = True
    app.extensions['onboarding_client'] = OnboardingClient(ENDPOINT, session=session)
    return app


@pytest.fixture
def http(app):
    return app.test_client()


@pytest.fixture
def future_date() -> str:
    """A start date valid against the real clock."""
    return (date.today() + timedelta(days=30)).isoformat()
