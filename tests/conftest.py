"""Pytest configuration and shared fixtures."""

import django
import pytest
from django.conf import settings

from wedding_pricing.signals import discount_tie_detected


def pytest_configure():
    if not settings.configured:
        settings.configure(
            DEBUG=False,
            SECRET_KEY="test-secret-key-not-for-production",
            INSTALLED_APPS=[
                "django.contrib.contenttypes",
                "django.contrib.auth",
                "rest_framework",
            ],
            USE_TZ=True,
        )
    django.setup()


@pytest.fixture
def tie_events():
    """Collect discount_tie_detected sends for the duration of a test."""
    events = []

    def collect(sender, **kwargs):
        events.append(kwargs)

    discount_tie_detected.connect(collect, weak=False)
    yield events
    discount_tie_detected.disconnect(collect)
