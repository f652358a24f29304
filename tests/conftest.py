"""Shared pytest fixtures for the hospital editor tests."""

import pytest


@pytest.fixture
def hospital():
    """Return a fresh, valid hospital payload keyed by camelCase field names."""
    return {
        "name": "General Hospital",
        "description": "Community hospital",
        "url": "https://example.com",
        "telephone": "555-0100",
        "address": {
            "street": "1 Main St",
            "locality": "Springfield",
            "region": "IL",
            "postalCode": "62701",
            "country": "US",
        },
        "geo": {"latitude": 39.8, "longitude": -89.6},
        "openingHours": "Mo-Su 00:00-24:00",
        "specialties": [{"name": "Cardiology"}],
        "services": [{"kind": "Therapy", "name": "Physical Therapy"}],
        "contactPoints": [
            {
                "telephone": "555-0100",
                "contactType": "customer service",
                "availableLanguage": ["English"],
            }
        ],
    }
