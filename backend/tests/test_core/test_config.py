"""
Unit tests for Settings
"""
from app.core.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.TAX_RATE == 0.08
    assert settings.FREE_SHIPPING_THRESHOLD == 50.0
    assert settings.SHIPPING_COST == 5.99


def test_allowed_origins_comma_separated():
    settings = Settings(_env_file=None, ALLOWED_ORIGINS="http://localhost:3000, https://beerbro.app")

    assert settings.get_allowed_origins() == ["http://localhost:3000", "https://beerbro.app"]


def test_allowed_origins_json_list():
    settings = Settings(_env_file=None, ALLOWED_ORIGINS='["https://beerbro.app"]')

    assert settings.get_allowed_origins() == ["https://beerbro.app"]


def test_admin_emails_lowercased():
    settings = Settings(_env_file=None, ADMIN_EMAILS="Admin@BeerBro.app")

    assert settings.get_admin_emails() == ["admin@beerbro.app"]
