import pytest

from zoho_books import ZohoBooksSDK, ZohoBooksSettings
from zoho_books import config as config_module

ENV_VARS = (
    "ZOHO_CLIENT_ID",
    "ZOHO_CLIENT_SECRET",
    "ZOHO_REDIRECT_URI",
    "ZOHO_SCOPE",
    "ZOHO_ACCESS_TOKEN",
    "ZOHO_REFRESH_TOKEN",
    "ZOHO_ORGANIZATION_ID",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # Keep a developer's local .env out of the tests.
    monkeypatch.setattr(config_module, "load_dotenv", lambda **kwargs: False)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_from_env_requires_client_credentials(monkeypatch):
    monkeypatch.setenv("ZOHO_CLIENT_ID", "cid")

    with pytest.raises(ValueError, match="ZOHO_CLIENT_SECRET"):
        ZohoBooksSettings.from_env()


def test_from_env_applies_defaults(monkeypatch):
    monkeypatch.setenv("ZOHO_CLIENT_ID", "cid")
    monkeypatch.setenv("ZOHO_CLIENT_SECRET", "secret")

    settings = ZohoBooksSettings.from_env()

    assert settings.redirect_uri == "http://localhost:3000/callback"
    assert settings.scope == "ZohoBooks.fullaccess.all"
    assert settings.access_token is None
    assert settings.organization_id is None


def test_from_env_reads_every_variable(monkeypatch):
    monkeypatch.setenv("ZOHO_CLIENT_ID", "cid")
    monkeypatch.setenv("ZOHO_CLIENT_SECRET", "secret")
    monkeypatch.setenv("ZOHO_REDIRECT_URI", "https://app.example.com/zoho/auth/callback")
    monkeypatch.setenv("ZOHO_SCOPE", "ZohoBooks.contacts.READ")
    monkeypatch.setenv("ZOHO_ACCESS_TOKEN", "A")
    monkeypatch.setenv("ZOHO_REFRESH_TOKEN", "R")
    monkeypatch.setenv("ZOHO_ORGANIZATION_ID", "10234695")

    sdk = ZohoBooksSDK.from_env()

    assert sdk.credential.redirect_uri == "https://app.example.com/zoho/auth/callback"
    assert sdk.credential.scope == "ZohoBooks.contacts.READ"
    assert sdk.get_access_token() == "A"
    assert sdk.get_refresh_token() == "R"
    assert sdk.transport.organization_id == "10234695"


def test_from_env_does_not_log_tokens(monkeypatch, caplog):
    monkeypatch.setenv("ZOHO_CLIENT_ID", "cid")
    monkeypatch.setenv("ZOHO_CLIENT_SECRET", "secret")
    monkeypatch.setenv("ZOHO_ACCESS_TOKEN", "very-secret-access")

    with caplog.at_level("INFO", logger="zoho_books.config"):
        ZohoBooksSettings.from_env()

    assert "very-secret-access" not in caplog.text
    assert "has_access_token=True" in caplog.text
