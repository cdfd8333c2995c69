"""Tests for environment-based settings."""

from app.core.config import PROJECT_ROOT, Settings

REQUIRED = ("DOCUSIGN_INTEGRATION_KEY", "DOCUSIGN_USER_ID", "PRIVATE_KEY", "DOCUSIGN_PRIVATE_KEY_PATH")


def _clear(monkeypatch):
    for name in REQUIRED + ("DEMO_DOCS_PATH", "HTTP_TIMEOUT", "LOG_LEVEL", "DOCUSIGN_OAUTH_BASE_URL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch):
    _clear(monkeypatch)
    s = Settings()

    assert s.DOCUSIGN_OAUTH_BASE_URL == "https://account-d.docusign.com"
    assert s.DEMO_DOCS_PATH == str(PROJECT_ROOT / "demo_documents")
    assert s.HTTP_TIMEOUT == 30.0
    assert s.LOG_LEVEL == "INFO"


def test_missing_lists_unset_credentials(monkeypatch):
    _clear(monkeypatch)
    assert Settings().missing() == ["DOCUSIGN_INTEGRATION_KEY", "DOCUSIGN_USER_ID", "PRIVATE_KEY"]


def test_key_path_satisfies_private_key(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("DOCUSIGN_INTEGRATION_KEY", "ik")
    monkeypatch.setenv("DOCUSIGN_USER_ID", "user")
    monkeypatch.setenv("DOCUSIGN_PRIVATE_KEY_PATH", "/keys/private.key")

    assert Settings().missing() == []


def test_overrides(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("HTTP_TIMEOUT", "5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    s = Settings()
    assert s.HTTP_TIMEOUT == 5.0
    assert s.LOG_LEVEL == "DEBUG"
