"""
Pytest configuration and shared fixtures.

No test talks to DocuSign: `requests` is patched wherever a call would
leave the process, and JWT tests sign with a throwaway RSA key.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

DEMO_DOCS = Path(__file__).resolve().parent.parent / "demo_documents"


@pytest.fixture(scope="session")
def rsa_key():
    """Throwaway RSA key pair for signing JWT assertions."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def private_key_pem(rsa_key) -> str:
    return rsa_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("utf-8")


@pytest.fixture
def demo_docs_path() -> Path:
    return DEMO_DOCS


@pytest.fixture
def recipient_args() -> dict[str, str]:
    return {
        "signer_email": "a@example.com",
        "signer_name": "A",
        "cc_email": "b@example.com",
        "cc_name": "B",
    }


@pytest.fixture
def stub_auth() -> MagicMock:
    """Stand-in for the authentication context."""
    auth = MagicMock()
    auth.get_account_id.return_value = "acct-123"
    auth.get_access_token.return_value = "token-abc"
    auth.base_path = "https://demo.docusign.net/restapi"
    return auth


def make_response(status_code: int = 200, json_data=None, text: str = "") -> MagicMock:
    """A MagicMock shaped like a requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if json_data is None:
        response.json.side_effect = ValueError("No JSON")
    else:
        response.json.return_value = json_data
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Error", response=response
        )
    else:
        response.raise_for_status.return_value = None
    return response
