import logging
import threading
import time
from pathlib import Path
from typing import Protocol
from urllib.parse import urlencode

import jwt
import requests
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import serialization

from app.core.config import settings
from app.core.exceptions import DocuSignAuthError

logger = logging.getLogger(__name__)

JWT_LIFETIME_SECONDS = 3600
# A token this close to expiry is replaced before use
TOKEN_REPLACEMENT_SECONDS = 600
SCOPES = "signature impersonation"


class AuthContext(Protocol):
    """What the envelope operations need from an authentication provider."""

    base_path: str | None

    def ensure_valid_token(self) -> None: ...

    def get_account_id(self) -> str: ...

    def get_access_token(self) -> str: ...


class DocuSignJWTAuth:
    """
    Obtains DocuSign access tokens through the JWT bearer grant and resolves
    the account the envelopes are sent from.

    A single instance may be shared between threads; token refreshes are
    serialized.
    """

    def __init__(
        self,
        integration_key: str | None = None,
        user_id: str | None = None,
        private_key: str | None = None,
        private_key_path: str | None = None,
        oauth_base_url: str | None = None,
        account_id: str | None = None,
        api_base_url: str | None = None,
        timeout: float | None = None,
    ):
        self.integration_key = integration_key or settings.DOCUSIGN_INTEGRATION_KEY
        self.user_id = user_id or settings.DOCUSIGN_USER_ID
        self.private_key = private_key or settings.PRIVATE_KEY
        self.private_key_path = private_key_path or settings.DOCUSIGN_PRIVATE_KEY_PATH
        self.oauth_base_url = (oauth_base_url or settings.DOCUSIGN_OAUTH_BASE_URL).rstrip("/")
        # An explicit "" disables the environment value
        self.target_account_id = settings.DOCUSIGN_ACCOUNT_ID if account_id is None else account_id
        self.api_base_url = settings.DOCUSIGN_API_BASE_URL if api_base_url is None else api_base_url
        self.timeout = timeout or settings.HTTP_TIMEOUT

        self._access_token: str | None = None
        self._expires_at: float = 0
        self.account_id: str | None = None
        self.account_name: str | None = None
        self.base_path: str | None = None
        self._lock = threading.Lock()

    @property
    def oauth_host(self) -> str:
        return self.oauth_base_url.replace("https://", "").replace("http://", "")

    def get_consent_url(self) -> str:
        """URL where the impersonated user grants consent to this integration."""
        query = {
            "response_type": "code",
            "scope": SCOPES,
            "client_id": self.integration_key,
            "redirect_uri": settings.DOCUSIGN_REDIRECT_URI,
        }
        return f"{self.oauth_base_url}/oauth/auth?{urlencode(query)}"

    def _load_private_key(self):
        if self.private_key:
            key_bytes = self.private_key.encode("utf-8")
        elif self.private_key_path:
            try:
                key_bytes = Path(self.private_key_path).read_bytes()
            except OSError as e:
                raise DocuSignAuthError(f"Cannot read private key file: {e}") from e
        else:
            raise DocuSignAuthError("No DocuSign private key configured.")

        try:
            return serialization.load_pem_private_key(
                key_bytes,
                password=None,
                backend=default_backend()
            )
        except (ValueError, TypeError) as e:
            raise DocuSignAuthError(f"Invalid DocuSign private key: {e}") from e

    def _create_assertion(self) -> str:
        if not self.integration_key or not self.user_id:
            raise DocuSignAuthError("DocuSign integration key and user id must be configured.")

        now = int(time.time())
        payload = {
            "iss": self.integration_key,
            "sub": self.user_id,
            "aud": self.oauth_host,
            "iat": now,
            "exp": now + JWT_LIFETIME_SECONDS,
            "scope": SCOPES,
        }
        return jwt.encode(payload, self._load_private_key(), algorithm="RS256")

    def _request_token(self) -> dict:
        token_url = f"{self.oauth_base_url}/oauth/token"
        data = {
            "grant_type": "urn:ietf:params:oauth:grant-type:jwt-bearer",
            "assertion": self._create_assertion(),
        }

        try:
            response = requests.post(token_url, data=data, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error("Network error requesting DocuSign token: %s", e)
            raise DocuSignAuthError(f"Failed to reach the DocuSign token service: {e}") from e

        if response.status_code >= 400:
            try:
                body = response.json()
            except ValueError:
                body = {"error": response.text}

            if isinstance(body, dict) and body.get("error") == "consent_required":
                consent_url = self.get_consent_url()
                logger.error("DocuSign consent required. Grant it once at: %s", consent_url)
                raise DocuSignAuthError(
                    f"Consent required. Open {consent_url} to grant it.",
                    context={"status_code": response.status_code, "body": body},
                )

            logger.error("DocuSign token request failed: %s - %s", response.status_code, response.text)
            raise DocuSignAuthError(
                "Failed to generate DocuSign access token.",
                context={"status_code": response.status_code, "body": body},
            )

        return response.json()

    def _load_user_info(self) -> None:
        try:
            response = requests.get(
                f"{self.oauth_base_url}/oauth/userinfo",
                headers={"Authorization": f"Bearer {self._access_token}"},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error("Failed to get DocuSign user info: %s", e)
            raise DocuSignAuthError(f"Failed to get DocuSign user info: {e}") from e

        accounts = response.json().get("accounts") or []
        if not accounts:
            raise DocuSignAuthError("No accounts returned by /oauth/userinfo")

        if self.target_account_id:
            account = next((a for a in accounts if a.get("account_id") == self.target_account_id), None)
            if account is None:
                raise DocuSignAuthError(f"User has no access to account {self.target_account_id}")
        else:
            account = next((a for a in accounts if a.get("is_default")), accounts[0])

        self.account_id = account["account_id"]
        self.account_name = account.get("account_name")
        self.base_path = self.api_base_url or f"{account['base_uri']}/restapi"
        logger.info("Using DocuSign account %s (%s)", self.account_name, self.account_id)

    def token_is_valid(self) -> bool:
        return bool(self._access_token) and time.time() + TOKEN_REPLACEMENT_SECONDS < self._expires_at

    def ensure_valid_token(self) -> None:
        """
        Makes sure a usable access token is held, requesting a new one when
        there is none or the current one is about to expire. Safe to call
        before every API request.
        """
        with self._lock:
            if self.token_is_valid():
                return

            logger.info("Requesting a new DocuSign access token")
            token_data = self._request_token()
            self._access_token = token_data["access_token"]
            self._expires_at = time.time() + int(token_data.get("expires_in", JWT_LIFETIME_SECONDS))

            if self.account_id is None:
                self._load_user_info()

    def get_access_token(self) -> str:
        if not self._access_token:
            raise DocuSignAuthError("No access token; call ensure_valid_token() first.")
        return self._access_token

    def get_account_id(self) -> str:
        if not self.account_id:
            raise DocuSignAuthError("Account not resolved; call ensure_valid_token() first.")
        return self.account_id
