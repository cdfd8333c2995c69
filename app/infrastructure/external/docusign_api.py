import logging

import requests

from app.core.config import settings
from app.core.exceptions import DocuSignAPIError
from app.domain.models.docusign_models import EnvelopeDefinition
from app.infrastructure.external.docusign_auth import AuthContext

logger = logging.getLogger(__name__)


class DocuSignAPI:
    """
    A class to handle communications with the DocuSign eSignature REST API.

    Tokens are not refreshed here; callers run auth.ensure_valid_token() first.
    """

    def __init__(self, auth: AuthContext, timeout: float | None = None):
        self.auth = auth
        self.timeout = timeout or settings.HTTP_TIMEOUT

    def _make_request(self, method: str, endpoint: str, **kwargs) -> dict:
        """Executes an authenticated request against the account's REST base path."""
        headers = {
            "Authorization": f"Bearer {self.auth.get_access_token()}",
            "Accept": "application/json",
        }
        url = f"{self.auth.base_path}/v2.1/{endpoint.lstrip('/')}"

        response = requests.request(method, url, headers=headers, timeout=self.timeout, **kwargs)
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            try:
                body = response.json()
            except ValueError:
                body = response.text
            logger.error("DocuSign API error for %s %s: %s - %s", method, url, response.status_code, response.text)
            raise DocuSignAPIError(
                f"DocuSign API request failed: {method} {endpoint}",
                status_code=response.status_code,
                body=body,
            ) from e

        try:
            return response.json()
        except ValueError as e:
            logger.error("DocuSign API returned a non-JSON body for %s %s: %s", method, url, response.text)
            raise DocuSignAPIError(
                f"DocuSign API returned a non-JSON response: {method} {endpoint}",
                status_code=response.status_code,
                body=response.text,
            ) from e

    def create_envelope(self, account_id: str, envelope: EnvelopeDefinition) -> dict:
        """Creates the envelope; with status "sent" it is delivered right away."""
        return self._make_request(
            "POST",
            f"accounts/{account_id}/envelopes",
            json=envelope.to_payload(),
        )

    def list_envelopes(self, account_id: str, from_date: str) -> dict:
        """Lists the account's envelopes changed since from_date."""
        return self._make_request(
            "GET",
            f"accounts/{account_id}/envelopes",
            params={"from_date": from_date},
        )
