import logging
from datetime import datetime as dt, timedelta, timezone
from pathlib import Path

from app.domain.services.envelope_builder import build_envelope
from app.infrastructure.external.docusign_api import DocuSignAPI
from app.infrastructure.external.docusign_auth import AuthContext

logger = logging.getLogger(__name__)

LIST_ENVELOPES_DAYS = 30


def default_from_date(days: int = LIST_ENVELOPES_DAYS) -> str:
    """ISO timestamp `days` before now, the lower bound for envelope listings."""
    return (dt.now(timezone.utc) - timedelta(days=days)).isoformat()


class DocusignService:
    def __init__(self, auth: AuthContext, docusign_api: DocuSignAPI, demo_docs_path: str | Path | None = None):
        """
        Initializes the service with its dependencies (the infrastructure components).
        """
        self.auth = auth
        self.docusign_api = docusign_api
        self.demo_docs_path = demo_docs_path

    def send_envelope(self, signer_email: str, signer_name: str, cc_email: str, cc_name: str) -> dict:
        """
        Builds the demo envelope and sends it to the signer and cc recipient.

        The envelope is built before any network call, so a missing demo
        document fails without contacting DocuSign. Errors from the token
        service or the API are not retried.

        Returns:
            The API response, normally with `status` "sent" and `envelopeId`.
        """
        envelope = build_envelope(
            signer_email=signer_email,
            signer_name=signer_name,
            cc_email=cc_email,
            cc_name=cc_name,
            demo_docs_path=self.demo_docs_path,
        )

        logger.info(
            "Sending envelope with %d documents to %d recipients",
            len(envelope.documents), len(envelope.recipients.all()),
        )
        self.auth.ensure_valid_token()
        account_id = self.auth.get_account_id()

        result = self.docusign_api.create_envelope(account_id, envelope)
        logger.info("Envelope %s created with status %s", result.get("envelopeId"), result.get("status"))
        return result

    def list_envelopes(self, from_date: str | None = None) -> dict:
        """Lists envelopes of the account from the last 30 days unless from_date is given."""
        self.auth.ensure_valid_token()
        result = self.docusign_api.list_envelopes(
            self.auth.get_account_id(),
            from_date or default_from_date(),
        )
        # An empty result set comes back without the envelopes key
        if not isinstance(result.get("envelopes"), list):
            result["envelopes"] = []
        logger.info("Listed %d envelopes", len(result["envelopes"]))
        return result
