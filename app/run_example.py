"""
Sends the demo envelope to the configured signer and cc recipient, then
lists the account's recent envelopes.

Configure through environment variables or a .env file; see README.md.
"""
import json
import logging
import sys

from app.core.config import settings
from app.core.exceptions import DocuSignAPIError
from app.domain.services.docusign_service import DocusignService

logger = logging.getLogger(__name__)


def _build_service() -> DocusignService:
    from app.dependencies import get_docusign_service
    return get_docusign_service()


def main(service: DocusignService | None = None) -> int:
    logging.basicConfig(level=settings.LOG_LEVEL)

    missing = settings.missing()
    missing += [
        f"DOCUSIGN_{name.upper()}"
        for name, value in settings.recipient_args().items()
        if not value
    ]
    if missing:
        logger.error("Configuration problem, set these environment variables: %s", ", ".join(missing))
        return 1

    service = service or _build_service()
    try:
        result = service.send_envelope(**settings.recipient_args())
        logger.info("Envelope sent: status=%s envelopeId=%s", result.get("status"), result.get("envelopeId"))

        listing = service.list_envelopes()
        logger.info("Envelopes from the last 30 days: %d", len(listing["envelopes"]))
        for envelope in listing["envelopes"]:
            logger.info("  %s  %s  %s", envelope.get("envelopeId"), envelope.get("status"), envelope.get("emailSubject"))
    except DocuSignAPIError as e:
        logger.error("API problem: status code %s, message body:\n%s", e.status_code, json.dumps(e.body, indent=4))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
