import logging

import requests
from fastapi import APIRouter, Depends, HTTPException

from app.api.v1.schemas.docusign_schemas import ListEnvelopesResponse, SendEnvelopeRequest, SendEnvelopeResponse
from app.core.exceptions import DocuSignAPIError, EnvelopeValidationError
from app.dependencies import get_docusign_service
from app.domain.services.docusign_service import DocusignService

logger = logging.getLogger(__name__)
router = APIRouter()


def _to_http_error(e: Exception) -> HTTPException:
    if isinstance(e, DocuSignAPIError):
        return HTTPException(
            status_code=502,
            detail={"message": e.message, "status_code": e.status_code, "body": e.body},
        )
    # A response body that is not JSON is a platform fault
    if isinstance(e, requests.exceptions.JSONDecodeError):
        return HTTPException(status_code=502, detail=f"Invalid response from DocuSign: {e}")
    if isinstance(e, (ConnectionError, requests.exceptions.RequestException)):
        return HTTPException(status_code=503, detail=str(e))
    if isinstance(e, FileNotFoundError):
        return HTTPException(status_code=500, detail=str(e))
    logger.exception("Unexpected error: %s", e)
    return HTTPException(status_code=500, detail="An unexpected error occurred.")


@router.post("/send_envelope", response_model=SendEnvelopeResponse)
def send_envelope(
    payload: SendEnvelopeRequest,
    docusign_service: DocusignService = Depends(get_docusign_service)
):
    try:
        return docusign_service.send_envelope(
            signer_email=payload.signerEmail,
            signer_name=payload.signerName,
            cc_email=payload.ccEmail,
            cc_name=payload.ccName,
        )
    except EnvelopeValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise _to_http_error(e)


@router.get("/envelopes", response_model=ListEnvelopesResponse)
def list_envelopes(
    from_date: str | None = None,
    docusign_service: DocusignService = Depends(get_docusign_service)
):
    try:
        return docusign_service.list_envelopes(from_date=from_date)
    except Exception as e:
        raise _to_http_error(e)
