from app.domain.services.docusign_service import DocusignService
from app.infrastructure.external.docusign_api import DocuSignAPI
from app.infrastructure.external.docusign_auth import DocuSignJWTAuth

# --- Singleton instances of the infrastructure ---
# The auth context holds the access token, so it is created once and shared
# by every request.

docusign_auth = DocuSignJWTAuth()
docusign_api_client = DocuSignAPI(auth=docusign_auth)


def get_docusign_service() -> DocusignService:
    """
    Dependency injector for the DocusignService.

    FastAPI's `Depends` uses this function to provide a configured
    service instance to the API endpoints.

    Returns:
        An instance of DocusignService.
    """
    return DocusignService(
        auth=docusign_auth,
        docusign_api=docusign_api_client,
    )
