import logging

from fastapi import FastAPI

from app.api.v1.endpoints import docusign
from app.core.config import settings

logging.basicConfig(level=settings.LOG_LEVEL)

app = FastAPI(title="DocuSign JWT envelope sender")
app.include_router(docusign.router, prefix="/api/v1", tags=["docusign"])


@app.get("/health")
def health():
    return {"status": "ok", "missing_settings": settings.missing()}
