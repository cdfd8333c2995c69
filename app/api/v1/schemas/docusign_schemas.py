from pydantic import BaseModel, ConfigDict


class SendEnvelopeRequest(BaseModel):
    signerEmail: str
    signerName: str
    ccEmail: str
    ccName: str


class SendEnvelopeResponse(BaseModel):
    status: str
    envelopeId: str


class EnvelopeSummary(BaseModel):
    model_config = ConfigDict(extra="allow")

    envelopeId: str
    status: str | None = None
    emailSubject: str | None = None
    statusChangedDateTime: str | None = None


class ListEnvelopesResponse(BaseModel):
    resultSetSize: str | None = None
    envelopes: list[EnvelopeSummary]
