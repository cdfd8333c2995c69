import base64
from typing import Literal

from pydantic import BaseModel, Field, field_serializer

FileExtension = Literal["html", "htm", "docx", "doc", "pdf", "txt", "rtf", "xlsx", "pptx"]
EnvelopeStatus = Literal["sent", "created"]


class Document(BaseModel):
    documentId: str
    name: str
    fileExtension: FileExtension
    documentBase64: str

    @classmethod
    def from_bytes(cls, document_id: str, name: str, file_extension: str, content: bytes) -> "Document":
        return cls(
            documentId=document_id,
            name=name,
            fileExtension=file_extension,
            documentBase64=base64.b64encode(content).decode("ascii"),
        )

    @property
    def content(self) -> bytes:
        """Decoded document bytes."""
        return base64.b64decode(self.documentBase64)


class SignHere(BaseModel):
    """A signature field placed by searching the envelope for an anchor string."""
    anchorString: str
    anchorXOffset: int = 0
    anchorYOffset: int = 0
    anchorUnits: Literal["pixels"] = "pixels"

    # The REST API documents offsets as strings
    @field_serializer("anchorXOffset", "anchorYOffset")
    def _offset_as_str(self, value: int) -> str:
        return str(value)


class Tabs(BaseModel):
    signHereTabs: list[SignHere] = Field(default_factory=list)


class Recipient(BaseModel):
    email: str
    name: str
    recipientId: str
    routingOrder: int = 1

    @field_serializer("routingOrder")
    def _routing_order_as_str(self, value: int) -> str:
        return str(value)


class Signer(Recipient):
    tabs: Tabs | None = None


class CarbonCopy(Recipient):
    pass


class Recipients(BaseModel):
    signers: list[Signer] = Field(default_factory=list)
    carbonCopies: list[CarbonCopy] = Field(default_factory=list)

    def all(self) -> list[Recipient]:
        return [*self.signers, *self.carbonCopies]


class EnvelopeDefinition(BaseModel):
    emailSubject: str
    documents: list[Document] = Field(default_factory=list)
    recipients: Recipients = Field(default_factory=Recipients)
    status: EnvelopeStatus = "sent"

    def to_payload(self) -> dict:
        """JSON body for the create-envelope endpoint."""
        return self.model_dump(mode="json", exclude_none=True)
