"""Tests for the envelope request models and their wire format."""

import base64

import pytest
from pydantic import ValidationError

from app.domain.models.docusign_models import (
    CarbonCopy,
    Document,
    EnvelopeDefinition,
    Recipients,
    SignHere,
    Signer,
    Tabs,
)


def _envelope() -> EnvelopeDefinition:
    signer = Signer(
        email="a@example.com",
        name="A",
        recipientId="1",
        routingOrder=1,
        tabs=Tabs(signHereTabs=[SignHere(anchorString="/sn1/", anchorXOffset=20, anchorYOffset=10)]),
    )
    cc = CarbonCopy(email="b@example.com", name="B", recipientId="2", routingOrder=2)
    return EnvelopeDefinition(
        emailSubject="Subject",
        documents=[Document.from_bytes("1", "Doc", "pdf", b"%PDF-1.4")],
        recipients=Recipients(signers=[signer], carbonCopies=[cc]),
    )


class TestDocument:
    def test_from_bytes_encodes_base64(self):
        doc = Document.from_bytes("2", "Battle Plan", "docx", b"hello")
        assert doc.documentBase64 == base64.b64encode(b"hello").decode("ascii")
        assert doc.content == b"hello"

    def test_unknown_extension_rejected(self):
        with pytest.raises(ValidationError):
            Document.from_bytes("1", "Doc", "exe", b"")


class TestPayload:
    def test_numbers_serialized_as_strings(self):
        payload = _envelope().to_payload()
        signer = payload["recipients"]["signers"][0]
        tab = signer["tabs"]["signHereTabs"][0]

        assert signer["routingOrder"] == "1"
        assert payload["recipients"]["carbonCopies"][0]["routingOrder"] == "2"
        assert tab == {
            "anchorString": "/sn1/",
            "anchorXOffset": "20",
            "anchorYOffset": "10",
            "anchorUnits": "pixels",
        }

    def test_cc_has_no_tabs_key(self):
        payload = _envelope().to_payload()
        assert "tabs" not in payload["recipients"]["carbonCopies"][0]

    def test_top_level_fields(self):
        payload = _envelope().to_payload()
        assert payload["status"] == "sent"
        assert payload["emailSubject"] == "Subject"
        assert payload["documents"][0]["documentId"] == "1"

    def test_status_restricted(self):
        with pytest.raises(ValidationError):
            EnvelopeDefinition(emailSubject="x", status="completed")

    def test_anchor_units_fixed_to_pixels(self):
        with pytest.raises(ValidationError):
            SignHere(anchorString="x", anchorUnits="inches")
