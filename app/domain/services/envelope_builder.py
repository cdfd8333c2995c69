import logging
from pathlib import Path

from app.core.config import settings
from app.core.exceptions import EnvelopeValidationError
from app.domain.models.docusign_models import (
    CarbonCopy,
    Document,
    EnvelopeDefinition,
    Recipients,
    SignHere,
    Signer,
    Tabs,
)

logger = logging.getLogger(__name__)

EMAIL_SUBJECT = "Please sign this document set"
DOCX_FILE = "World_Wide_Corp_Battle_Plan_Trafalgar.docx"
PDF_FILE = "World_Wide_Corp_lorem.pdf"

# Anchor strings present in the documents
HTML_ANCHOR = "**signature_1**"
FILE_ANCHOR = "/sn1/"

ORDER_ACKNOWLEDGEMENT_TEMPLATE = """
<!DOCTYPE html>
<html>
    <head>
      <meta charset="UTF-8">
    </head>
    <body style="font-family:sans-serif;margin-left:2em;">
    <h1 style="font-family: 'Trebuchet MS', Helvetica, sans-serif;
        color: darkblue;margin-bottom: 0;">World Wide Corp</h1>
    <h2 style="font-family: 'Trebuchet MS', Helvetica, sans-serif;
      margin-top: 0px;margin-bottom: 3.5em;font-size: 1em;
      color: darkblue;">Order Processing Division</h2>
    <h4>Ordered by {signer_name}</h4>
    <p style="margin-top:0em; margin-bottom:0em;">Email: {signer_email}</p>
    <p style="margin-top:0em; margin-bottom:0em;">Copy to: {cc_name}, {cc_email}</p>
    <p style="margin-top:3em;">
Candy bonbon pastry jujubes lollipop wafer biscuit biscuit. Topping brownie sesame snaps sweet roll pie.
Croissant danish biscuit soufflé caramels jujubes jelly. Dragée danish caramels lemon drops dragée.
Gummi bears cupcake biscuit tiramisu sugar plum pastry. Dragée gummies applicake pudding liquorice.
Donut jujubes oat cake jelly-o. Dessert bear claw chocolate cake gummies lollipop sugar plum ice cream gummies cheesecake.
    </p>
    <!-- The anchor for the signature field is rendered in white. -->
    <h3 style="margin-top:3em;">Agreed: <span style="color:white;">{anchor}/</span></h3>
    </body>
</html>
"""


def render_order_acknowledgement(signer_email: str, signer_name: str, cc_email: str, cc_name: str) -> str:
    """Returns the HTML order acknowledgement used as document 1."""
    return ORDER_ACKNOWLEDGEMENT_TEMPLATE.format(
        signer_email=signer_email,
        signer_name=signer_name,
        cc_email=cc_email,
        cc_name=cc_name,
        anchor=HTML_ANCHOR,
    )


def _read_demo_file(docs_path: Path, file_name: str) -> bytes:
    path = docs_path / file_name
    if not path.is_file():
        logger.error("Demo document not found: %s", path)
        raise FileNotFoundError(f"Demo document not found: {path}")
    return path.read_bytes()


def build_envelope(
    signer_email: str,
    signer_name: str,
    cc_email: str,
    cc_name: str,
    demo_docs_path: str | Path | None = None,
) -> EnvelopeDefinition:
    """
    Builds the three-document envelope for one signer and one cc recipient.

    Document 1 (html) carries the anchor **signature_1**, documents 2 (docx)
    and 3 (pdf) carry /sn1/. The signer receives the envelope first; the cc
    recipient gets a copy once it has been signed.

    Raises:
        EnvelopeValidationError: if a recipient field is empty.
        FileNotFoundError: if a demo document is missing.
    """
    args = {
        "signer_email": signer_email,
        "signer_name": signer_name,
        "cc_email": cc_email,
        "cc_name": cc_name,
    }
    empty = [name for name, value in args.items() if not value or not str(value).strip()]
    if empty:
        raise EnvelopeValidationError(f"Missing envelope recipient fields: {', '.join(empty)}")

    docs_path = Path(demo_docs_path or settings.DEMO_DOCS_PATH)
    docx_bytes = _read_demo_file(docs_path, DOCX_FILE)
    pdf_bytes = _read_demo_file(docs_path, PDF_FILE)

    # The order of the list is the order of the documents in the envelope
    documents = [
        Document.from_bytes("1", "Order acknowledgement", "html", render_order_acknowledgement(**args).encode("utf-8")),
        Document.from_bytes("2", "Battle Plan", "docx", docx_bytes),
        Document.from_bytes("3", "Lorem Ipsum", "pdf", pdf_bytes),
    ]

    # Anchors are matched across every document in the envelope, so the
    # /sn1/ tab is placed on both the docx and the pdf.
    tabs = Tabs(signHereTabs=[
        SignHere(anchorString=HTML_ANCHOR, anchorXOffset=20, anchorYOffset=10),
        SignHere(anchorString=FILE_ANCHOR, anchorXOffset=20, anchorYOffset=10),
    ])

    signer = Signer(email=signer_email, name=signer_name, recipientId="1", routingOrder=1, tabs=tabs)
    cc = CarbonCopy(email=cc_email, name=cc_name, recipientId="2", routingOrder=2)

    return EnvelopeDefinition(
        emailSubject=EMAIL_SUBJECT,
        documents=documents,
        recipients=Recipients(signers=[signer], carbonCopies=[cc]),
        # "created" would leave the envelope as a draft
        status="sent",
    )
