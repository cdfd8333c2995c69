import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings:
    """
    Application settings, read from the environment (and a local .env file).
    """

    def __init__(self):
        # DocuSign JWT grant
        self.DOCUSIGN_INTEGRATION_KEY: str | None = os.getenv("DOCUSIGN_INTEGRATION_KEY")
        self.DOCUSIGN_USER_ID: str | None = os.getenv("DOCUSIGN_USER_ID")
        self.DOCUSIGN_ACCOUNT_ID: str | None = os.getenv("DOCUSIGN_ACCOUNT_ID")
        self.DOCUSIGN_OAUTH_BASE_URL: str = os.getenv("DOCUSIGN_OAUTH_BASE_URL", "https://account-d.docusign.com")
        self.DOCUSIGN_API_BASE_URL: str | None = os.getenv("DOCUSIGN_API_BASE_URL")
        self.DOCUSIGN_REDIRECT_URI: str = os.getenv("DOCUSIGN_REDIRECT_URI", "https://www.docusign.com")
        self.PRIVATE_KEY: str | None = os.getenv("PRIVATE_KEY")
        self.DOCUSIGN_PRIVATE_KEY_PATH: str | None = os.getenv("DOCUSIGN_PRIVATE_KEY_PATH")

        # Recipients used by the example runner
        self.DOCUSIGN_SIGNER_EMAIL: str | None = os.getenv("DOCUSIGN_SIGNER_EMAIL")
        self.DOCUSIGN_SIGNER_NAME: str | None = os.getenv("DOCUSIGN_SIGNER_NAME")
        self.DOCUSIGN_CC_EMAIL: str | None = os.getenv("DOCUSIGN_CC_EMAIL")
        self.DOCUSIGN_CC_NAME: str | None = os.getenv("DOCUSIGN_CC_NAME")

        # Local inputs and runtime
        self.DEMO_DOCS_PATH: str = os.getenv("DEMO_DOCS_PATH", str(PROJECT_ROOT / "demo_documents"))
        self.HTTP_TIMEOUT: float = float(os.getenv("HTTP_TIMEOUT", "30"))
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def missing(self) -> list[str]:
        """Names of the required JWT settings that are not set."""
        missing = [
            name
            for name in ("DOCUSIGN_INTEGRATION_KEY", "DOCUSIGN_USER_ID")
            if not getattr(self, name)
        ]
        if not self.PRIVATE_KEY and not self.DOCUSIGN_PRIVATE_KEY_PATH:
            missing.append("PRIVATE_KEY")
        return missing

    def recipient_args(self) -> dict[str, str | None]:
        return {
            "signer_email": self.DOCUSIGN_SIGNER_EMAIL,
            "signer_name": self.DOCUSIGN_SIGNER_NAME,
            "cc_email": self.DOCUSIGN_CC_EMAIL,
            "cc_name": self.DOCUSIGN_CC_NAME,
        }


settings = Settings()
