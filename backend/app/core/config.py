"""
Centralized application configuration
"""
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings"""

    # API Settings
    API_TITLE: str = "BeerBro API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Storefront and admin console API for BeerBro"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Firebase / Firestore
    # Empty FIREBASE_CREDENTIALS_PATH means Application Default Credentials
    FIREBASE_PROJECT_ID: str = ""
    FIREBASE_CREDENTIALS_PATH: str = ""

    # CORS - Can be string (comma-separated) or JSON array
    # Example: "http://localhost:3000,https://yourdomain.com" or '["http://localhost:3000"]'
    ALLOWED_ORIGINS: Optional[str] = "http://localhost:3000"

    # Emails treated as admin even without the role custom claim
    ADMIN_EMAILS: Optional[str] = ""

    # Cart pricing
    TAX_RATE: float = 0.08
    FREE_SHIPPING_THRESHOLD: float = 50.0
    SHIPPING_COST: float = 5.99

    @staticmethod
    def _parse_list(raw: Optional[str]) -> List[str]:
        """Parse a JSON array or comma-separated string into a list"""
        if not raw:
            return []

        # Try JSON parse first (for array format)
        import json
        try:
            values = json.loads(raw)
            if isinstance(values, list):
                return [str(value).strip() for value in values]
        except (json.JSONDecodeError, ValueError):
            pass

        # Fall back to comma-separated string
        return [value.strip() for value in raw.split(",") if value.strip()]

    def get_allowed_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        return self._parse_list(self.ALLOWED_ORIGINS) or ["http://localhost:3000"]

    def get_admin_emails(self) -> List[str]:
        """Parse ADMIN_EMAILS into a lowercase list"""
        return [email.lower() for email in self._parse_list(self.ADMIN_EMAILS)]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
