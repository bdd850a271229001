"""
Centralized application configuration
"""
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings"""

    # API Settings
    API_TITLE: str = "Store Admin API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Store API for the e-commerce admin dashboard"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_DEBUG: bool = True

    # Database
    DATABASE_URL: str = "sqlite:///./store_admin.db"

    # CORS - Can be string (comma-separated) or JSON array
    # Example: "http://localhost:3000,https://yourdomain.com" or '["http://localhost:3000"]'
    ALLOWED_ORIGINS: Optional[str] = "http://localhost:3000,http://localhost:3001"

    def get_allowed_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        if not self.ALLOWED_ORIGINS:
            return ["http://localhost:3000"]

        # Try JSON parse first (for array format)
        import json
        try:
            origins = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(origins, list):
                return origins
        except (json.JSONDecodeError, ValueError):
            pass

        # Fall back to comma-separated string
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]

    # Dashboard client
    DASHBOARD_API_URL: str = "http://localhost:8000"
    DASHBOARD_TIMEOUT_SECONDS: float = 30.0

    # Display formatting (id-ID style: "Rp 10.000,00")
    CURRENCY_SYMBOL: str = "Rp"
    CURRENCY_DECIMALS: int = 2

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
