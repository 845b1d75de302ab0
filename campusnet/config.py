from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Database
    DATABASE_URL: str = "sqlite:///./campusnet.db"

    # API
    API_TITLE: str = "Campus Social API"
    API_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Security
    SECRET_KEY: str
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7

    # Comma separated list, empty means registration is open to any domain
    ALLOWED_EMAIL_DOMAINS: str = ""

    # Feeds
    TRENDING_LIMIT: int = 20

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def allowed_email_domains(self) -> List[str]:
        return [
            domain.strip().lower()
            for domain in self.ALLOWED_EMAIL_DOMAINS.split(",")
            if domain.strip()
        ]


# Create settings instance
settings = Settings()
