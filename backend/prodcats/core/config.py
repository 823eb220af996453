from pydantic_settings import BaseSettings
from typing import List, Union, Optional
from pydantic import field_validator


class Settings(BaseSettings):
    # Database
    DATABASE_URL: Optional[str] = None  # Full URL, overrides the POSTGRES_* parts
    POSTGRES_USER: str = "prodcats"
    POSTGRES_PASSWORD: str = "prodcats"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "prodcats"

    @property
    def SQLALCHEMY_DATABASE_URL(self) -> str:
        """Database URL, either given directly or built from components."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # Application
    DEBUG: bool = False  # Enables Swagger UI and SQL echo
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: Union[List[str], str] = ["http://localhost:4200"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            # Split by comma or keep as single item
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    # Startup
    CREATE_TABLES: bool = True  # Alembic is the production path
    SEED_DATA: bool = True  # Insert demo catalog when the store is empty

    # Search pagination
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 1000

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_DEFAULT: str = "100/minute"

    # Security headers
    ENABLE_HSTS: bool = False
    HSTS_MAX_AGE: int = 31536000  # 1 year in seconds

    @property
    def is_production(self) -> bool:
        return not self.DEBUG

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore extra fields in .env


settings = Settings()
