from dotenv import load_dotenv
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings
from typing import ClassVar, List

# Load environment variables from .env file
load_dotenv(".env")


class Settings(BaseSettings):
    """Class to store all the settings of the Contact Portal application."""

    # ------------------------------
    # Database
    # ------------------------------
    DATABASE_URL: str = Field(default="postgresql+asyncpg://localhost:5432/contact_portal")
    DB_ECHO: bool = Field(default=False)

    # ------------------------------
    # Server
    # ------------------------------
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=5000)

    # ------------------------------
    # Auth
    # ------------------------------
    SECRET_KEY: str = Field(
        default="dev-secret-key",
        validation_alias=AliasChoices("SECRET_KEY", "JWT_SECRET"),
    )
    ALGORITHM: str = Field(default="HS256")

    # ------------------------------
    # Database models
    # ------------------------------
    DB_MODELS: ClassVar[List[str]] = [
        "contact_portal.models.user",
        "contact_portal.models.contact",
    ]

    class Config:
        """Configuration for the settings class."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Instantiate the settings
settings = Settings()
