from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CATBOARD_", extra="ignore")

    log_level: str = "WARNING"

    pdf_engine: str = "pdfplumber"

    ocr_helper_name: str = "catboard-ocr"
