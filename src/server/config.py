"""
Configuration management for the meeting summary service.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass
class ServiceConfig:
    """Configuration for the meeting summary service."""

    # Generative language API (Gemini)
    gemini_api_key: str = ""
    gemini_model: str = "gemini-1.5-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"

    # SMTP relay account
    email_user: str = ""
    email_pass: str = ""
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587

    # Upload staging
    upload_dir: str = "uploads"
    max_upload_bytes: int = 5 * 1024 * 1024  # 5 MiB

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> "ServiceConfig":
        """Create configuration from environment variables (and a .env file if present)."""
        load_dotenv(dotenv_path)
        return cls(
            gemini_api_key=os.getenv("GEMINI_API_KEY", cls.gemini_api_key),
            gemini_model=os.getenv("GEMINI_MODEL", cls.gemini_model),
            gemini_base_url=os.getenv("GEMINI_BASE_URL", cls.gemini_base_url),
            email_user=os.getenv("EMAIL_USER", cls.email_user),
            email_pass=os.getenv("EMAIL_PASS", cls.email_pass),
            smtp_host=os.getenv("SMTP_HOST", cls.smtp_host),
            smtp_port=int(os.getenv("SMTP_PORT", cls.smtp_port)),
            upload_dir=os.getenv("UPLOAD_DIR", cls.upload_dir),
            max_upload_bytes=int(os.getenv("MAX_UPLOAD_BYTES", cls.max_upload_bytes)),
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", cls.port)),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
        )
