"""
Configuration settings for the Onboarding Gateway application.
Uses pydantic-settings for environment variable management.
"""

from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Twilio account
    twilio_account_sid: Optional[str] = None
    twilio_verify_service_sid: Optional[str] = None

    # Either an API key pair or the account auth token
    twilio_api_key_sid: Optional[str] = None
    twilio_api_key_secret: Optional[str] = None
    twilio_auth_token: Optional[str] = None

    # Server settings
    server_host: str = "0.0.0.0"
    server_port: int = 3000
    environment: str = "development"
    trust_proxy: bool = True
    cors_origins: List[str] = ["*"]

    # Logging
    log_level: str = "INFO"

    # Static assets served under /static
    static_dir: str = "public"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def uses_api_key(self) -> bool:
        """True when the API key pair is complete and takes precedence over the auth token."""
        return bool(self.twilio_api_key_sid and self.twilio_api_key_secret)

    def missing_credentials(self) -> List[str]:
        """
        List the environment variables still needed to talk to Twilio.

        Returns:
            Variable names, empty when the configuration is complete
        """
        missing = []
        if not self.twilio_account_sid:
            missing.append("TWILIO_ACCOUNT_SID")
        if not self.twilio_verify_service_sid:
            missing.append("TWILIO_VERIFY_SERVICE_SID")

        if not self.uses_api_key and not self.twilio_auth_token:
            if self.twilio_api_key_sid or self.twilio_api_key_secret:
                # Half an API key pair: report the missing half
                if not self.twilio_api_key_sid:
                    missing.append("TWILIO_API_KEY_SID")
                if not self.twilio_api_key_secret:
                    missing.append("TWILIO_API_KEY_SECRET")
            else:
                missing.append("TWILIO_AUTH_TOKEN")

        return missing


# Global settings instance
settings = Settings()
