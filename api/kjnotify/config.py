from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Twilio
    twilio_account_sid: str = ""
    twilio_auth_token: str = ""
    twilio_phone_number: str = ""
    twilio_whatsapp_number: str = ""
    twilio_api_base: str = "https://api.twilio.com/2010-04-01"
    twilio_timeout_seconds: float = 15

    app_name: str = "KJ Notify"
    # Shown in verification code texts
    app_brand_name: str = "KJ Delivery"

    log_level: str = "INFO"

    # Largest accepted request body, in bytes
    max_body_bytes: int = 64 * 1024

    model_config = {"env_file": ".env", "extra": "ignore", "frozen": True}

    def missing_credentials(self) -> list[str]:
        """Names of the Twilio variables that are not set."""
        required = {
            "TWILIO_ACCOUNT_SID": self.twilio_account_sid,
            "TWILIO_AUTH_TOKEN": self.twilio_auth_token,
            "TWILIO_PHONE_NUMBER": self.twilio_phone_number,
            "TWILIO_WHATSAPP_NUMBER": self.twilio_whatsapp_number,
        }
        return [name for name, value in required.items() if not value]


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()
