from __future__ import annotations
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Environment
    ENV: str = Field(default="dev")

    # Database
    DATABASE_URL: str = Field(default="sqlite:///./credstore.db")

    # Hashing (bcrypt accepts a cost factor between 4 and 31)
    BCRYPT_ROUNDS: int = Field(default=12, ge=4, le=31)

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def is_dev(self) -> bool:
        return self.ENV.lower() == "dev"

    def validate_for_runtime(self) -> None:
        """Perform basic security checks based on the current environment.

        Outside dev this raises if the bcrypt cost factor is too low to be
        used for real passwords.
        """
        if self.is_dev:
            return

        if self.BCRYPT_ROUNDS < 10:
            raise RuntimeError(
                "BCRYPT_ROUNDS is set below 10. "
                "Use a cost factor of at least 10 for non-dev deployments."
            )


settings = Settings()
