"""Application settings loaded from environment variables."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _env_file() -> str | None:
    if os.getenv("PYTEST_CURRENT_TEST"):
        return None
    return ".env"


class Settings(BaseSettings):
    """Shopping assistant configuration. All values come from environment variables."""

    # Replies
    reply_delay_seconds: float = Field(default=1.5, ge=0)
    # "live" reads filters when the reply is composed, "snapshot" when the user submits
    filter_read: str = Field(default="live")
    # "reject" or "queue" submissions that arrive while a reply is pending
    busy_policy: str = Field(default="reject")
    cancel_replies_on_reset: bool = Field(default=False)

    # Logging
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_prefix="SHOPASSIST_", env_file=_env_file(), env_file_encoding="utf-8"
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        if os.getenv("PYTEST_CURRENT_TEST"):
            return (init_settings,)
        return (init_settings, env_settings, dotenv_settings, file_secret_settings)


settings = Settings()
