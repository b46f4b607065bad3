# core/settings/base_settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class OrdersBaseSettings(BaseSettings):
    """
    Shared configuration for every settings section.

    Values come from the process environment, then from ``.env``.
    Fields declare their exact variable name as an alias.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )
