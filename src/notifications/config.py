"""Mailer settings, read from ``SHOPCART_MAILER_*`` environment variables or ``.env``.

Credentials never appear in code: the SMTP adapter receives them from here.
List values (``SHOPCART_MAILER_MANAGER_RECIPIENTS``) are given as JSON arrays.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class MailerSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="SHOPCART_MAILER_", extra="ignore")

    backend: Literal["fake", "smtp"] = "fake"

    host: str = "localhost"
    port: int = 587
    username: str | None = None
    password: SecretStr | None = None
    use_tls: bool = True
    timeout_seconds: float = 10.0

    sender: str = "orders@shopcart.local"
    manager_recipients: list[str] = Field(default_factory=lambda: ["managers@shopcart.local"])
    store_name: str = "ShopCart"

    def model_post_init(self, __context) -> None:
        if self.backend == "smtp" and not self.manager_recipients:
            raise ValueError("SHOPCART_MAILER_MANAGER_RECIPIENTS must list at least one address")


@lru_cache(maxsize=1)
def get_mailer_settings() -> MailerSettings:
    return MailerSettings()
