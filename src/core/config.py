from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://api.upbit.com"
DEFAULT_PROXY_BASE_URL = "http://localhost:5173/api/upbit"


class UpbitSettings(BaseSettings):
    # Read once from UPBIT_* environment variables (or .env); immutable afterwards
    model_config = SettingsConfigDict(
        env_prefix="UPBIT_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    api_url: str = Field(DEFAULT_API_URL, description="Upbit REST API root.")

    use_proxy: bool = Field(
        False,
        description="Route every request through proxy_base_url (local development).",
    )

    proxy_base_url: str = Field(
        DEFAULT_PROXY_BASE_URL,
        description="Development proxy root that forwards to the Upbit API.",
    )

    access_key: Optional[str] = Field(None, repr=False, description="Exchange API access key.")

    secret_key: Optional[str] = Field(None, repr=False, description="Exchange API secret key.")

    @property
    def base_url(self) -> str:
        root = self.proxy_base_url if self.use_proxy else self.api_url
        return root.rstrip("/")

    @property
    def has_credentials(self) -> bool:
        return bool(self.access_key) and bool(self.secret_key)
