from typing import Optional

from pydantic import BaseModel, Field, HttpUrl, field_validator

PREFIX = "RESTPOINT_"
DEFAULT_TIMEOUT = 15.0


class HostConfig(BaseModel):
    base_url: str
    default_headers: dict[str, str] = Field(default_factory=dict)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    ca_bundle: Optional[str] = None

    @field_validator("base_url", mode="before")
    @classmethod
    def validate_url(cls, value: str) -> str:
        # only validated; the URL is kept exactly as given so its path is preserved
        HttpUrl(str(value))
        return str(value)
