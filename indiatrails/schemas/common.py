"""Shared schema base and field checks used by the request schemas."""

from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python. Input accepts both."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def require_text(value: str, label: str) -> str:
    if not value or not value.strip():
        raise ValueError(f"{label} is required.")
    return value


def optional_absolute_url(value: str | None, label: str) -> str | None:
    """Blank means no image; anything else must be an absolute URL."""
    if value is None or not value.strip():
        return None
    parsed = urlparse(value.strip())
    if not parsed.scheme or not parsed.netloc:
        raise ValueError(f"{label} must be a valid URL.")
    return value.strip()
