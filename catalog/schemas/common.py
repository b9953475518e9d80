"""Shared schema configuration and validators."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema: camelCase on the wire, readable from ORM objects."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )


def require_text(value: str, message: str) -> str:
    """Reject blank strings without altering the stored value."""
    if not value.strip():
        raise ValueError(message)
    return value
