import secrets
import string
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

_ID_ALPHABET = string.ascii_lowercase + string.digits


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def generate_id(length: int = 7) -> str:
    """Short opaque base36 identifier for trips, members and expenses."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(length))


class CamelModel(BaseModel):
    """Serializes with camelCase field names, accepts either spelling on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True
    )
